from rest_framework.permissions import BasePermission

from customers.identity import caller_from_request


class IsAdmin(BasePermission):
    message = 'Administrator role required.'

    def has_permission(self, request, view):
        return caller_from_request(request).is_admin


class IsCustomer(BasePermission):
    message = 'Customer role required.'

    def has_permission(self, request, view):
        return caller_from_request(request).is_customer
