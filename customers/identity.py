"""
Caller identity passed explicitly into every core operation.

The API layer resolves it once per request from the authenticated user;
services never look at the request or session themselves.
"""
from dataclasses import dataclass
from typing import FrozenSet, Optional

from eshift_core.exceptions import Unauthorized

ADMIN = 'Admin'
CUSTOMER = 'Customer'
ROLES = (ADMIN, CUSTOMER)


@dataclass(frozen=True)
class Caller:
    user_id: Optional[str]
    roles: FrozenSet[str] = frozenset()
    customer_id: Optional[int] = None

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def is_admin(self) -> bool:
        return self.has_role(ADMIN)

    @property
    def is_customer(self) -> bool:
        return self.has_role(CUSTOMER)

    def require_role(self, role: str) -> None:
        if not self.has_role(role):
            raise Unauthorized(f"The {role} role is required for this operation.")

    def require_customer(self) -> int:
        """Customer id of a Customer-role caller with a provisioned profile."""
        self.require_role(CUSTOMER)
        if self.customer_id is None:
            raise Unauthorized("Your customer profile is incomplete.")
        return self.customer_id


ANONYMOUS = Caller(user_id=None)


def resolve_customer_id(user_id) -> Optional[int]:
    from customers.models import Customer
    return Customer.objects.filter(user_id=user_id).values_list('id', flat=True).first()


def caller_for_user(user) -> Caller:
    if user is None or not user.is_authenticated:
        return ANONYMOUS

    roles = set(user.groups.filter(name__in=ROLES).values_list('name', flat=True))
    if user.is_superuser:
        roles.add(ADMIN)
    return Caller(
        user_id=str(user.pk),
        roles=frozenset(roles),
        customer_id=resolve_customer_id(user.pk),
    )


def caller_from_request(request) -> Caller:
    caller = getattr(request, '_eshift_caller', None)
    if caller is None:
        caller = caller_for_user(getattr(request, 'user', None))
        request._eshift_caller = caller
    return caller
