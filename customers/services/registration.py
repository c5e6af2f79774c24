import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import transaction
from rest_framework.exceptions import ValidationError

from customers.identity import CUSTOMER
from customers.models import Customer

logger = logging.getLogger(__name__)


def provision_customer(user, *, name, email, phone, address):
    """Create the one Customer row belonging to ``user``."""
    if Customer.objects.filter(user=user).exists():
        raise ValidationError({'user': ['A customer profile already exists for this account.']})
    customer = Customer.objects.create(
        user=user, name=name, email=email, phone=phone, address=address
    )
    logger.info(f"Provisioned customer {customer.id} for user {user.pk}")
    return customer


@transaction.atomic
def register_customer(*, email, password, name, phone, address):
    """
    Register a new customer account.

    Creates the auth user (username = e-mail), adds it to the Customer group
    and provisions its Customer profile, all or nothing.
    """
    User = get_user_model()
    if User.objects.filter(username__iexact=email).exists():
        raise ValidationError({'email': ['An account with this email already exists.']})

    user = User.objects.create_user(username=email, email=email, password=password)
    group, _ = Group.objects.get_or_create(name=CUSTOMER)
    user.groups.add(group)

    return provision_customer(user, name=name, email=email, phone=phone, address=address)
