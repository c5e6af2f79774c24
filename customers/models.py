from django.conf import settings
from django.db import models
from django.utils import timezone


class Customer(models.Model):
    """
    A customer account, keyed by the auth user that registered it.

    Owns jobs (deleted with the customer) and products (which block the
    customer's deletion while any exist).
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='customer',
    )
    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=100)
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=255)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name} <{self.email}>"
