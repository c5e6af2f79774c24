from decimal import Decimal

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from customers.models import Customer
from eshift_core.deletion import on_delete_for
from jobs.models.load import Load


class Product(models.Model):
    """
    An itemized piece of cargo owned by a customer.

    ``is_valid`` is set by administrators only.
    """
    customer = models.ForeignKey(
        Customer, on_delete=on_delete_for('jobs.Product', 'customer'), related_name='products'
    )
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50, blank=True)
    description = models.CharField(max_length=500, blank=True)
    weight_kg = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01')), MaxValueValidator(Decimal('1000.00'))],
        help_text="Unit weight in kilograms",
    )
    is_valid = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self):
        return self.name


class LoadProduct(models.Model):
    # Identity is the surrogate key; duplicate (load, product) links are allowed.
    load = models.ForeignKey(
        Load, on_delete=on_delete_for('jobs.LoadProduct', 'load'), related_name='load_products'
    )
    product = models.ForeignKey(
        Product, on_delete=on_delete_for('jobs.LoadProduct', 'product'), related_name='load_products'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    def __str__(self):
        return f"{self.quantity} x {self.product} in {self.load}"
