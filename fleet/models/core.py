from django.core.validators import RegexValidator
from django.db import models

phone_validator = RegexValidator(r'^\+?[0-9 ()-]{6,20}$', 'Invalid phone number format.')


class Lorry(models.Model):
    """
    A lorry that can back any number of transport units.
    """
    number_plate = models.CharField(max_length=50)
    model = models.CharField(max_length=100)

    def __str__(self):
        return f"{self.number_plate} ({self.model})"

    class Meta:
        ordering = ['number_plate']
        verbose_name_plural = "Lorries"


class Driver(models.Model):
    name = models.CharField(max_length=100)
    license_number = models.CharField(max_length=50)
    phone = models.CharField(max_length=20, blank=True, validators=[phone_validator])

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class Assistant(models.Model):
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20, blank=True, validators=[phone_validator])

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class Container(models.Model):
    container_number = models.CharField(max_length=50)

    def __str__(self):
        return self.container_number

    class Meta:
        ordering = ['container_number']
