from decimal import Decimal

from rest_framework import serializers


class ProductInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    category = serializers.CharField(max_length=50, allow_blank=True, default='')
    description = serializers.CharField(max_length=500, allow_blank=True, default='')
    weight_kg = serializers.DecimalField(
        max_digits=6, decimal_places=2, min_value=Decimal('0.01'), max_value=Decimal('1000.00')
    )
    quantity = serializers.IntegerField(min_value=1)


class LoadInputSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=250, allow_blank=True, default='')
    weight_kg = serializers.DecimalField(
        max_digits=7, decimal_places=2, min_value=Decimal('0.01'), max_value=Decimal('10000.00')
    )
    pickup_date = serializers.DateField()
    products = ProductInputSerializer(many=True, allow_empty=False)


class JobRequestSerializer(serializers.Serializer):
    """
    A customer's job request: the job, its loads, and each load's products.

    Every load needs at least one product and every request at least one load.
    """
    customer_id = serializers.IntegerField()
    start_location = serializers.CharField(max_length=100)
    destination = serializers.CharField(max_length=100)
    job_date = serializers.DateField()
    loads = LoadInputSerializer(many=True, allow_empty=False)
