from rest_framework import serializers

from jobs.models import Product


class ProductSerializer(serializers.ModelSerializer):
    customer_name = serializers.CharField(source='customer.name', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'customer', 'customer_name', 'name', 'category', 'description',
            'weight_kg', 'is_valid', 'created_at',
        ]
        read_only_fields = ['customer', 'created_at']


class MyProductSerializer(serializers.ModelSerializer):
    """Customer-facing product; validation is reserved to administrators."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'category', 'description', 'weight_kg', 'is_valid', 'created_at']
        read_only_fields = ['is_valid', 'created_at']
