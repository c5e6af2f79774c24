from rest_framework import serializers

from jobs.models import Load, LoadProduct


class LoadProductSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_category = serializers.CharField(source='product.category', read_only=True)

    class Meta:
        model = LoadProduct
        fields = ['id', 'product', 'product_name', 'product_category', 'quantity']


class LoadSerializer(serializers.ModelSerializer):
    transport_unit_label = serializers.CharField(source='transport_unit.label', read_only=True, default=None)

    class Meta:
        model = Load
        fields = [
            'id', 'job', 'load_number', 'description', 'weight_kg',
            'pickup_date', 'delivery_date', 'status',
            'transport_unit', 'transport_unit_label', 'version',
        ]
        read_only_fields = fields


class LoadDetailSerializer(LoadSerializer):
    load_products = LoadProductSerializer(many=True, read_only=True)

    class Meta(LoadSerializer.Meta):
        fields = LoadSerializer.Meta.fields + ['load_products']
        read_only_fields = fields


class LoadDeliverySerializer(serializers.Serializer):
    delivery_date = serializers.DateField(required=False)
