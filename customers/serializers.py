from rest_framework import serializers

from customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = ['id', 'name', 'email', 'phone', 'address', 'created_at']
        read_only_fields = ['created_at']


class RegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=100)
    password = serializers.CharField(write_only=True, min_length=8, style={'input_type': 'password'})
    name = serializers.CharField(max_length=100)
    phone = serializers.RegexField(r'^\+?[0-9 ()-]{6,20}$', max_length=20)
    address = serializers.CharField(max_length=255)
