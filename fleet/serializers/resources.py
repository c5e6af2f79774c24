from rest_framework import serializers

from fleet.models import Lorry, Driver, Assistant, Container


class LorrySerializer(serializers.ModelSerializer):
    class Meta:
        model = Lorry
        fields = ['id', 'number_plate', 'model']


class DriverSerializer(serializers.ModelSerializer):
    class Meta:
        model = Driver
        fields = ['id', 'name', 'license_number', 'phone']


class AssistantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Assistant
        fields = ['id', 'name', 'phone']


class ContainerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Container
        fields = ['id', 'container_number']
