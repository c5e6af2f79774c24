from rest_framework import serializers

from fleet.models import TransportUnit
from fleet.serializers.resources import (
    LorrySerializer,
    DriverSerializer,
    AssistantSerializer,
    ContainerSerializer,
)


class TransportUnitSerializer(serializers.ModelSerializer):
    label = serializers.CharField(read_only=True)
    load_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = TransportUnit
        fields = ['id', 'unit_number', 'lorry', 'driver', 'assistant', 'container', 'label', 'load_count']


class TransportUnitDetailSerializer(TransportUnitSerializer):
    lorry = LorrySerializer(read_only=True)
    driver = DriverSerializer(read_only=True)
    assistant = AssistantSerializer(read_only=True)
    container = ContainerSerializer(read_only=True)
