from rest_framework import viewsets, filters

from customers.permissions import IsAdmin
from eshift_core.mixins import PolicedDeleteMixin
from fleet.models import Lorry, Driver, Assistant, Container
from fleet.serializers import (
    LorrySerializer,
    DriverSerializer,
    AssistantSerializer,
    ContainerSerializer,
)


class FleetResourceViewSet(PolicedDeleteMixin, viewsets.ModelViewSet):
    """
    Admin CRUD for the reference entities transport units are built from.
    """
    permission_classes = [IsAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]


class LorryViewSet(FleetResourceViewSet):
    queryset = Lorry.objects.all()
    serializer_class = LorrySerializer
    search_fields = ['number_plate', 'model']
    ordering_fields = ['number_plate', 'model']


class DriverViewSet(FleetResourceViewSet):
    queryset = Driver.objects.all()
    serializer_class = DriverSerializer
    search_fields = ['name', 'license_number', 'phone']
    ordering_fields = ['name']


class AssistantViewSet(FleetResourceViewSet):
    queryset = Assistant.objects.all()
    serializer_class = AssistantSerializer
    search_fields = ['name', 'phone']
    ordering_fields = ['name']


class ContainerViewSet(FleetResourceViewSet):
    queryset = Container.objects.all()
    serializer_class = ContainerSerializer
    search_fields = ['container_number']
    ordering_fields = ['container_number']
