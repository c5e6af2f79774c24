from django.db.models import Count
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, filters

from customers.permissions import IsAdmin
from eshift_core.mixins import PolicedDeleteMixin
from fleet.models import TransportUnit
from fleet.serializers import TransportUnitSerializer, TransportUnitDetailSerializer


class TransportUnitViewSet(PolicedDeleteMixin, viewsets.ModelViewSet):
    """
    API endpoint for managing transport units.

    Deleting a unit is refused with 409 while any load still references it.
    """
    queryset = TransportUnit.objects.select_related('lorry', 'driver', 'assistant', 'container')
    serializer_class = TransportUnitSerializer
    permission_classes = [IsAdmin]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['lorry', 'driver', 'assistant', 'container']
    search_fields = ['unit_number', 'lorry__number_plate', 'driver__name']
    ordering_fields = ['unit_number']
    ordering = ['unit_number']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return TransportUnitDetailSerializer
        return super().get_serializer_class()

    def get_queryset(self):
        queryset = super().get_queryset().annotate(load_count=Count('loads'))
        if self.request.query_params.get('unassigned') == 'true':
            queryset = queryset.filter(load_count=0)
        return queryset
