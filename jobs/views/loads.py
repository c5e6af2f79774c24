import logging

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from customers.permissions import IsAdmin
from eshift_core.mixins import PolicedDeleteMixin
from jobs.models import Load
from jobs.serializers import LoadSerializer, LoadDetailSerializer, LoadDeliverySerializer

logger = logging.getLogger(__name__)


class LoadViewSet(PolicedDeleteMixin,
                  mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    """
    Admin view of loads, with the pick-up, delivery and cancellation steps.

    Transport unit assignment lives in the assignment API.
    """
    queryset = Load.objects.select_related('job', 'transport_unit__lorry', 'transport_unit__driver')
    serializer_class = LoadSerializer
    permission_classes = [IsAdmin]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['status', 'job', 'transport_unit']
    search_fields = ['load_number', 'description']
    ordering_fields = ['pickup_date', 'delivery_date', 'weight_kg']
    ordering = ['-pickup_date', '-id']

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('load_products__product')
        return queryset

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return LoadDetailSerializer
        return super().get_serializer_class()

    def _transitioned(self, load, transition):
        previous = load.status
        transition()
        logger.info(f"Load {load.load_number} moved from {previous} to {load.status}")
        return Response(LoadSerializer(load).data)

    @swagger_auto_schema(request_body=None, responses={200: LoadSerializer})
    @action(detail=True, methods=['post'])
    def mark_picked_up(self, request, pk=None):
        load = self.get_object()
        return self._transitioned(load, load.mark_picked_up)

    @swagger_auto_schema(request_body=LoadDeliverySerializer, responses={200: LoadSerializer})
    @action(detail=True, methods=['post'])
    def mark_delivered(self, request, pk=None):
        load = self.get_object()
        serializer = LoadDeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        delivery_date = serializer.validated_data.get('delivery_date')
        return self._transitioned(load, lambda: load.mark_delivered(delivery_date))

    @swagger_auto_schema(request_body=None, responses={200: LoadSerializer})
    @action(detail=True, methods=['post'])
    def mark_cancelled(self, request, pk=None):
        load = self.get_object()
        return self._transitioned(load, load.mark_cancelled)
