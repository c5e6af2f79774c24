from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from assignment.serializers import (
    AssignmentSerializer,
    AssignTransportUnitSerializer,
    TransportUnitChoiceSerializer,
)
from assignment.services.assignment_service import (
    assign_transport_unit,
    unassign_transport_unit,
    transport_unit_choices,
)
from customers.identity import caller_from_request
from customers.permissions import IsAdmin
from jobs.models import Load


class AssignmentViewSet(mixins.ListModelMixin,
                        mixins.RetrieveModelMixin,
                        viewsets.GenericViewSet):
    """
    Assign transport units to loads.

    POST /api/assignments/loads/{id}/assign/ {"transport_unit_id": 3}
    POST /api/assignments/loads/{id}/unassign/
    GET  /api/assignments/loads/transport_units/
    """
    queryset = Load.objects.select_related('transport_unit__lorry', 'transport_unit__driver')
    serializer_class = AssignmentSerializer
    permission_classes = [IsAdmin]
    lookup_value_regex = r'\d+'
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['status', 'job', 'transport_unit']
    ordering_fields = ['pickup_date', 'load_number']
    ordering = ['-pickup_date', '-id']

    def _render(self, load):
        return Response(self.get_serializer(self.get_queryset().get(pk=load.pk)).data)

    @swagger_auto_schema(request_body=AssignTransportUnitSerializer, responses={200: AssignmentSerializer})
    @action(detail=True, methods=['post'])
    def assign(self, request, pk=None):
        serializer = AssignTransportUnitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        load = assign_transport_unit(
            caller_from_request(request), pk, serializer.validated_data['transport_unit_id']
        )
        return self._render(load)

    @swagger_auto_schema(request_body=None, responses={200: AssignmentSerializer})
    @action(detail=True, methods=['post'])
    def unassign(self, request, pk=None):
        load = unassign_transport_unit(caller_from_request(request), pk)
        return self._render(load)

    @swagger_auto_schema(responses={200: TransportUnitChoiceSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def transport_units(self, request):
        return Response(TransportUnitChoiceSerializer(transport_unit_choices(), many=True).data)
