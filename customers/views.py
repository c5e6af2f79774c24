from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, mixins, status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from customers.models import Customer
from customers.permissions import IsAdmin
from customers.serializers import CustomerSerializer, RegistrationSerializer
from customers.services.registration import register_customer
from eshift_core.mixins import PolicedDeleteMixin


class RegisterView(APIView):
    """
    Self-service customer sign-up.
    POST /api/customers/register/
    """
    permission_classes = [AllowAny]

    @swagger_auto_schema(request_body=RegistrationSerializer, responses={201: CustomerSerializer})
    def post(self, request, format=None):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = register_customer(**serializer.validated_data)
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)


class CustomerViewSet(PolicedDeleteMixin,
                      mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.DestroyModelMixin,
                      viewsets.GenericViewSet):
    """
    Admin view of registered customers.
    """
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    permission_classes = [IsAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'email', 'phone']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
