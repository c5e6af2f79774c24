from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from customers.identity import caller_from_request
from customers.permissions import IsAdmin, IsCustomer
from eshift_core.mixins import PolicedDeleteMixin
from jobs.models import Product
from jobs.serializers import ProductSerializer, MyProductSerializer


class ProductViewSet(PolicedDeleteMixin,
                     mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.UpdateModelMixin,
                     mixins.DestroyModelMixin,
                     viewsets.GenericViewSet):
    """
    Admin view of every customer's products.
    """
    queryset = Product.objects.select_related('customer')
    serializer_class = ProductSerializer
    permission_classes = [IsAdmin]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['customer', 'is_valid', 'category']
    search_fields = ['name', 'category', 'description', 'customer__name']
    ordering_fields = ['name', 'created_at', 'weight_kg']
    ordering = ['name', 'id']

    @swagger_auto_schema(request_body=None, responses={200: ProductSerializer})
    @action(detail=True, methods=['post'])
    def toggle_validation(self, request, pk=None):
        product = self.get_object()
        product.is_valid = not product.is_valid
        product.save(update_fields=['is_valid'])
        return Response(self.get_serializer(product).data)


class MyProductViewSet(PolicedDeleteMixin, viewsets.ModelViewSet):
    """
    A customer's own products. Products linked to a load cannot be deleted.
    """
    serializer_class = MyProductSerializer
    permission_classes = [IsCustomer]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'category']
    ordering_fields = ['name', 'created_at']
    ordering = ['name', 'id']

    def get_queryset(self):
        caller = caller_from_request(self.request)
        if caller.customer_id is None:
            return Product.objects.none()
        return Product.objects.filter(customer_id=caller.customer_id)

    def perform_create(self, serializer):
        serializer.save(customer_id=caller_from_request(self.request).require_customer())
