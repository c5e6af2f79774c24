from django.urls import path, include
from rest_framework.routers import DefaultRouter

from jobs.views import (
    JobViewSet,
    MyJobViewSet,
    LoadViewSet,
    ProductViewSet,
    MyProductViewSet,
)

router = DefaultRouter()
router.register(r'jobs', JobViewSet, basename='job')
router.register(r'loads', LoadViewSet, basename='load')
router.register(r'products', ProductViewSet, basename='product')
router.register(r'my/jobs', MyJobViewSet, basename='my-job')
router.register(r'my/products', MyProductViewSet, basename='my-product')

urlpatterns = [
    path('', include(router.urls)),
]
