from django.urls import path, include
from rest_framework.routers import SimpleRouter

from customers.views import CustomerViewSet, RegisterView

router = SimpleRouter()
router.register(r'', CustomerViewSet, basename='customer')

urlpatterns = [
    path('register/', RegisterView.as_view(), name='customer-register'),
    path('', include(router.urls)),
]
