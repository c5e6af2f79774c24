from django.urls import path, include
from rest_framework.routers import DefaultRouter

from fleet.views import (
    LorryViewSet,
    DriverViewSet,
    AssistantViewSet,
    ContainerViewSet,
    TransportUnitViewSet,
)

router = DefaultRouter()
router.register(r'lorries', LorryViewSet)
router.register(r'drivers', DriverViewSet)
router.register(r'assistants', AssistantViewSet)
router.register(r'containers', ContainerViewSet)
router.register(r'transport-units', TransportUnitViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
