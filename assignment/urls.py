from django.urls import path, include
from rest_framework.routers import DefaultRouter

from assignment.views import AssignmentViewSet

router = DefaultRouter()
router.register(r'loads', AssignmentViewSet, basename='assignment')

urlpatterns = [
    path('', include(router.urls)),
]
