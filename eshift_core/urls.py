"""
URL configuration for the e-shift back office.

    /admin/            Django admin
    /api/customers/    registration and customer administration
    /api/fleet/        lorries, drivers, assistants, containers, transport units
    /api/assignments/  transport unit assignment
    /api/              jobs, loads, products and the customer "my" views
    /swagger/          API documentation
"""
from django.contrib import admin
from django.urls import path, include, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(
        title="e-Shift Logistics API",
        default_version='v1',
        description="Jobs, loads, products and fleet assignment",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/customers/', include('customers.urls')),
    path('api/fleet/', include('fleet.urls')),
    path('api/assignments/', include('assignment.urls')),
    path('api/', include('jobs.urls')),
    re_path(r'^swagger(?P<format>\.json|\.yaml)$', schema_view.without_ui(cache_timeout=0), name='schema-json'),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
]
