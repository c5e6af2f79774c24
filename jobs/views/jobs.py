from django.db.models import Count, Prefetch
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from customers.identity import caller_from_request
from customers.permissions import IsAdmin, IsCustomer
from eshift_core.mixins import PolicedDeleteMixin
from jobs.models import Job, Load
from jobs.pagination import JobPagination
from jobs.serializers import (
    JobSerializer,
    JobDetailSerializer,
    JobStatusSerializer,
    JobEditSerializer,
    JobStatsSerializer,
    JobRequestSerializer,
)
from jobs.services.job_request import submit_job_request
from jobs.services.stats import job_status_counts
from jobs.services.transitions import change_job_status, cancel_job, edit_job_details


def _job_detail_queryset():
    loads = Load.objects.select_related(
        'transport_unit__lorry', 'transport_unit__driver'
    ).prefetch_related('load_products__product')
    return (
        Job.objects.select_related('customer')
        .annotate(load_count=Count('loads'))
        .prefetch_related(Prefetch('loads', queryset=loads))
    )


class JobViewSet(PolicedDeleteMixin,
                 mixins.ListModelMixin,
                 mixins.RetrieveModelMixin,
                 mixins.DestroyModelMixin,
                 viewsets.GenericViewSet):
    """
    Admin view of all jobs.

    Jobs are created through customer job requests; administrators only move
    their status and delete them (loads and links go with them).
    """
    queryset = Job.objects.select_related('customer').annotate(load_count=Count('loads'))
    serializer_class = JobSerializer
    permission_classes = [IsAdmin]
    lookup_value_regex = r'\d+'
    pagination_class = JobPagination
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['status', 'customer']
    search_fields = ['start_location', 'destination', 'customer__name']
    ordering_fields = ['job_date', 'created_at', 'status']
    ordering = ['-job_date', '-id']

    def get_queryset(self):
        if self.action == 'retrieve':
            return _job_detail_queryset()
        return super().get_queryset()

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return JobDetailSerializer
        return super().get_serializer_class()

    @swagger_auto_schema(request_body=JobStatusSerializer, responses={200: JobDetailSerializer})
    @action(detail=True, methods=['post'])
    def change_status(self, request, pk=None):
        serializer = JobStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        job = change_job_status(
            caller_from_request(request),
            pk,
            serializer.validated_data['status'],
            version=serializer.validated_data.get('version'),
        )
        return Response(JobDetailSerializer(_job_detail_queryset().get(pk=job.pk)).data)

    @swagger_auto_schema(responses={200: JobStatsSerializer})
    @action(detail=False, methods=['get'])
    def stats(self, request):
        return Response(JobStatsSerializer(job_status_counts()).data)


class MyJobViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   viewsets.GenericViewSet):
    """
    A customer's own jobs.

    POST submits a job request (job, loads and products in one go); PATCH
    edits locations and date while the job is in progress.
    """
    serializer_class = JobSerializer
    permission_classes = [IsCustomer]
    lookup_value_regex = r'\d+'
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['status']
    ordering_fields = ['job_date', 'created_at']
    ordering = ['-job_date', '-id']

    def get_queryset(self):
        caller = caller_from_request(self.request)
        if caller.customer_id is None:
            return Job.objects.none()
        return _job_detail_queryset().filter(customer_id=caller.customer_id)

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return JobDetailSerializer
        return super().get_serializer_class()

    def _detail_response(self, job, status_code=status.HTTP_200_OK):
        job = self.get_queryset().get(pk=job.pk)
        return Response(JobDetailSerializer(job).data, status=status_code)

    @swagger_auto_schema(request_body=JobRequestSerializer, responses={201: JobDetailSerializer})
    def create(self, request, *args, **kwargs):
        job = submit_job_request(caller_from_request(request), request.data)
        return self._detail_response(job, status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=JobEditSerializer, responses={200: JobDetailSerializer})
    def partial_update(self, request, pk=None):
        serializer = JobEditSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        changes = dict(serializer.validated_data)
        version = changes.pop('version', None)
        job = edit_job_details(caller_from_request(request), pk, changes, version=version)
        return self._detail_response(job)

    @swagger_auto_schema(request_body=None, responses={200: JobDetailSerializer})
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        job = cancel_job(caller_from_request(request), pk)
        return self._detail_response(job)
