from rest_framework import serializers

from jobs.models import Job
from jobs.serializers.load import LoadDetailSerializer


class JobSerializer(serializers.ModelSerializer):
    customer_name = serializers.CharField(source='customer.name', read_only=True)
    load_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Job
        fields = [
            'id', 'customer', 'customer_name', 'start_location', 'destination',
            'job_date', 'status', 'version', 'load_count', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class JobDetailSerializer(JobSerializer):
    loads = LoadDetailSerializer(many=True, read_only=True)

    class Meta(JobSerializer.Meta):
        fields = JobSerializer.Meta.fields + ['loads']
        read_only_fields = fields


class JobStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Job.STATUS_CHOICES)
    version = serializers.IntegerField(required=False, min_value=1)


class JobEditSerializer(serializers.Serializer):
    start_location = serializers.CharField(max_length=100, required=False)
    destination = serializers.CharField(max_length=100, required=False)
    job_date = serializers.DateField(required=False)
    version = serializers.IntegerField(required=False, min_value=1)


class JobStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    in_progress = serializers.IntegerField()
    completed = serializers.IntegerField()
    cancelled = serializers.IntegerField()
