from rest_framework import serializers

from jobs.models import Load


class AssignmentSerializer(serializers.ModelSerializer):
    """A load as seen from the assignment screen."""
    job = serializers.IntegerField(source='job_id', read_only=True)
    transport_unit_label = serializers.CharField(source='transport_unit.label', read_only=True, default=None)

    class Meta:
        model = Load
        fields = [
            'id', 'job', 'load_number', 'status', 'pickup_date',
            'transport_unit', 'transport_unit_label', 'version',
        ]
        read_only_fields = fields


class AssignTransportUnitSerializer(serializers.Serializer):
    transport_unit_id = serializers.IntegerField(allow_null=True)


class TransportUnitChoiceSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    label = serializers.CharField()
