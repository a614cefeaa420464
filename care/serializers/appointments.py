from rest_framework import serializers

from care.models import Appointment


class AppointmentSerializer(serializers.ModelSerializer):
    """Insert/update shape.  ``userId`` in the body is ignored; the owner is the caller."""
    userId = serializers.IntegerField(source='user_id', read_only=True)
    doctorId = serializers.IntegerField(source='doctor_id', min_value=1)
    hospitalId = serializers.IntegerField(source='hospital_id', required=False, allow_null=True, min_value=1)
    isVirtual = serializers.BooleanField(source='is_virtual', required=False, default=False)
    status = serializers.CharField(required=False, max_length=32)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Appointment
        fields = ['id', 'userId', 'doctorId', 'hospitalId', 'date', 'time', 'isVirtual', 'status', 'notes']


class AppointmentDetailSerializer(AppointmentSerializer):
    doctorName = serializers.CharField(source='doctor.name', read_only=True)
    hospitalName = serializers.SerializerMethodField()

    class Meta(AppointmentSerializer.Meta):
        fields = AppointmentSerializer.Meta.fields + ['doctorName', 'hospitalName']

    def get_hospitalName(self, obj):
        return obj.hospital.name if obj.hospital_id else None


class StatusSerializer(serializers.Serializer):
    status = serializers.CharField(max_length=32)
