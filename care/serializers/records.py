from rest_framework import serializers

from care.models import MedicalRecord


class MedicalRecordSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    fileUrl = serializers.CharField(source='file_url', required=False, allow_blank=True, allow_null=True, max_length=512)
    doctorName = serializers.CharField(source='doctor_name', required=False, allow_blank=True, allow_null=True, max_length=255)

    class Meta:
        model = MedicalRecord
        fields = ['id', 'userId', 'title', 'description', 'fileUrl', 'doctorName', 'hospital', 'date']
