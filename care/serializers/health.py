from rest_framework import serializers

from care.models import HealthData


class HealthDataSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    heartRate = serializers.IntegerField(source='heart_rate', required=False, allow_null=True, min_value=0)
    bloodPressureSystolic = serializers.IntegerField(source='blood_pressure_systolic', required=False, allow_null=True, min_value=0)
    bloodPressureDiastolic = serializers.IntegerField(source='blood_pressure_diastolic', required=False, allow_null=True, min_value=0)
    bloodGlucose = serializers.IntegerField(source='blood_glucose', required=False, allow_null=True, min_value=0)
    temperature = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    temperatureDisplay = serializers.CharField(source='temperature_display', read_only=True)
    recordedAt = serializers.DateTimeField(source='recorded_at', required=False)

    class Meta:
        model = HealthData
        fields = ['id', 'userId', 'heartRate', 'bloodPressureSystolic', 'bloodPressureDiastolic',
                  'bloodGlucose', 'temperature', 'temperatureDisplay', 'recordedAt']
