from rest_framework import serializers

from care.models import Medication, MedicationLog


class MedicationSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    startDate = serializers.DateTimeField(source='start_date')
    endDate = serializers.DateTimeField(source='end_date', required=False, allow_null=True)
    timeOfDay = serializers.CharField(source='time_of_day', max_length=255)
    withFood = serializers.BooleanField(source='with_food', required=False, default=False)
    refillDate = serializers.DateTimeField(source='refill_date', required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Medication
        fields = ['id', 'userId', 'name', 'dosage', 'frequency', 'startDate', 'endDate',
                  'instructions', 'timeOfDay', 'withFood', 'active', 'refillDate', 'createdAt']
        extra_kwargs = {'active': {'required': False}}

    def validate(self, attrs):
        start, end = attrs.get('start_date'), attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError({'endDate': ['End date must not precede start date']})
        return attrs


class MedicationLogSerializer(serializers.ModelSerializer):
    medicationId = serializers.IntegerField(source='medication_id', read_only=True)
    userId = serializers.IntegerField(source='user_id', read_only=True)
    takenAt = serializers.DateTimeField(source='taken_at', required=False)

    class Meta:
        model = MedicationLog
        fields = ['id', 'medicationId', 'userId', 'takenAt', 'skipped', 'notes']
