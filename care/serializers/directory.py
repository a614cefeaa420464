from rest_framework import serializers

from care.models import RATING_MAX, RATING_MIN, WEEKDAYS, Doctor, Hospital


class DoctorSerializer(serializers.ModelSerializer):
    phoneNumber = serializers.CharField(source='phone_number', required=False, allow_blank=True, allow_null=True, max_length=32)
    profileImage = serializers.CharField(source='profile_image', required=False, allow_blank=True, allow_null=True, max_length=512)
    availableDays = serializers.ListField(
        source='available_days', child=serializers.CharField(), required=False,
    )
    rating = serializers.IntegerField(required=False, allow_null=True, min_value=RATING_MIN, max_value=RATING_MAX)

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'specialty', 'hospital', 'phoneNumber', 'email',
                  'profileImage', 'availableDays', 'rating']

    def validate_availableDays(self, days):
        lookup = {d.lower(): d for d in WEEKDAYS}
        result: list[str] = []
        for day in days:
            name = lookup.get((day or '').strip().lower())
            if name is None:
                raise serializers.ValidationError(f"'{day}' is not a weekday name")
            if name in result:
                raise serializers.ValidationError(f"'{name}' is listed more than once")
            result.append(name)
        return result


class HospitalSerializer(serializers.ModelSerializer):
    phoneNumber = serializers.CharField(source='phone_number', max_length=32)
    rating = serializers.IntegerField(required=False, allow_null=True, min_value=RATING_MIN, max_value=RATING_MAX)

    class Meta:
        model = Hospital
        fields = ['id', 'name', 'address', 'phoneNumber', 'email', 'logo', 'rating',
                  'latitude', 'longitude']
