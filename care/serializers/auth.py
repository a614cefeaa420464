from rest_framework import serializers


class RegisterSerializer(serializers.Serializer):
    """Plain serializer so duplicate usernames reach the service as a conflict."""
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(min_length=6, write_only=True)
    email = serializers.EmailField()
    fullName = serializers.CharField(source='full_name', max_length=255)
    phoneNumber = serializers.CharField(source='phone_number', required=False, allow_blank=True, allow_null=True, max_length=32)
    dateOfBirth = serializers.CharField(source='date_of_birth', required=False, allow_blank=True, allow_null=True, max_length=32)
    gender = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    profileImage = serializers.CharField(source='profile_image', required=False, allow_blank=True, allow_null=True, max_length=512)
    role = serializers.ChoiceField(choices=['user', 'hospital', 'ambulance'], required=False, default='user')

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Username is required')
        return v


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Username is required')
        return v


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField()
    newPassword = serializers.CharField(min_length=6)
