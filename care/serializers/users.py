from rest_framework import serializers

from care.models import User


class UserSerializer(serializers.ModelSerializer):
    """Public view of an account; the password hash is never included."""
    fullName = serializers.CharField(source='full_name')
    phoneNumber = serializers.CharField(source='phone_number', allow_null=True)
    dateOfBirth = serializers.CharField(source='date_of_birth', allow_null=True)
    profileImage = serializers.CharField(source='profile_image', allow_null=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'fullName', 'phoneNumber', 'dateOfBirth',
                  'gender', 'address', 'profileImage', 'role']
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    fullName = serializers.CharField(source='full_name', required=False, max_length=255)
    email = serializers.EmailField(required=False)
    phoneNumber = serializers.CharField(source='phone_number', required=False, allow_blank=True, allow_null=True, max_length=32)
    dateOfBirth = serializers.CharField(source='date_of_birth', required=False, allow_blank=True, allow_null=True, max_length=32)
    gender = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    profileImage = serializers.CharField(source='profile_image', required=False, allow_blank=True, allow_null=True, max_length=512)
