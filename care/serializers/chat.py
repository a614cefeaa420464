from rest_framework import serializers

from care.models import ChatMessage


class ChatMessageSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    isUserMessage = serializers.BooleanField(source='is_user_message', required=False, default=True)

    class Meta:
        model = ChatMessage
        fields = ['id', 'userId', 'message', 'isUserMessage', 'timestamp']
        read_only_fields = ['timestamp']


class LegacyChatSerializer(serializers.Serializer):
    message = serializers.CharField()


class SymptomSerializer(serializers.Serializer):
    symptoms = serializers.CharField()
    age = serializers.IntegerField(min_value=0, max_value=150)
    gender = serializers.CharField()
    medicalHistory = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class FirstAidSerializer(serializers.Serializer):
    situation = serializers.CharField()
