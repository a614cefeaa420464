from rest_framework import serializers


class ReverseQuerySerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lon = serializers.FloatField(min_value=-180, max_value=180)


class NearbyQuerySerializer(ReverseQuerySerializer):
    radius = serializers.IntegerField(required=False, min_value=1, max_value=50000)
