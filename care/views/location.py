from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.exceptions import ValidationError
from care.serializers.location import NearbyQuerySerializer, ReverseQuerySerializer
from care.services import location


def _query(serializer_cls, request):
    s = serializer_cls(data=request.query_params)
    if not s.is_valid():
        raise ValidationError(s.errors, code='invalid')
    return s.validated_data


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def reverse_geocode(request):
    q = _query(ReverseQuerySerializer, request)
    return Response(location.reverse_geocode(q['lat'], q['lon']))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def nearby_hospitals(request):
    q = _query(NearbyQuerySerializer, request)
    return Response(location.nearby_hospitals(q['lat'], q['lon'], q.get('radius')))
