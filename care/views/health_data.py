from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import ensure_owner
from care.serializers.health import HealthDataSerializer
from care.services import health_data as svc


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def health_data_collection(request):
    if request.method == 'POST':
        s = HealthDataSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        row = svc.create_health_data(request.user, s.validated_data)
        return Response(HealthDataSerializer(row).data, status=status.HTTP_201_CREATED)
    return Response(HealthDataSerializer(svc.list_health_data(request.user), many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def health_data_latest(request):
    return Response(HealthDataSerializer(svc.latest_health_data(request.user)).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def health_data_detail(request, pk: int):
    row = svc.get_health_data(pk)
    ensure_owner(request.user, row)
    if request.method == 'DELETE':
        svc.delete_health_data(row)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = HealthDataSerializer(row, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        row = svc.update_health_data(row, s.validated_data)
    return Response(HealthDataSerializer(row).data)
