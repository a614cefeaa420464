from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import ensure_owner
from care.serializers.medications import MedicationLogSerializer, MedicationSerializer
from care.services import medications as svc


def _owned(request, pk):
    med = svc.get_medication(pk)
    ensure_owner(request.user, med)
    return med


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def medication_collection(request):
    if request.method == 'POST':
        s = MedicationSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        med = svc.create_medication(request.user, s.validated_data)
        return Response(MedicationSerializer(med).data, status=status.HTTP_201_CREATED)
    return Response(MedicationSerializer(svc.list_medications(request.user), many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def active_medications(request):
    return Response(MedicationSerializer(svc.list_medications(request.user, active_only=True), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def medication_detail(request, pk: int):
    med = _owned(request, pk)
    if request.method == 'DELETE':
        svc.delete_medication(med)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = MedicationSerializer(med, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        med = svc.update_medication(med, s.validated_data)
    return Response(MedicationSerializer(med).data)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def medication_toggle(request, pk: int):
    med = svc.toggle_active(_owned(request, pk))
    return Response(MedicationSerializer(med).data)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def medication_logs(request, pk: int):
    med = _owned(request, pk)
    if request.method == 'POST':
        s = MedicationLogSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        log = svc.log_dose(med, s.validated_data)
        return Response(MedicationLogSerializer(log).data, status=status.HTTP_201_CREATED)
    return Response(MedicationLogSerializer(svc.list_logs(med), many=True).data)
