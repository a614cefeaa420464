from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import ensure_owner
from care.serializers.records import MedicalRecordSerializer
from care.services import medical_records as svc


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def medical_record_collection(request):
    if request.method == 'POST':
        s = MedicalRecordSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        record = svc.create_medical_record(request.user, s.validated_data)
        return Response(MedicalRecordSerializer(record).data, status=status.HTTP_201_CREATED)
    return Response(MedicalRecordSerializer(svc.list_medical_records(request.user), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def medical_record_detail(request, pk: int):
    """Records are private: anyone but the owner gets 403 and no content."""
    record = svc.get_medical_record(pk)
    ensure_owner(request.user, record)
    if request.method == 'DELETE':
        svc.delete_medical_record(record)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = MedicalRecordSerializer(record, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        record = svc.update_medical_record(record, s.validated_data)
    return Response(MedicalRecordSerializer(record).data)
