from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.exceptions import ForbiddenError, ValidationError
from care.permissions import ensure_owner
from care.serializers.appointments import AppointmentDetailSerializer, AppointmentSerializer, StatusSerializer
from care.services import appointments as svc
from care.services import directory as directory_svc


def _check_user_filter(request) -> None:
    raw = request.query_params.get('userId')
    if raw in (None, ''):
        return
    try:
        user_id = int(raw)
    except ValueError:
        raise ValidationError({'userId': ['userId must be an integer']})
    if user_id != request.user.id:
        raise ForbiddenError()


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointment_collection(request):
    """List the caller's appointments or book a new one.

    Booking sends a confirmation email; ``confirmationSent`` in the
    response says whether that worked.
    """
    if request.method == 'POST':
        s = AppointmentSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        appt, sent = svc.book_appointment(request.user, s.validated_data)
        payload = {**AppointmentDetailSerializer(appt).data, 'confirmationSent': sent}
        return Response(payload, status=status.HTTP_201_CREATED)

    _check_user_filter(request)
    return Response(AppointmentDetailSerializer(svc.list_appointments(request.user), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk: int):
    appt = svc.get_appointment(pk)
    ensure_owner(request.user, appt)
    if request.method == 'DELETE':
        svc.delete_appointment(appt)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = AppointmentSerializer(appt, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        appt = svc.update_appointment(appt, s.validated_data)
    return Response(AppointmentDetailSerializer(appt).data)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def appointment_status(request, pk: int):
    appt = svc.get_appointment(pk)
    ensure_owner(request.user, appt)
    s = StatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appt = svc.update_status(appt, s.validated_data['status'])
    return Response(AppointmentDetailSerializer(appt).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def upcoming_appointments(request):
    return Response(AppointmentDetailSerializer(svc.upcoming_appointments(request.user), many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def past_appointments(request):
    return Response(AppointmentDetailSerializer(svc.past_appointments(request.user), many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def available_slots(request, doctor_id: int, date: str):
    try:
        day = parse_date(date)
    except ValueError:
        day = None
    if day is None:
        raise ValidationError({'date': ['Date must be YYYY-MM-DD']})
    doctor = directory_svc.get_doctor(doctor_id)
    return Response({'doctorId': doctor.id, 'date': day.isoformat(), 'slots': svc.available_slots(doctor, day)})
