"""
Doctor and hospital directory endpoints.

Any signed-in user may browse; only hospital accounts and staff may
create, edit or remove entries.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from care.permissions import IsHospitalRole
from care.serializers.directory import DoctorSerializer, HospitalSerializer
from care.services import directory as svc


@api_view(['GET', 'POST'])
@permission_classes([IsHospitalRole])
def doctor_collection(request):
    if request.method == 'POST':
        s = DoctorSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        doctor = svc.create_doctor(s.validated_data)
        return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)
    specialty = (request.query_params.get('specialty') or '').strip() or None
    return Response(DoctorSerializer(svc.list_doctors(specialty), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsHospitalRole])
def doctor_detail(request, pk: int):
    doctor = svc.get_doctor(pk)
    if request.method == 'DELETE':
        svc.delete_doctor(doctor)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = DoctorSerializer(doctor, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        doctor = svc.update_doctor(doctor, s.validated_data)
    return Response(DoctorSerializer(doctor).data)


@api_view(['GET', 'POST'])
@permission_classes([IsHospitalRole])
def hospital_collection(request):
    if request.method == 'POST':
        s = HospitalSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        hospital = svc.create_hospital(s.validated_data)
        return Response(HospitalSerializer(hospital).data, status=status.HTTP_201_CREATED)
    return Response(HospitalSerializer(svc.list_hospitals(), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsHospitalRole])
def hospital_detail(request, pk: int):
    hospital = svc.get_hospital(pk)
    if request.method == 'DELETE':
        svc.delete_hospital(hospital)
        return Response(status=status.HTTP_204_NO_CONTENT)
    if request.method == 'PATCH':
        s = HospitalSerializer(hospital, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        hospital = svc.update_hospital(hospital, s.validated_data)
    return Response(HospitalSerializer(hospital).data)


@api_view(['GET'])
@permission_classes([IsHospitalRole])
def doctor_specialties(request):
    return Response(svc.list_specialties())


@api_view(['GET'])
@permission_classes([IsHospitalRole])
def search_doctors(request):
    doctors = svc.search_doctors(request.query_params.get('query', ''))
    return Response(DoctorSerializer(doctors, many=True).data)


@api_view(['GET'])
@permission_classes([IsHospitalRole])
def hospital_doctors(request, pk: int):
    hospital = svc.get_hospital(pk)
    return Response(DoctorSerializer(svc.list_hospital_doctors(hospital), many=True).data)
