"""
Doctor and hospital directory shared by all users.
"""
from __future__ import annotations

import logging

from django.db.models import ProtectedError, Q

from care.exceptions import ConflictError, ValidationError
from care.models import Doctor, Hospital
from care.services.store import apply_updates, get_or_404, translate_integrity_errors

logger = logging.getLogger(__name__)

DOCTOR_FIELDS = (
    'name', 'specialty', 'hospital', 'phone_number', 'email',
    'profile_image', 'available_days', 'rating',
)
HOSPITAL_FIELDS = (
    'name', 'address', 'phone_number', 'email', 'logo', 'rating',
    'latitude', 'longitude',
)


def create_doctor(values: dict) -> Doctor:
    with translate_integrity_errors():
        return Doctor.objects.create(**{k: v for k, v in values.items() if k in DOCTOR_FIELDS})


def get_doctor(pk) -> Doctor:
    return get_or_404(Doctor, pk, 'Doctor')


def list_doctors(specialty: str | None = None):
    qs = Doctor.objects.all().order_by('id')
    if specialty:
        qs = qs.filter(specialty__iexact=specialty)
    return qs


def search_doctors(query: str):
    """Doctors whose name or specialty contains ``query`` (case-insensitive)."""
    query = (query or '').strip()
    if not query:
        raise ValidationError({'query': ['Search query is required']})
    return Doctor.objects.filter(Q(name__icontains=query) | Q(specialty__icontains=query)).order_by('name', 'id')


def list_specialties() -> list[str]:
    return list(Doctor.objects.order_by('specialty').values_list('specialty', flat=True).distinct())


def update_doctor(doctor: Doctor, values: dict) -> Doctor:
    return apply_updates(doctor, values, DOCTOR_FIELDS)


def delete_doctor(doctor: Doctor) -> None:
    try:
        doctor.delete()
    except ProtectedError as exc:
        raise ConflictError('Doctor has appointments and cannot be deleted') from exc
    logger.info('doctor %s deleted', doctor.pk)


def create_hospital(values: dict) -> Hospital:
    with translate_integrity_errors():
        return Hospital.objects.create(**{k: v for k, v in values.items() if k in HOSPITAL_FIELDS})


def get_hospital(pk) -> Hospital:
    return get_or_404(Hospital, pk, 'Hospital')


def list_hospitals():
    return Hospital.objects.all().order_by('id')


def list_hospital_doctors(hospital: Hospital):
    # doctors name their practice by text, not by foreign key
    return Doctor.objects.filter(hospital__iexact=hospital.name).order_by('name', 'id')


def update_hospital(hospital: Hospital, values: dict) -> Hospital:
    return apply_updates(hospital, values, HOSPITAL_FIELDS)


def delete_hospital(hospital: Hospital) -> None:
    # appointments keep their row with hospital set to NULL
    hospital.delete()
    logger.info('hospital deleted')
