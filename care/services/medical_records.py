from __future__ import annotations

import bleach

from care.models import MedicalRecord
from care.services.store import apply_updates, get_or_404, translate_integrity_errors

FIELDS = ('title', 'description', 'file_url', 'doctor_name', 'hospital', 'date')


def _clean(values: dict) -> dict:
    if values.get('description'):
        values = {**values, 'description': bleach.clean(values['description'].strip(), strip=True)}
    return values


def create_medical_record(user, values: dict) -> MedicalRecord:
    values = _clean(values)
    with translate_integrity_errors():
        return MedicalRecord.objects.create(user=user, **{k: v for k, v in values.items() if k in FIELDS})


def get_medical_record(pk) -> MedicalRecord:
    return get_or_404(MedicalRecord, pk, 'Medical record')


def list_medical_records(user):
    return MedicalRecord.objects.filter(user=user).order_by('-date', '-id')


def update_medical_record(record: MedicalRecord, values: dict) -> MedicalRecord:
    return apply_updates(record, _clean(values), FIELDS)


def delete_medical_record(record: MedicalRecord) -> None:
    record.delete()
