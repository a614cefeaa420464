from __future__ import annotations

import bleach

from care.models import Medication, MedicationLog
from care.services.store import apply_updates, get_or_404, translate_integrity_errors

FIELDS = (
    'name', 'dosage', 'frequency', 'start_date', 'end_date', 'instructions',
    'time_of_day', 'with_food', 'active', 'refill_date',
)


def _clean(values: dict) -> dict:
    if values.get('instructions'):
        values = {**values, 'instructions': bleach.clean(values['instructions'].strip(), strip=True)}
    return values


def create_medication(user, values: dict) -> Medication:
    values = _clean(values)
    with translate_integrity_errors():
        return Medication.objects.create(user=user, **{k: v for k, v in values.items() if k in FIELDS})


def get_medication(pk) -> Medication:
    return get_or_404(Medication, pk, 'Medication')


def list_medications(user, active_only: bool = False):
    qs = Medication.objects.filter(user=user)
    if active_only:
        qs = qs.filter(active=True)
    return qs.order_by('-created_at', '-id')


def update_medication(med: Medication, values: dict) -> Medication:
    return apply_updates(med, _clean(values), FIELDS)


def toggle_active(med: Medication) -> Medication:
    return apply_updates(med, {'active': not med.active}, ('active',))


def log_dose(med: Medication, values: dict) -> MedicationLog:
    data = {k: v for k, v in values.items() if k in ('taken_at', 'skipped', 'notes')}
    if data.get('notes'):
        data['notes'] = bleach.clean(data['notes'].strip(), strip=True)
    with translate_integrity_errors():
        return MedicationLog.objects.create(medication=med, user_id=med.user_id, **data)


def list_logs(med: Medication):
    return med.logs.all()


def delete_medication(med: Medication) -> None:
    # dose logs cascade with the medication
    med.delete()
