from __future__ import annotations

from care.exceptions import NotFoundError
from care.models import HealthData
from care.services.store import apply_updates, get_or_404, translate_integrity_errors

FIELDS = (
    'heart_rate', 'blood_pressure_systolic', 'blood_pressure_diastolic',
    'blood_glucose', 'temperature', 'recorded_at',
)


def create_health_data(user, values: dict) -> HealthData:
    with translate_integrity_errors():
        return HealthData.objects.create(user=user, **{k: v for k, v in values.items() if k in FIELDS})


def get_health_data(pk) -> HealthData:
    return get_or_404(HealthData, pk, 'Health data')


def list_health_data(user):
    return HealthData.objects.filter(user=user).order_by('-recorded_at', '-id')


def latest_health_data(user) -> HealthData:
    row = list_health_data(user).first()
    if row is None:
        raise NotFoundError('No health data found')
    return row


def update_health_data(row: HealthData, values: dict) -> HealthData:
    return apply_updates(row, values, FIELDS)


def delete_health_data(row: HealthData) -> None:
    row.delete()
