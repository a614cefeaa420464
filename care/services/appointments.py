"""
Appointment booking.

Doctor and hospital references are checked before the insert so a
missing row is reported as :class:`MissingReferenceError` on every
database backend, including ones that defer foreign key checks.
"""
from __future__ import annotations

import datetime
import logging

import bleach
from django.db.models import Q
from django.utils import timezone

from care.exceptions import UpstreamError, ValidationError
from care.models import WEEKDAYS, Appointment, Doctor, Hospital
from care.services import notifications
from care.services.store import apply_updates, get_or_404, require_exists, translate_integrity_errors

logger = logging.getLogger(__name__)

FIELDS = ('doctor_id', 'hospital_id', 'date', 'time', 'is_virtual', 'status', 'notes')

# statuses that free the slot / move a visit to the history list
SLOT_RELEASING_STATUSES = ('cancelled', 'rejected')
CLOSED_STATUSES = SLOT_RELEASING_STATUSES + ('completed',)

SLOT_START_HOUR = 9
SLOT_END_HOUR = 17


def _prepare(values: dict) -> dict:
    values = {k: v for k, v in values.items() if k in FIELDS}
    if 'doctor_id' in values:
        require_exists(Doctor, values['doctor_id'], 'Doctor')
    if values.get('hospital_id') is not None:
        require_exists(Hospital, values['hospital_id'], 'Hospital')
    if values.get('notes'):
        values['notes'] = bleach.clean(values['notes'].strip(), strip=True)
    return values


def create_appointment(user, values: dict) -> Appointment:
    values = _prepare(values)
    values.setdefault('status', Appointment.STATUS_SCHEDULED)
    with translate_integrity_errors():
        appt = Appointment.objects.create(user=user, **values)
    logger.info('appointment %s booked by user %s', appt.id, user.id)
    return appt


def book_appointment(user, values: dict) -> tuple[Appointment, bool]:
    """Create the appointment, then try to send the confirmation email.

    Returns ``(appointment, confirmation_sent)``.  A failed email never
    undoes the booking.
    """
    appt = create_appointment(user, values)
    try:
        notifications.send_appointment_confirmation(appt)
    except UpstreamError:
        return appt, False
    return appt, True


def get_appointment(pk) -> Appointment:
    return get_or_404(Appointment, pk, 'Appointment')


def list_appointments(user):
    return (Appointment.objects.filter(user=user)
            .select_related('doctor', 'hospital')
            .order_by('date', 'time', 'id'))


def update_appointment(appt: Appointment, values: dict) -> Appointment:
    return apply_updates(appt, _prepare(values), FIELDS)


def update_status(appt: Appointment, status: str) -> Appointment:
    status = (status or '').strip()
    if not status:
        raise ValidationError({'status': ['Status is required']})
    return apply_updates(appt, {'status': status}, ('status',))


def delete_appointment(appt: Appointment) -> None:
    appt.delete()


def upcoming_appointments(user, today: datetime.date | None = None):
    today = today or timezone.localdate()
    return (list_appointments(user)
            .filter(date__gte=today)
            .exclude(status__in=CLOSED_STATUSES))


def past_appointments(user, today: datetime.date | None = None):
    today = today or timezone.localdate()
    return (Appointment.objects.filter(user=user)
            .filter(Q(date__lt=today) | Q(status__in=CLOSED_STATUSES))
            .select_related('doctor', 'hospital')
            .order_by('-date', '-time', '-id'))


def default_slots() -> list[str]:
    """Half-hour slots from 09:00 up to, not including, 17:00."""
    return [f"{hour:02d}:{minute:02d}"
            for hour in range(SLOT_START_HOUR, SLOT_END_HOUR)
            for minute in (0, 30)]


def available_slots(doctor: Doctor, day: datetime.date) -> list[str]:
    """Free slots for ``doctor`` on ``day``.

    A doctor with no ``available_days`` works every day.  Times held by
    appointments that are not cancelled or rejected are removed.
    """
    if doctor.available_days and WEEKDAYS[day.weekday()] not in doctor.available_days:
        return []
    booked = set(
        Appointment.objects.filter(doctor=doctor, date=day)
        .exclude(status__in=SLOT_RELEASING_STATUSES)
        .values_list('time', flat=True)
    )
    return [slot for slot in default_slots() if slot not in booked]
