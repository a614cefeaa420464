"""
Appointment confirmation email.

Delivery goes through Django's email framework, configured from
``EMAIL_USER`` / ``EMAIL_PASS``.  A failed send raises
:class:`UpstreamError`; the appointment itself is already committed.
"""
from __future__ import annotations

import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail
from django.utils.html import escape

from care.exceptions import UpstreamError
from care.models import Appointment

logger = logging.getLogger(__name__)

SUBJECT = "CareGuardian - Appointment Confirmation"


def payment_link(appointment_id: int) -> str:
    return f"{settings.PAYMENT_LINK_BASE.rstrip('/')}/{appointment_id}"


def build_confirmation(appt: Appointment) -> tuple[str, str]:
    """Return ``(plain_text, html)`` bodies for the confirmation email."""
    user = appt.user
    doctor = appt.doctor.name if appt.doctor_id else "Assigned Doctor"
    hospital = appt.hospital.name if appt.hospital_id else "Main Facility"
    visit = "Virtual Consultation" if appt.is_virtual else "In-person Visit"
    link = payment_link(appt.id)
    lines = [
        f"Dear {user.full_name or user.username},",
        "",
        "Your appointment has been successfully booked with the following details:",
        f"Doctor: {doctor}",
        f"Hospital: {hospital}",
        f"Date: {appt.date}",
        f"Time: {appt.time}",
        f"Appointment Type: {visit}",
    ]
    if appt.notes:
        lines.append(f"Additional Notes: {appt.notes}")
    lines += [
        "",
        "Please complete your payment to confirm this appointment:",
        link,
        "Payment must be completed at least 24 hours before your appointment.",
    ]
    text = "\n".join(lines)
    html = "".join(f"<p>{escape(line)}</p>" for line in lines if line and line != link)
    html += f'<p><a href="{escape(link)}">Complete Payment</a></p>'
    return text, html


def send_appointment_confirmation(appt: Appointment) -> str:
    """Send the confirmation and return the payment link."""
    if not appt.user.email:
        raise UpstreamError('Patient has no email address')
    text, html = build_confirmation(appt)
    try:
        send_mail(
            SUBJECT, text, settings.DEFAULT_FROM_EMAIL, [appt.user.email],
            html_message=html, fail_silently=False,
        )
    except (SMTPException, OSError) as exc:
        logger.error('failed to send confirmation for appointment %s: %s', appt.id, exc)
        raise UpstreamError('Failed to send appointment confirmation email') from exc
    logger.info('confirmation sent for appointment %s', appt.id)
    return payment_link(appt.id)
