"""
Database models for the CareGuardian backend.

Users own their health data, medical records, appointments, chat history
and medications.  Doctors and hospitals form a shared directory that
appointments point into.  Field names follow Django conventions; the
camelCase names used by the front-end are produced by the serializers.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

RATING_MIN = 0
RATING_MAX = 5

WEEKDAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']


def format_temperature(value: int | None) -> str | None:
    """Temperatures are stored as integer tenths of a degree (986 -> '98.6')."""
    if value is None:
        return None
    return f"{value / 10:.1f}"


class User(AbstractUser):
    """Account for patients and hospital/ambulance operators.

    ``username`` is unique through :class:`AbstractUser`; ``email`` is made
    unique here as well.  The password column holds a Django password hash.
    """
    ROLE_USER = 'user'
    ROLE_HOSPITAL = 'hospital'
    ROLE_AMBULANCE = 'ambulance'
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_HOSPITAL, 'Hospital'),
        (ROLE_AMBULANCE, 'Ambulance'),
    ]

    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=32, blank=True, null=True)
    date_of_birth = models.CharField(max_length=32, blank=True, null=True)
    gender = models.CharField(max_length=32, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    profile_image = models.CharField(max_length=512, blank=True, null=True)
    role = models.CharField(max_length=16, choices=ROLE_CHOICES, default=ROLE_USER)

    REQUIRED_FIELDS = ['email', 'full_name']

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class HealthData(models.Model):
    """A single set of vital sign measurements."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='health_data')
    heart_rate = models.IntegerField(null=True, blank=True)
    blood_pressure_systolic = models.IntegerField(null=True, blank=True)
    blood_pressure_diastolic = models.IntegerField(null=True, blank=True)
    blood_glucose = models.IntegerField(null=True, blank=True)
    # tenths of a degree
    temperature = models.IntegerField(null=True, blank=True)
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        indexes = [models.Index(fields=['user', 'recorded_at'], name='health_user_recorded_idx')]

    @property
    def temperature_display(self) -> str | None:
        return format_temperature(self.temperature)

    def __str__(self) -> str:
        return f"vitals u={self.user_id} @ {self.recorded_at:%F %T}"


class MedicalRecord(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='medical_records')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    file_url = models.CharField(max_length=512, blank=True, null=True)
    doctor_name = models.CharField(max_length=255, blank=True, null=True)
    hospital = models.CharField(max_length=255, blank=True, null=True)
    date = models.DateTimeField()

    def __str__(self) -> str:
        return f"{self.title} ({self.user_id})"


class Doctor(models.Model):
    """Directory entry for a doctor.

    ``available_days`` is an ordered list of weekday names; ``hospital``
    is the display name of the practice, not a foreign key.
    """
    name = models.CharField(max_length=255)
    specialty = models.CharField(max_length=255)
    hospital = models.CharField(max_length=255, blank=True, null=True)
    phone_number = models.CharField(max_length=32, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    profile_image = models.CharField(max_length=512, blank=True, null=True)
    available_days = models.JSONField(default=list, blank=True)
    rating = models.IntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)],
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.specialty})"


class Hospital(models.Model):
    name = models.CharField(max_length=255)
    address = models.TextField()
    phone_number = models.CharField(max_length=32)
    email = models.EmailField(blank=True, null=True)
    logo = models.CharField(max_length=512, blank=True, null=True)
    rating = models.IntegerField(
        null=True, blank=True,
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)],
    )
    latitude = models.CharField(max_length=32, blank=True, null=True)
    longitude = models.CharField(max_length=32, blank=True, null=True)

    def __str__(self) -> str:
        return self.name


class Appointment(models.Model):
    """A booked visit.

    ``status`` is a free-form string; nothing enforces a lifecycle.
    Doctors with appointments cannot be deleted; deleting a hospital
    detaches it from its appointments.
    """
    STATUS_SCHEDULED = 'scheduled'

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='appointments')
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name='appointments')
    hospital = models.ForeignKey(
        Hospital, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments'
    )
    date = models.DateField()
    time = models.CharField(max_length=32)
    is_virtual = models.BooleanField(default=False)
    status = models.CharField(max_length=32, default=STATUS_SCHEDULED, db_index=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        indexes = [models.Index(fields=['user', 'date'], name='appt_user_date_idx')]

    def __str__(self) -> str:
        return f"appt u={self.user_id} d={self.doctor_id} {self.date} {self.time}"


class ChatMessage(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='chat_messages')
    message = models.TextField()
    is_user_message = models.BooleanField()
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['timestamp', 'id']
        indexes = [models.Index(fields=['user', 'timestamp'], name='chat_user_ts_idx')]

    def __str__(self) -> str:
        who = 'user' if self.is_user_message else 'assistant'
        return f"chat {self.id} u={self.user_id} ({who})"


class Medication(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='medications')
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=255)
    frequency = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    instructions = models.TextField(blank=True, null=True)
    # Morning, Afternoon, Evening, Night, or specific times
    time_of_day = models.CharField(max_length=255)
    with_food = models.BooleanField(default=False)
    active = models.BooleanField(default=True, db_index=True)
    refill_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.name} {self.dosage} ({self.user_id})"


class MedicationLog(models.Model):
    medication = models.ForeignKey(Medication, on_delete=models.CASCADE, related_name='logs')
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='medication_logs')
    taken_at = models.DateTimeField(default=timezone.now)
    skipped = models.BooleanField(default=False)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-taken_at', '-id']

    def __str__(self) -> str:
        return f"medlog {self.medication_id} @ {self.taken_at:%F %T}"
