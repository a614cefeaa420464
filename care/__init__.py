"""Care application for the CareGuardian backend.

This package contains models, serializers, services, views and route
registrations for users, health data, medical records, the doctor and
hospital directory, appointments, chat and medications.
"""
