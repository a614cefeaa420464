"""
User accounts: creation, profile updates, password changes and deletion.
"""
from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.authtoken.models import Token

from care.exceptions import ConflictError, ValidationError
from care.services.store import apply_updates, get_or_404, translate_integrity_errors

logger = logging.getLogger(__name__)

User = get_user_model()

PROFILE_FIELDS = (
    'full_name', 'email', 'phone_number', 'date_of_birth', 'gender',
    'address', 'profile_image',
)


def _ensure_unique(username: str | None = None, email: str | None = None, exclude_id: int | None = None) -> None:
    qs = User.objects.all()
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    if username and qs.filter(username=username).exists():
        raise ConflictError('Username already exists')
    if email and qs.filter(email__iexact=email).exists():
        raise ConflictError('Email already exists')


def create_user(*, username: str, password: str, email: str, full_name: str, role: str = 'user', **profile) -> User:
    _ensure_unique(username=username, email=email)
    with translate_integrity_errors('Username or email already exists'):
        user = User(username=username, email=email, full_name=full_name, role=role)
        for name in PROFILE_FIELDS:
            if name in profile:
                setattr(user, name, profile[name])
        user.set_password(password)
        user.save()
    logger.info('user %s registered', user.id)
    return user


def get_user(user_id) -> User:
    return get_or_404(User, user_id, 'User')


def update_profile(user: User, values: dict) -> User:
    if values.get('email'):
        _ensure_unique(email=values['email'], exclude_id=user.id)
    return apply_updates(user, values, PROFILE_FIELDS)


def change_password(user: User, current_password: str, new_password: str) -> None:
    if not user.check_password(current_password):
        raise ValidationError({'currentPassword': ['Current password is incorrect']})
    user.set_password(new_password)
    user.save(update_fields=['password'])
    Token.objects.filter(user=user).delete()
    logger.info('user %s changed password', user.id)


@transaction.atomic
def delete_user(user: User) -> None:
    """Delete the account together with everything it owns."""
    user_id = user.id
    Token.objects.filter(user=user).delete()
    user.medication_logs.all().delete()
    user.medications.all().delete()
    user.chat_messages.all().delete()
    user.appointments.all().delete()
    user.medical_records.all().delete()
    user.health_data.all().delete()
    user.delete()
    logger.info('user %s deleted with dependants', user_id)
