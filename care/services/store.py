"""
Shared helpers for the per-entity service modules.

Every service reads and writes through the Django ORM.  Integrity errors
raised by the database are translated into the API error taxonomy so a
uniqueness race and an explicit pre-check look the same to callers.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Type, TypeVar

from django.db import IntegrityError, OperationalError, models, transaction

from care.exceptions import ConflictError, MissingReferenceError, NotFoundError, TransientStoreError

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=models.Model)


@contextmanager
def translate_integrity_errors(conflict_message: str | None = None):
    try:
        with transaction.atomic():
            yield
    except IntegrityError as exc:
        text = str(exc).lower()
        if 'unique' in text or 'duplicate' in text:
            raise ConflictError(conflict_message) from exc
        if 'foreign key' in text:
            raise MissingReferenceError() from exc
        raise
    except OperationalError as exc:
        logger.warning('store operation failed: %s', exc)
        raise TransientStoreError() from exc


def get_or_404(model: Type[M], pk, label: str | None = None) -> M:
    try:
        return model.objects.get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"{label or model.__name__} not found")


def require_exists(model: Type[models.Model], pk, label: str) -> None:
    if pk is None or not model.objects.filter(pk=pk).exists():
        raise MissingReferenceError(f"{label} {pk} does not exist")


def apply_updates(obj: M, values: dict, allowed: Iterable[str]) -> M:
    """Copy ``values`` onto ``obj`` for the ``allowed`` field names and save."""
    changed = [name for name in allowed if name in values]
    for name in changed:
        setattr(obj, name, values[name])
    if changed:
        with translate_integrity_errors():
            obj.save(update_fields=changed)
    return obj
