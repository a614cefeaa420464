"""
Error taxonomy and the unified API exception handler.

Services raise the classes below; views let them propagate and the
handler renders every failure as::

    {"ok": false, "message": "...", "error": {"code": "...", "message": "..."}}

Field level validation messages are added under ``errors``.
"""
from __future__ import annotations

import logging

from django.db import DatabaseError, OperationalError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ValidationError(exceptions.ValidationError):
    default_code = 'invalid'


class MissingReferenceError(exceptions.APIException):
    """A foreign key points at a row that does not exist."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Referenced record does not exist'
    default_code = 'invalid_reference'


class ForbiddenError(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have access to this resource'
    default_code = 'forbidden'


class NotFoundError(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found'
    default_code = 'not_found'


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Record already exists'
    default_code = 'conflict'


class UpstreamError(exceptions.APIException):
    """An external collaborator (assistant, email, geocoder) failed."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Upstream service failed'
    default_code = 'upstream_error'


class TransientStoreError(exceptions.APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Database temporarily unavailable'
    default_code = 'store_unavailable'


def _first_message(data) -> str:
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
        return ''
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ''
    return str(data)


def _error_code(exc, resp) -> str:
    codes = exc.get_codes() if isinstance(exc, exceptions.APIException) else None
    if isinstance(exc, exceptions.ValidationError):
        return 'invalid'
    if isinstance(codes, str):
        return codes
    if resp.status_code == 404:
        return 'not_found'
    if resp.status_code == 403:
        return 'forbidden'
    return 'api_error'


def api_exception_handler(exc, context):
    if isinstance(exc, OperationalError):
        logger.warning('database unavailable: %s', exc)
        exc = TransientStoreError()

    resp = drf_exception_handler(exc, context)
    if resp is None:
        if isinstance(exc, DatabaseError):
            logger.error('database error: %s', exc)
        else:
            logger.exception('unhandled error in %s', context.get('view'))
        message = 'Internal server error'
        return Response(
            {'ok': False, 'message': message, 'error': {'code': 'server_error', 'message': message}},
            status=500,
        )

    code = _error_code(exc, resp)
    body: dict[str, object] = {'ok': False}
    if isinstance(exc, exceptions.ValidationError):
        message = 'Invalid request'
        if isinstance(resp.data, dict):
            body['errors'] = resp.data
            first = _first_message(resp.data)
            if first:
                message = first
        elif isinstance(resp.data, list) and resp.data:
            message = _first_message(resp.data)
    else:
        detail = resp.data.get('detail') if isinstance(resp.data, dict) else resp.data
        message = str(detail)

    if resp.status_code >= 500:
        logger.error('%s: %s', code, message)

    body['message'] = message
    body['error'] = {'code': code, 'message': message}
    resp.data = body
    return resp
