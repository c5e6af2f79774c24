"""
Error taxonomy and the DRF exception handler.

Services raise these (or DRF's own ``ValidationError``/``NotFound``) and the
handler renders every failure as::

    {"error": {"code": "CONFLICT", "message": "...", "details": {...}}}

Unexpected failures are logged with their traceback and reported with a
generic message only.
"""
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import exceptions, status

logger = logging.getLogger(__name__)


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The request conflicts with the current state of the resource.'
    default_code = 'conflict'

    def __init__(self, detail=None, code=None, blocking=None):
        super().__init__(detail, code)
        self.blocking = list(blocking or [])


class PreconditionFailed(exceptions.APIException):
    status_code = status.HTTP_412_PRECONDITION_FAILED
    default_detail = 'The resource is not in a state that allows this change.'
    default_code = 'precondition_failed'


class Unauthorized(exceptions.PermissionDenied):
    default_detail = 'You do not have access to this resource.'
    default_code = 'unauthorized'


class RetryableError(exceptions.APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'The request could not be completed. Please try again.'
    default_code = 'retryable'


class Unexpected(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'An unexpected error occurred.'
    default_code = 'unexpected'


def describe_objects(objects):
    """Stable, sorted ``[{"model": ..., "id": ...}]`` list for a set of model instances."""
    described = [{'model': obj._meta.label, 'id': obj.pk} for obj in objects]
    return sorted(described, key=lambda d: (d['model'], d['id']))


def _translate(exc):
    """Map Django-level exceptions onto the API taxonomy."""
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, 'error_dict'):
            return exceptions.ValidationError(exc.message_dict)
        return exceptions.ValidationError({'non_field_errors': exc.messages})
    if isinstance(exc, (ProtectedError, RestrictedError)):
        blocking = getattr(exc, 'protected_objects', None) or getattr(exc, 'restricted_objects', ())
        return Conflict('Delete blocked by dependent records.', blocking=describe_objects(blocking))
    if isinstance(exc, Http404):
        return exceptions.NotFound()
    if isinstance(exc, DjangoPermissionDenied):
        return Unauthorized()
    return exc


def _error_body(code, message, details=None):
    body = {'error': {'code': code, 'message': message}}
    if details:
        body['error']['details'] = details
    return body


def exception_handler(exc, context):
    """REST_FRAMEWORK['EXCEPTION_HANDLER'] entry point."""
    # Deferred: models import this module before the app registry is ready
    from rest_framework.response import Response
    from rest_framework.views import exception_handler as drf_exception_handler

    exc = _translate(exc)
    response = drf_exception_handler(exc, context)
    view = context.get('view')
    view_name = type(view).__name__ if view is not None else 'unknown'

    if response is None:
        logger.exception(f"Unexpected error in {view_name}", exc_info=exc)
        return Response(
            _error_body('UNEXPECTED', Unexpected.default_detail),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        logger.info(f"Validation error in {view_name}: {exc.detail}")
        response.data = _error_body('VALIDATION_ERROR', 'Validation error', response.data)
        return response

    code = getattr(exc, 'default_code', 'error').upper()
    details = {'blocking': exc.blocking} if isinstance(exc, Conflict) and exc.blocking else None
    if response.status_code >= 500:
        logger.error(f"{view_name} failed with HTTP {response.status_code}: {exc}")
    response.data = _error_body(code, str(exc.detail), details)
    return response
