"""
API exception handler.

Three layers, checked in order:
    - RotaServiceError: mapped by its status_code, message passed through
      (StorageError keeps the generic message)
    - DRF exceptions: default DRF response, request validation errors
      reshaped to {"error", "details"}
    - django.db.DatabaseError: logged, answered as a generic 500
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .exceptions import RotaServiceError, ReconciliationError, StorageError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Convert uncaught exceptions into JSON error responses."""
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown'

    if isinstance(exc, RotaServiceError):
        return _service_error_response(exc, view_name)

    if isinstance(exc, DatabaseError):
        logger.exception("Storage failure in %s", view_name)
        return _service_error_response(StorageError(), view_name)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, DRFValidationError):
        logger.warning("Validation error in %s: %s", view_name, response.data)
        response.data = {
            'error': 'Invalid request data',
            'details': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response


def _service_error_response(exc, view_name):
    set_rollback()
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s in %s: %s", type(exc).__name__, view_name, exc.message)
    message = StorageError.default_message if isinstance(exc, StorageError) else exc.message
    body = {'error': message}
    if isinstance(exc, ReconciliationError) and exc.phase:
        body['phase'] = exc.phase
    return Response(body, status=exc.status_code)
