"""
Idempotency-Key support for non-idempotent POST endpoints.

Adding a participant or recording a purchase twice duplicates data. Clients
that may retry send an ``Idempotency-Key`` header; the first successful
response for that key is stored and replayed for later requests carrying
the same key, so a retry never creates a second row.

Requests without the header are processed normally.
"""
import functools
import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction, IntegrityError
from django.utils import timezone
from rest_framework.response import Response

from .exceptions import ValidationError
from .models import IdempotencyKey

logger = logging.getLogger(__name__)

IDEMPOTENCY_HEADER = 'Idempotency-Key'
REPLAYED_HEADER = 'Idempotent-Replayed'
MAX_KEY_LENGTH = 255


def get_stored_response(*, scope: str, key: str):
    """
    Return the stored response for a key, or None.

    Expired entries for the key are removed first.
    """
    now = timezone.now()
    IdempotencyKey.objects.filter(scope=scope, key=key, expires_at__lte=now).delete()
    return IdempotencyKey.objects.filter(scope=scope, key=key).first()


def store_response(*, scope: str, key: str, response: Response) -> IdempotencyKey:
    """
    Persist a successful response under its key.

    Raises:
        IntegrityError: If another request stored the same key first
    """
    ttl = timedelta(hours=settings.IDEMPOTENCY_KEY_TTL_HOURS)
    return IdempotencyKey.objects.create(
        scope=scope,
        key=key,
        status_code=response.status_code,
        response_body=response.data,
        expires_at=timezone.now() + ttl,
    )


def _replay(record: IdempotencyKey) -> Response:
    response = Response(record.response_body, status=record.status_code)
    response[REPLAYED_HEADER] = 'true'
    return response


def idempotent(scope: str):
    """
    Decorate a DRF function view so POSTs honour an Idempotency-Key header.

    The view runs inside one transaction together with storing its
    response, so a key is only ever bound to a response whose writes
    committed.

    Usage:
        @api_view(['GET', 'POST'])
        @idempotent('participants.create')
        def participant_collection(request):
            ...
    """
    def decorator(view_func):
        @functools.wraps(view_func)
        def wrapper(request, *args, **kwargs):
            key = request.headers.get(IDEMPOTENCY_HEADER)
            if request.method != 'POST' or not key:
                return view_func(request, *args, **kwargs)

            key = key.strip()
            if not key or len(key) > MAX_KEY_LENGTH:
                raise ValidationError(
                    f"{IDEMPOTENCY_HEADER} must be 1-{MAX_KEY_LENGTH} characters"
                )

            stored = get_stored_response(scope=scope, key=key)
            if stored is not None:
                logger.info("Replaying stored response for %s key %s", scope, key)
                return _replay(stored)

            try:
                with transaction.atomic():
                    response = view_func(request, *args, **kwargs)
                    if 200 <= response.status_code < 300:
                        store_response(scope=scope, key=key, response=response)
            except IntegrityError:
                # A concurrent request with the same key committed first
                stored = get_stored_response(scope=scope, key=key)
                if stored is None:
                    raise
                logger.info("Concurrent request won key %s for %s; replaying", key, scope)
                return _replay(stored)

            return response
        return wrapper
    return decorator
