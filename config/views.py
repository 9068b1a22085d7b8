"""JSON fallbacks for requests that never reach a DRF view."""
import logging

from django.http import JsonResponse

from apps.core.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


def error_404(request, exception):
    return JsonResponse({'error': NotFoundError.default_message}, status=NotFoundError.status_code)


def error_500(request):
    logger.error("Unhandled server error on %s %s", request.method, request.path)
    return JsonResponse({'error': StorageError.default_message}, status=StorageError.status_code)
