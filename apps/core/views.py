import logging

from django.db import DatabaseError
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import status, serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response

from apps.participants.models import Participant

logger = logging.getLogger(__name__)


@extend_schema(
    responses={
        200: inline_serializer('HealthResponse', {'status': serializers.CharField()}),
        503: inline_serializer('HealthErrorResponse', {
            'status': serializers.CharField(),
            'message': serializers.CharField(),
        }),
    },
    description="Readiness probe: checks that the participants table can be queried.",
    tags=['system'],
)
@api_view(['GET'])
def health_check(request):
    """Health check including database connectivity."""
    try:
        list(Participant.objects.values_list('id', flat=True)[:1])
    except DatabaseError:
        logger.exception("Health check failed")
        return Response(
            {'status': 'error', 'message': 'Database not ready'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )
    return Response({'status': 'ok'})
