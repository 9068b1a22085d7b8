from rest_framework import status, serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.idempotency import idempotent
from .serializers import (
    ParticipantNameSerializer,
    ReorderInputSerializer,
    ParticipantSerializer,
    ParticipantMinimalSerializer,
    ParticipantDeletedSerializer,
    ReorderHistoryEntrySerializer,
)
from .services import (
    list_participants,
    add_participant,
    update_participant,
    delete_participant,
    reorder_participants,
    get_reorder_history,
    # Exceptions
    InvalidParticipantNameError,
    DuplicateParticipantNameError,
    ParticipantNotFoundError,
    ParticipantHasPurchasesError,
    InvalidReorderError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: ParticipantSerializer(many=True)},
    description="List participants in rotation order.",
    tags=['participants'],
)
@extend_schema(
    methods=['POST'],
    request=ParticipantNameSerializer,
    responses={
        201: ParticipantSerializer,
        400: ErrorResponseSerializer,
    },
    description=(
        "Add a participant at the back of the rotation. "
        "Send an Idempotency-Key header to make retries safe."
    ),
    tags=['participants'],
)
@api_view(['GET', 'POST'])
@idempotent('participants.create')
def participant_collection(request):
    """List participants or add a new one."""
    if request.method == 'GET':
        serializer = ParticipantSerializer(list_participants(), many=True)
        return Response(serializer.data)

    serializer = ParticipantNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        participant = add_participant(name=serializer.validated_data['name'])
    except (InvalidParticipantNameError, DuplicateParticipantNameError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ParticipantSerializer(participant).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['PUT'],
    request=ParticipantNameSerializer,
    responses={
        200: ParticipantSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Rename a participant. Rotation position is unchanged.",
    tags=['participants'],
)
@extend_schema(
    methods=['DELETE'],
    responses={
        200: ParticipantDeletedSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete a participant. Refused while they have purchase history.",
    tags=['participants'],
)
@api_view(['PUT', 'DELETE'])
def participant_detail(request, participant_id):
    """Rename or delete a participant."""
    if request.method == 'PUT':
        serializer = ParticipantNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            participant = update_participant(
                participant_id=participant_id,
                name=serializer.validated_data['name'],
            )
        except ParticipantNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidParticipantNameError, DuplicateParticipantNameError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ParticipantSerializer(participant).data)

    try:
        participant = delete_participant(participant_id=participant_id)
    except ParticipantNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ParticipantHasPurchasesError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Participant deleted successfully',
        'participant': ParticipantMinimalSerializer(participant).data,
    })


@extend_schema(
    request=ReorderInputSerializer,
    responses={
        200: ParticipantSerializer(many=True),
        400: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description=(
        "Apply a new rotation order. participantIds must list every current "
        "participant exactly once. The change and its history entry are atomic."
    ),
    tags=['participants'],
)
@api_view(['PUT'])
def reorder(request):
    """Reorder the rotation."""
    serializer = ReorderInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        participants = reorder_participants(
            participant_ids=serializer.validated_data['participantIds']
        )
    except InvalidReorderError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    # ReorderFailedError propagates to the API exception handler (500)
    return Response(ParticipantSerializer(participants, many=True).data)


@extend_schema(
    responses={200: ReorderHistoryEntrySerializer(many=True)},
    description=(
        "Retained reorder history, newest first. Best effort: answers [] "
        "when history cannot be read and REORDER_HISTORY_BEST_EFFORT is on."
    ),
    tags=['participants'],
)
@api_view(['GET'])
def reorder_history(request):
    """Get the reorder audit trail."""
    entries = get_reorder_history()
    return Response(ReorderHistoryEntrySerializer(entries, many=True).data)
