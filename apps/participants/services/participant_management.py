"""
Participant management service.

Handles the rotation roster: listing in rotation order, adding to the back
of the rotation, renaming and guarded deletion.
"""
import logging

from django.db import transaction, IntegrityError
from django.db.models import ProtectedError, QuerySet

from apps.participants.models import Participant

from .exceptions import (
    InvalidParticipantNameError,
    DuplicateParticipantNameError,
    ParticipantNotFoundError,
    ParticipantHasPurchasesError,
)

logger = logging.getLogger(__name__)


def _clean_name(name) -> str:
    """Return the trimmed name, or raise if it is missing or blank."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidParticipantNameError()
    return name.strip()


def list_participants() -> QuerySet[Participant]:
    """
    Get all participants in rotation order.

    Returns:
        QuerySet of Participant ordered by order_position ascending
        (id breaks ties)
    """
    return Participant.objects.order_by('order_position', 'id')


@transaction.atomic
def add_participant(*, name: str) -> Participant:
    """
    Add a participant at the back of the rotation.

    The new order_position is the current maximum plus one (1 for an
    empty roster). Two concurrent adds can read the same maximum and share a
    position; list order then falls back to id, so it stays total.

    Args:
        name: Participant name (trimmed; must be non-empty and unique)

    Returns:
        Created Participant instance

    Raises:
        InvalidParticipantNameError: If name is empty or whitespace-only
        DuplicateParticipantNameError: If name is already taken
    """
    name = _clean_name(name)

    if Participant.objects.filter(name=name).exists():
        raise DuplicateParticipantNameError()

    max_position = (
        Participant.objects
        .select_for_update()
        .order_by('-order_position')
        .values_list('order_position', flat=True)
        .first()
    )
    new_position = (max_position or 0) + 1

    try:
        participant = Participant.objects.create(name=name, order_position=new_position)
    except IntegrityError:
        # Unique constraint caught a concurrent insert of the same name
        raise DuplicateParticipantNameError()

    logger.info("Participant added: %s (id=%s, position=%s)", name, participant.id, new_position)
    return participant


@transaction.atomic
def update_participant(*, participant_id: int, name: str) -> Participant:
    """
    Rename a participant. The rotation position is left untouched.

    Raises:
        InvalidParticipantNameError: If name is empty or whitespace-only
        ParticipantNotFoundError: If participant doesn't exist
        DuplicateParticipantNameError: If another participant has the name
    """
    name = _clean_name(name)

    try:
        participant = Participant.objects.select_for_update().get(id=participant_id)
    except Participant.DoesNotExist:
        raise ParticipantNotFoundError()

    if Participant.objects.filter(name=name).exclude(id=participant_id).exists():
        raise DuplicateParticipantNameError()

    participant.name = name
    try:
        participant.save(update_fields=['name'])
    except IntegrityError:
        raise DuplicateParticipantNameError()

    logger.info("Participant %s renamed to %s", participant_id, name)
    return participant


@transaction.atomic
def delete_participant(*, participant_id: int) -> Participant:
    """
    Delete a participant with no purchase history.

    The history check runs before the delete and blocks it entirely;
    purchases are never cascaded.

    Returns:
        The deleted Participant (id preserved for the response)

    Raises:
        ParticipantNotFoundError: If participant doesn't exist
        ParticipantHasPurchasesError: If any CoffeePurchase references it
    """
    try:
        participant = Participant.objects.select_for_update().get(id=participant_id)
    except Participant.DoesNotExist:
        raise ParticipantNotFoundError()

    if participant.has_purchases():
        raise ParticipantHasPurchasesError()

    try:
        participant.delete()
    except ProtectedError:
        # A purchase was recorded between the check and the delete
        raise ParticipantHasPurchasesError()

    # delete() clears the primary key on the instance
    participant.id = participant_id

    logger.info("Participant deleted: %s (id=%s)", participant.name, participant_id)
    return participant
