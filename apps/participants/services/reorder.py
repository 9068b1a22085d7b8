"""
Reorder transaction service.

Applies an explicit new rotation order and keeps a bounded audit trail of
before/after snapshots. Reading the old order, rewriting every position,
recording the history entry and pruning old entries happen in a single
transaction: a failure anywhere leaves the previous order intact.
"""
import logging
from typing import List, Optional

from django.conf import settings
from django.db import transaction, DatabaseError

from apps.core.exceptions import StorageError
from apps.participants.models import Participant, ReorderHistoryEntry

from .exceptions import InvalidReorderError, ReorderFailedError

logger = logging.getLogger(__name__)


def _validate_ids(participant_ids) -> List[int]:
    if not isinstance(participant_ids, (list, tuple)):
        raise InvalidReorderError('participantIds must be an array')

    for pid in participant_ids:
        # bool is an int subclass; True is not a participant id
        if isinstance(pid, bool) or not isinstance(pid, int):
            raise InvalidReorderError('participantIds must contain only integer ids')

    if len(set(participant_ids)) != len(participant_ids):
        raise InvalidReorderError('participantIds contains duplicate ids')

    return list(participant_ids)


def _check_permutation(new_order: List[int], old_order: List[int]) -> None:
    new_ids, old_ids = set(new_order), set(old_order)
    missing = sorted(old_ids - new_ids)
    unknown = sorted(new_ids - old_ids)

    if missing or unknown:
        details = []
        if missing:
            details.append(f"missing ids {missing}")
        if unknown:
            details.append(f"unknown ids {unknown}")
        raise InvalidReorderError(
            "participantIds must list every current participant exactly once: "
            + "; ".join(details)
        )


def prune_reorder_history(*, keep: Optional[int] = None) -> int:
    """
    Keep only the newest `keep` history entries by id.

    Deletes every entry strictly older than the keep-th newest one.

    Returns:
        Number of entries deleted
    """
    if keep is None:
        keep = settings.REORDER_HISTORY_RETENTION

    newest_ids = list(
        ReorderHistoryEntry.objects
        .order_by('-id')
        .values_list('id', flat=True)[:keep]
    )
    if len(newest_ids) < keep:
        return 0

    deleted, _ = ReorderHistoryEntry.objects.filter(id__lt=newest_ids[-1]).delete()
    if deleted:
        logger.info("Trimmed reorder history: %s entries older than id %s deleted", deleted, newest_ids[-1])
    return deleted


def reorder_participants(*, participant_ids) -> List[Participant]:
    """
    Apply a new rotation order to every participant.

    Steps, all inside one transaction:
        1. Lock participants and snapshot the current order
        2. Verify participant_ids is a permutation of that order
        3. Assign order_position = 1-based index in participant_ids
        4. Append a ReorderHistoryEntry(old_order, new_order)
        5. Prune history to the configured retention

    Args:
        participant_ids: Every current participant id, in the new order

    Returns:
        Participants reloaded in their new order

    Raises:
        InvalidReorderError: If ids are not a list of ints forming an exact
            permutation of the current roster (nothing is changed)
        ReorderFailedError: If the database failed; all changes rolled back
    """
    new_order = _validate_ids(participant_ids)

    try:
        with transaction.atomic():
            current = list(
                Participant.objects
                .select_for_update()
                .order_by('order_position', 'id')
            )
            old_order = [p.id for p in current]
            _check_permutation(new_order, old_order)

            by_id = {p.id: p for p in current}
            for index, pid in enumerate(new_order, start=1):
                by_id[pid].order_position = index
            Participant.objects.bulk_update(current, ['order_position'])

            entry = ReorderHistoryEntry.objects.create(old_order=old_order, new_order=new_order)
            prune_reorder_history()
    except DatabaseError as exc:
        logger.exception("Reorder failed and was rolled back: %s", new_order)
        raise ReorderFailedError() from exc

    logger.info("Participants reordered %s -> %s (history id=%s)", old_order, new_order, entry.id)
    return list(Participant.objects.order_by('order_position', 'id'))


def get_reorder_history(*, best_effort: Optional[bool] = None) -> List[ReorderHistoryEntry]:
    """
    Get retained reorder history, newest first.

    History is advisory. With best_effort (default: the
    REORDER_HISTORY_BEST_EFFORT setting) a storage failure is logged and
    an empty list returned instead of an error.

    Raises:
        StorageError: If the read fails and best_effort is off
    """
    if best_effort is None:
        best_effort = settings.REORDER_HISTORY_BEST_EFFORT

    try:
        return list(ReorderHistoryEntry.objects.order_by('-id'))
    except DatabaseError as exc:
        if best_effort:
            logger.warning("Error fetching reorder history (returning empty list): %s", exc)
            return []
        logger.exception("Error fetching reorder history")
        raise StorageError() from exc
