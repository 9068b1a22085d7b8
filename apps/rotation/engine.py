"""
Rotation engine.

Pure functions over an ordered roster: no database access, no side
effects. For a fixed roster order and last purchase the result is always
the same.

    roster [Alice, Bob, Carol], Bob bought last  ->  Carol is next
    roster [Alice, Bob, Carol], Carol bought last ->  Alice is next
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Sequence

NO_PARTICIPANTS_MESSAGE = 'No participants found'


@dataclass(frozen=True)
class LastPurchase:
    """Newest participant purchase, as far as the rotation cares."""
    participant_id: int
    name: Optional[str]
    purchase_date: datetime


@dataclass(frozen=True)
class NextBuyerView:
    """Derived next-buyer state. Never persisted."""
    next_buyer: Optional[Any]
    last_purchase: Optional[LastPurchase] = None
    message: Optional[str] = None


def compute_next_buyer(
    participants: Sequence[Any],
    last_purchase: Optional[LastPurchase] = None,
) -> NextBuyerView:
    """
    Work out who buys next.

    Args:
        participants: Roster in rotation order; items need an ``id``
        last_purchase: Newest participant purchase, if any. External
            purchases must not be passed here.

    Returns:
        NextBuyerView:
            - empty roster: no buyer, "No participants found"
            - no purchase yet: head of the rotation
            - otherwise: the participant after the last buyer in the
              *current* order, wrapping around. A last buyer no longer
              on the roster restarts the rotation at the head.
    """
    if not participants:
        return NextBuyerView(next_buyer=None, message=NO_PARTICIPANTS_MESSAGE)

    if last_purchase is None:
        return NextBuyerView(next_buyer=participants[0])

    ids = [p.id for p in participants]
    if last_purchase.participant_id in ids:
        next_index = (ids.index(last_purchase.participant_id) + 1) % len(participants)
    else:
        next_index = 0

    return NextBuyerView(next_buyer=participants[next_index], last_purchase=last_purchase)


def plan_out_of_order_rotation(
    current_ids: Sequence[int],
    buyer_id: int,
    skipped_id: Optional[int] = None,
) -> List[int]:
    """
    New rotation order after ``buyer_id`` bought out of turn.

    The skipped participant (who was next) moves to the front, everyone
    else keeps their relative order, and the buyer goes to the back:

        current [A, B, C, D], B was next, D bought  ->  [B, A, C, D]

    Without a usable ``skipped_id`` (missing, equal to the buyer, or not
    on the roster) the buyer simply moves to the back. Any roster id the
    construction missed is inserted before the buyer, and duplicates are
    collapsed keeping the first occurrence.
    """
    remaining = [pid for pid in current_ids if pid != buyer_id]

    if skipped_id is not None and skipped_id != buyer_id and skipped_id in remaining:
        others = [pid for pid in remaining if pid != skipped_id]
        new_order = [skipped_id] + others + [buyer_id]
    else:
        new_order = remaining + [buyer_id]

    for pid in current_ids:
        if pid not in new_order:
            new_order.insert(max(len(new_order) - 1, 0), pid)

    return list(dict.fromkeys(new_order))
