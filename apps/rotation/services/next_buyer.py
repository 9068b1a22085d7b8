"""Next buyer service - feeds current roster state to the rotation engine."""
import logging

from apps.participants.services import list_participants
from apps.purchases.services import PurchaseLedgerService
from apps.rotation.engine import LastPurchase, NextBuyerView, compute_next_buyer

logger = logging.getLogger(__name__)


def get_last_purchase():
    """Newest participant purchase as a LastPurchase, or None."""
    purchase = PurchaseLedgerService.get_last_participant_purchase()
    if purchase is None:
        return None
    return LastPurchase(
        participant_id=purchase.participant_id,
        name=purchase.participant.name,
        purchase_date=purchase.purchase_date,
    )


def get_next_buyer() -> NextBuyerView:
    """
    Compute the next buyer from the current roster order.

    Recomputed on every call; nothing is stored.
    """
    participants = list(list_participants())
    last_purchase = get_last_purchase()
    view = compute_next_buyer(participants, last_purchase)

    if view.next_buyer is None:
        logger.debug("No participants; no next buyer")
    elif last_purchase is None:
        logger.debug("No previous purchases, suggesting first participant: %s", view.next_buyer.name)
    else:
        logger.debug("Last buyer: %s, next buyer: %s", last_purchase.name, view.next_buyer.name)
    return view
