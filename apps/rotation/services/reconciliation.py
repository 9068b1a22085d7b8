"""
Out-of-order purchase reconciliation.

When someone other than the computed next buyer pays, the purchase is
recorded and the rotation rewritten so the skipped participant is first
in line and the buyer goes to the back.

The operation has two phases, recording the purchase and reordering,
which run in one transaction. If either phase fails both are rolled back
and the error names the phase, so the ledger never holds a purchase whose
rotation update was lost.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from django.db import transaction, DatabaseError

from apps.participants.models import Participant
from apps.participants.services import (
    list_participants,
    reorder_participants,
    InvalidReorderError,
    ReorderFailedError,
)
from apps.purchases.exceptions import MissingBuyerError
from apps.purchases.models import CoffeePurchase, ExternalPurchase
from apps.purchases.services import PurchaseLedgerService
from apps.rotation.engine import NextBuyerView, plan_out_of_order_rotation

from .exceptions import OutOfOrderPurchaseError
from .next_buyer import get_next_buyer

logger = logging.getLogger(__name__)

PHASE_PURCHASE = 'purchase'
PHASE_REORDER = 'reorder'


@dataclass
class OutOfOrderResult:
    """Fresh state after an out-of-order purchase."""
    purchase: Union[CoffeePurchase, ExternalPurchase]
    participants: List[Participant]
    next_buyer: NextBuyerView
    reordered: bool


def record_out_of_order_purchase(
    *,
    participant_id: Optional[int] = None,
    buyer_name: Optional[str] = None,
    current_next_buyer_id: Optional[int] = None,
) -> OutOfOrderResult:
    """
    Record a purchase made out of turn and reconcile the rotation.

    Branch A (participant_id): record the purchase, then reorder so the
    skipped next buyer leads, everyone else keeps their relative order and
    the buyer is last. ``current_next_buyer_id`` defaults to the next
    buyer computed before the purchase is recorded.

    Branch B (buyer_name only): record an external purchase. The rotation
    is untouched since the buyer is not part of it.

    Raises:
        MissingBuyerError: If neither participant_id nor buyer_name is given
        BuyerNotFoundError: If participant_id is not on the roster
        InvalidBuyerNameError: If buyer_name is blank
        OutOfOrderPurchaseError: If a phase failed; nothing was recorded
    """
    if not participant_id:
        if not buyer_name:
            raise MissingBuyerError()
        purchase = PurchaseLedgerService.record_external_purchase(name=buyer_name)
        return OutOfOrderResult(
            purchase=purchase,
            participants=list(list_participants()),
            next_buyer=get_next_buyer(),
            reordered=False,
        )

    with transaction.atomic():
        if current_next_buyer_id is None:
            view = get_next_buyer()
            current_next_buyer_id = view.next_buyer.id if view.next_buyer else None

        try:
            purchase = PurchaseLedgerService.record_participant_purchase(
                participant_id=participant_id
            )
        except DatabaseError as exc:
            logger.exception("Out-of-order purchase failed while recording the purchase")
            raise OutOfOrderPurchaseError(
                'Failed to record out-of-order purchase',
                phase=PHASE_PURCHASE,
            ) from exc

        current_ids = list(list_participants().values_list('id', flat=True))
        new_order = plan_out_of_order_rotation(
            current_ids,
            buyer_id=participant_id,
            skipped_id=current_next_buyer_id,
        )

        try:
            participants = reorder_participants(participant_ids=new_order)
        except (ReorderFailedError, InvalidReorderError) as exc:
            logger.error(
                "Out-of-order purchase by %s rolled back: reorder to %s failed (%s)",
                participant_id, new_order, exc,
            )
            raise OutOfOrderPurchaseError(
                'Failed to reorder participants; the purchase was not recorded',
                phase=PHASE_REORDER,
            ) from exc

    logger.info(
        "Out-of-order purchase by %s recorded (skipped %s); new order %s",
        participant_id, current_next_buyer_id, new_order,
    )
    return OutOfOrderResult(
        purchase=purchase,
        participants=participants,
        next_buyer=get_next_buyer(),
        reordered=True,
    )
