"""
Purchase Services Module
=========================

This module provides the business logic for the coffee purchase ledger.

Classes:
    PurchaseLedgerService: Records, lists and deletes participant and
        external purchases.

Two kinds of purchase share the ledger but not an id space:

- ``CoffeePurchase`` rows belong to a roster participant. The newest one
  decides whose turn is next.
- ``ExternalPurchase`` rows carry only a free-form buyer name. They show
  up in the history but never move the rotation.

Example:
    Recording and listing purchases::

        from apps.purchases.services import PurchaseLedgerService

        PurchaseLedgerService.record_participant_purchase(participant_id=alice.id)
        PurchaseLedgerService.record_external_purchase(name='Visiting auditor')

        for row in PurchaseLedgerService.list_all():
            print(row['name'], row['is_external'], row['purchase_date'])
"""
import logging

from django.db import transaction
from django.utils import timezone

from apps.participants.models import Participant
from .exceptions import (
    MissingBuyerError,
    InvalidBuyerNameError,
    InvalidPurchaseTypeError,
    BuyerNotFoundError,
    PurchaseNotFoundError,
)
from .models import CoffeePurchase, ExternalPurchase, PurchaseKind

logger = logging.getLogger(__name__)


class PurchaseLedgerService:
    """
    Service for the append-only purchase ledger.

    Timestamps are assigned here, at write time, from the server clock
    (UTC). Entries are immutable; they can only be deleted one at a time
    or cleared in bulk.

    Methods:
        record_purchase: Record for a participant or an external buyer.
        record_participant_purchase: Record a purchase by a participant.
        record_external_purchase: Record a purchase by a non-member.
        get_last_participant_purchase: Newest participant purchase.
        list_all: Unified history of both kinds, newest first.
        delete_one: Delete a single purchase of a given kind.
        clear_all: Delete every purchase of both kinds.
    """

    @staticmethod
    @transaction.atomic
    def record_participant_purchase(*, participant_id):
        """
        Record a coffee purchase for a roster participant.

        Args:
            participant_id (int): The buying participant's id.

        Returns:
            CoffeePurchase: The created purchase.

        Raises:
            BuyerNotFoundError: If the participant does not exist.
        """
        try:
            participant = Participant.objects.get(id=participant_id)
        except (Participant.DoesNotExist, ValueError, TypeError):
            raise BuyerNotFoundError()

        purchase = CoffeePurchase.objects.create(
            participant=participant,
            purchase_date=timezone.now(),
        )
        logger.info("Coffee purchase %s recorded for %s", purchase.id, participant.name)
        return purchase

    @staticmethod
    def record_purchase(*, participant_id=None, buyer_name=None):
        """
        Record a purchase for a participant or, failing that, an external buyer.

        A participant_id wins when both are given.

        Returns:
            CoffeePurchase | ExternalPurchase: The created purchase.

        Raises:
            MissingBuyerError: If neither participant_id nor buyer_name is given.
            BuyerNotFoundError: If participant_id does not exist.
            InvalidBuyerNameError: If buyer_name is blank.
        """
        if participant_id:
            return PurchaseLedgerService.record_participant_purchase(participant_id=participant_id)
        if buyer_name:
            return PurchaseLedgerService.record_external_purchase(name=buyer_name)
        raise MissingBuyerError()

    @staticmethod
    @transaction.atomic
    def record_external_purchase(*, name):
        """
        Record a coffee purchase by someone outside the rotation.

        Args:
            name (str): Free-form buyer name (trimmed, non-empty).

        Returns:
            ExternalPurchase: The created purchase.

        Raises:
            InvalidBuyerNameError: If name is missing or blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidBuyerNameError()

        purchase = ExternalPurchase.objects.create(
            name=name.strip(),
            purchase_date=timezone.now(),
        )
        logger.info("External purchase %s recorded for %s", purchase.id, purchase.name)
        return purchase

    @staticmethod
    def get_last_participant_purchase():
        """
        Get the newest participant purchase, or None.

        External purchases are ignored; they never shift the rotation.
        Equal timestamps are broken by the higher id.
        """
        return (
            CoffeePurchase.objects
            .select_related('participant')
            .order_by('-purchase_date', '-id')
            .first()
        )

    @staticmethod
    def list_all():
        """
        Get the unified purchase history, most recent first.

        Returns:
            list[dict]: One dict per purchase with keys ``id``, ``name``,
            ``purchase_date`` and ``is_external``; participant purchases
            also carry ``participant_id``. Equal timestamps are ordered by
            id descending.
        """
        rows = []

        coffee_purchases = CoffeePurchase.objects.select_related('participant')
        for purchase in coffee_purchases:
            rows.append({
                'id': purchase.id,
                'name': purchase.participant.name,
                'participant_id': purchase.participant_id,
                'purchase_date': purchase.purchase_date,
                'is_external': False,
            })

        for purchase in ExternalPurchase.objects.all():
            rows.append({
                'id': purchase.id,
                'name': purchase.name,
                'purchase_date': purchase.purchase_date,
                'is_external': True,
            })

        rows.sort(key=lambda row: (row['purchase_date'], row['id']), reverse=True)
        return rows

    @staticmethod
    @transaction.atomic
    def delete_one(*, purchase_id, kind):
        """
        Delete a single purchase.

        The two purchase kinds share no id space, so ``kind`` selects the
        table the id refers to.

        Args:
            purchase_id (int): Purchase id within its kind.
            kind (str): ``'coffee'`` or ``'external'``.

        Raises:
            InvalidPurchaseTypeError: If kind is not a known purchase kind.
            PurchaseNotFoundError: If no purchase of that kind has the id.
        """
        if kind == PurchaseKind.COFFEE:
            model = CoffeePurchase
        elif kind == PurchaseKind.EXTERNAL:
            model = ExternalPurchase
        else:
            raise InvalidPurchaseTypeError()

        deleted, _ = model.objects.filter(id=purchase_id).delete()
        if not deleted:
            raise PurchaseNotFoundError(f"{kind.capitalize()} purchase not found")

        logger.info("%s purchase %s deleted", kind.capitalize(), purchase_id)

    @staticmethod
    @transaction.atomic
    def clear_all():
        """
        Delete every purchase of both kinds.

        Destructive and irreversible: there is no soft delete.

        Returns:
            int: Total number of purchases deleted across both kinds.
        """
        coffee_deleted, _ = CoffeePurchase.objects.all().delete()
        external_deleted, _ = ExternalPurchase.objects.all().delete()
        total = coffee_deleted + external_deleted

        logger.info(
            "Purchase history cleared: %s participant and %s external purchases deleted",
            coffee_deleted, external_deleted,
        )
        return total
