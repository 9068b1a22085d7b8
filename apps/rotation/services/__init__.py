"""
Rotation app services layer.

The pure turn computation lives in apps.rotation.engine; these services
load roster and ledger state for it and run the out-of-order
reconciliation transaction.
"""

from .exceptions import (
    RotationServiceError,
    OutOfOrderPurchaseError,
)

from .next_buyer import (
    get_last_purchase,
    get_next_buyer,
)

from .reconciliation import (
    OutOfOrderResult,
    record_out_of_order_purchase,
)


__all__ = [
    # Exceptions
    'RotationServiceError',
    'OutOfOrderPurchaseError',

    # Next Buyer
    'get_last_purchase',
    'get_next_buyer',

    # Reconciliation
    'OutOfOrderResult',
    'record_out_of_order_purchase',
]
