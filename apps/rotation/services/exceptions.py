"""Domain exceptions for rotation app."""
from apps.core.exceptions import RotaServiceError, ReconciliationError


class RotationServiceError(RotaServiceError):
    """Base exception for all rotation service errors."""
    pass


class OutOfOrderPurchaseError(RotationServiceError, ReconciliationError):
    """Out-of-order purchase failed in one phase; both phases rolled back."""
    pass
