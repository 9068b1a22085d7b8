"""
Domain exceptions for purchases app.

This module defines the exception hierarchy for ledger errors. Each
exception derives from a category in apps.core.exceptions, which carries
its HTTP status.
"""
from apps.core.exceptions import (
    RotaServiceError,
    ValidationError,
    NotFoundError,
)


class PurchaseServiceError(RotaServiceError):
    """Base exception for purchase service errors."""
    pass


class MissingBuyerError(PurchaseServiceError, ValidationError):
    """Raised when neither a participant nor an external buyer is given."""
    default_message = 'Either participant_id or buyer_name is required'


class InvalidBuyerNameError(PurchaseServiceError, ValidationError):
    """Raised when an external buyer name is blank."""
    default_message = 'Buyer name is required'


class InvalidPurchaseTypeError(PurchaseServiceError, ValidationError):
    """Raised when a purchase kind is not 'coffee' or 'external'."""
    default_message = 'Invalid purchase type specified. Must be "coffee" or "external".'


class BuyerNotFoundError(PurchaseServiceError, NotFoundError):
    """Raised when the purchasing participant does not exist."""
    default_message = 'Participant not found'


class PurchaseNotFoundError(PurchaseServiceError, NotFoundError):
    """Raised when a purchase of the given kind does not exist."""
    default_message = 'Purchase not found'
