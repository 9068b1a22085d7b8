"""
Shared error taxonomy for the coffee rota.

Every app derives its domain exceptions from one of these categories so
views and the API exception handler can map them to HTTP responses
without knowing each concrete error.

    ValidationError     -> 400  bad or missing input
    ConflictError       -> 400  duplicate name, delete with history
    NotFoundError       -> 404  missing participant or purchase
    StorageError        -> 500  unexpected backend failure (generic message)
    ReorderError        -> 500  reorder transaction rolled back
    ReconciliationError -> 500  out-of-order purchase rolled back
"""


class RotaServiceError(Exception):
    """Base exception for all rota service errors."""

    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RotaServiceError):
    """Input is missing or malformed."""
    status_code = 400
    default_message = 'Invalid request data'


class ConflictError(RotaServiceError):
    """Operation conflicts with current state."""
    status_code = 400
    default_message = 'Operation conflicts with current state'


class NotFoundError(RotaServiceError):
    """Referenced record does not exist."""
    status_code = 404
    default_message = 'Not found'


class StorageError(RotaServiceError):
    """Unexpected failure of the backing store."""
    status_code = 500
    default_message = 'Internal server error'


class ReorderError(RotaServiceError):
    """Reorder transaction failed and was rolled back."""
    status_code = 500
    default_message = 'Failed to reorder participants'


class ReconciliationError(RotaServiceError):
    """Out-of-order purchase failed and was rolled back."""
    status_code = 500
    default_message = 'Failed to record out-of-order purchase'

    def __init__(self, message=None, *, phase=None):
        super().__init__(message)
        self.phase = phase
