"""
Domain-specific exceptions for participants app.

Each exception derives from a category in apps.core.exceptions, which
decides the HTTP status views and the API exception handler answer with.
"""
from apps.core.exceptions import (
    RotaServiceError,
    ValidationError,
    ConflictError,
    NotFoundError,
    ReorderError,
)


class ParticipantsServiceError(RotaServiceError):
    """Base exception for all participants service errors."""
    pass


class InvalidParticipantNameError(ParticipantsServiceError, ValidationError):
    """Raised when a participant name is missing or blank."""
    default_message = 'Name is required'


class DuplicateParticipantNameError(ParticipantsServiceError, ConflictError):
    """Raised when another participant already has this name."""
    default_message = 'Participant with this name already exists'


class ParticipantNotFoundError(ParticipantsServiceError, NotFoundError):
    """Raised when a participant does not exist."""
    default_message = 'Participant not found'


class ParticipantHasPurchasesError(ParticipantsServiceError, ConflictError):
    """Raised when deleting a participant who still has purchase history."""
    default_message = (
        'Cannot delete participant with purchase history. '
        'Delete their purchases first.'
    )


class InvalidReorderError(ParticipantsServiceError, ValidationError):
    """Raised when reorder ids are not a permutation of the current roster."""
    default_message = 'participantIds must be an array'


class ReorderFailedError(ParticipantsServiceError, ReorderError):
    """Raised when the reorder transaction failed and was rolled back."""
    pass
