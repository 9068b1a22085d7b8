"""
Participants app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations run in a transaction.
"""

from .exceptions import (
    ParticipantsServiceError,
    InvalidParticipantNameError,
    DuplicateParticipantNameError,
    ParticipantNotFoundError,
    ParticipantHasPurchasesError,
    InvalidReorderError,
    ReorderFailedError,
)

from .participant_management import (
    list_participants,
    add_participant,
    update_participant,
    delete_participant,
)

from .reorder import (
    reorder_participants,
    prune_reorder_history,
    get_reorder_history,
)


__all__ = [
    # Exceptions
    'ParticipantsServiceError',
    'InvalidParticipantNameError',
    'DuplicateParticipantNameError',
    'ParticipantNotFoundError',
    'ParticipantHasPurchasesError',
    'InvalidReorderError',
    'ReorderFailedError',

    # Participant Management
    'list_participants',
    'add_participant',
    'update_participant',
    'delete_participant',

    # Reorder
    'reorder_participants',
    'prune_reorder_history',
    'get_reorder_history',
]
