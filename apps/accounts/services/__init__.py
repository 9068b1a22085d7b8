"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    LoginNotConfiguredError,
)
from .shared_password import authenticate_shared_password

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'LoginNotConfiguredError',

    # Authentication
    'authenticate_shared_password',
]
