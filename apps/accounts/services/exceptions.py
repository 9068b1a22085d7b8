"""Domain-specific exceptions for accounts services."""
from apps.core.exceptions import RotaServiceError


class AccountsServiceError(RotaServiceError):
    """Base exception for accounts services."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when the shared password is wrong or missing."""
    status_code = 401
    default_message = 'Invalid password.'


class LoginNotConfiguredError(AccountsServiceError):
    """Raised when no shared password is configured on the server."""
    status_code = 500
    default_message = 'Login system configuration error.'
