"""Shared password authentication service."""
import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare

from .exceptions import InvalidCredentialsError, LoginNotConfiguredError

logger = logging.getLogger(__name__)


def authenticate_shared_password(*, password) -> bool:
    """
    Check a password against the single shared secret.

    The whole group shares one password (APP_SHARED_PASSWORD); there are
    no user accounts.

    Args:
        password: Password supplied by the client

    Returns:
        True when the password matches

    Raises:
        LoginNotConfiguredError: If APP_SHARED_PASSWORD is not set
        InvalidCredentialsError: If password is missing or wrong
    """
    shared_password = getattr(settings, 'APP_SHARED_PASSWORD', '')
    if not shared_password:
        logger.error("APP_SHARED_PASSWORD is not set; login is unavailable")
        raise LoginNotConfiguredError()

    if not password or not constant_time_compare(password, shared_password):
        logger.info("Login rejected: invalid password")
        raise InvalidCredentialsError()

    return True
