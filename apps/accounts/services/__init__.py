"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, get_user_by_token

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InvalidTokenError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_by_token',
]
