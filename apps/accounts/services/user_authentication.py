"""User authentication and token lookup services."""

import logging

from supabase import AuthError

from apps.core.backend import get_auth_client, upstream_message
from .auth_payloads import auth_response_to_dict, user_to_dict
from .exceptions import InvalidCredentialsError, InvalidTokenError

logger = logging.getLogger(__name__)


def authenticate_user(*, email: str, password: str) -> dict:
    """
    Authenticate user with email and password.

    Args:
        email: User's email
        password: User's password

    Returns:
        Dictionary with ``user`` and ``session``

    Raises:
        InvalidCredentialsError: If the provider rejects the credentials
    """
    try:
        response = get_auth_client().auth.sign_in_with_password({
            'email': email,
            'password': password,
        })
    except AuthError as e:
        logger.warning("Sign-in rejected: %s", upstream_message(e))
        raise InvalidCredentialsError(upstream_message(e))

    return auth_response_to_dict(response)


def get_user_by_token(*, access_token: str) -> dict:
    """
    Resolve the user owning an access token.

    Raises:
        InvalidTokenError: If the token is rejected or resolves to no user
    """
    if not access_token:
        raise InvalidTokenError("Missing access token")

    try:
        response = get_auth_client().auth.get_user(access_token)
    except AuthError as e:
        raise InvalidTokenError(upstream_message(e))

    user = getattr(response, 'user', None)
    if user is None:
        raise InvalidTokenError("User not found for access token")

    return user_to_dict(user)
