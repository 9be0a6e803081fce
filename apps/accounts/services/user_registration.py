"""User registration service."""

import logging

from supabase import AuthError

from apps.core.backend import get_auth_client, upstream_message
from .auth_payloads import auth_response_to_dict
from .exceptions import UserRegistrationError

logger = logging.getLogger(__name__)


def register_user(*, email: str, password: str) -> dict:
    """
    Register a new user with the identity provider.

    Args:
        email: User's email address
        password: User's password (hashed by the provider)

    Returns:
        Dictionary with ``user`` and ``session`` (session is None while
        email confirmation is pending)

    Raises:
        UserRegistrationError: If the provider rejects the sign-up
    """
    try:
        response = get_auth_client().auth.sign_up({
            'email': email,
            'password': password,
        })
    except AuthError as e:
        logger.warning("Sign-up rejected: %s", upstream_message(e))
        raise UserRegistrationError(upstream_message(e))

    data = auth_response_to_dict(response)
    if data['user']:
        logger.info("Registered user %s", data['user']['id'])
    return data
