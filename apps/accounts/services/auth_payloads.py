"""Conversion of identity provider objects into plain dictionaries."""

from datetime import datetime
from typing import Any, Optional


def _iso(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def user_to_dict(user) -> Optional[dict]:
    """Return the public fields of a Supabase auth user."""
    if user is None:
        return None
    return {
        'id': str(user.id),
        'email': getattr(user, 'email', None),
        'created_at': _iso(getattr(user, 'created_at', None)),
    }


def session_to_dict(session) -> Optional[dict]:
    """
    Return the token fields of a Supabase session.

    Sign-up yields no session while the email address awaits confirmation.
    """
    if session is None:
        return None
    return {
        'access_token': session.access_token,
        'refresh_token': session.refresh_token,
        'token_type': getattr(session, 'token_type', 'bearer'),
        'expires_in': getattr(session, 'expires_in', None),
        'expires_at': getattr(session, 'expires_at', None),
    }


def auth_response_to_dict(response) -> dict:
    return {
        'user': user_to_dict(response.user),
        'session': session_to_dict(response.session),
    }
