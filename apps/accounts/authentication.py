"""
Bearer token authentication backed by Supabase Auth.

Users live in the identity provider, not in Django. The authenticator
resolves ``Authorization: Bearer <token>`` through the provider and attaches
a lightweight ``SupabaseUser`` to ``request.user``. The raw token stays on
``request.auth`` so views can forward it to user-scoped clients.
"""

from dataclasses import dataclass
from typing import Optional

from rest_framework import authentication, exceptions

from .services import InvalidTokenError, get_user_by_token


@dataclass(frozen=True)
class SupabaseUser:
    """Authenticated identity provider user."""

    id: str
    email: Optional[str] = None
    created_at: Optional[str] = None

    is_authenticated = True
    is_anonymous = False
    is_active = True

    @property
    def pk(self):
        return self.id

    def __str__(self):
        return self.email or self.id


class SupabaseAuthentication(authentication.BaseAuthentication):
    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()

        if not header or header[0].lower() != self.keyword.lower().encode():
            return None

        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid Authorization header.')

        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid token characters.')

        try:
            data = get_user_by_token(access_token=token)
        except InvalidTokenError as e:
            raise exceptions.AuthenticationFailed(str(e))

        return SupabaseUser(**data), token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
