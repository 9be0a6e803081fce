"""
Supabase client selection.

Two kinds of data-access clients are handed out:

- the service-scoped client, built with the service-role key. It bypasses
  row-level security and is shared by every public read (beer lists,
  statistics, reference data) and by photo storage.
- the user-scoped client, built with the public key and the caller's bearer
  token. PostgREST evaluates row-level security policies against that
  token, so authenticated writes can only touch rows the user owns.

Example:
    Insert a row on behalf of the caller::

        with user_client(request.auth) as client:
            client.table('beers').insert({'name': 'Pils'}).execute()
"""

import logging
from contextlib import contextmanager
from functools import lru_cache

from django.conf import settings
from supabase import Client, ClientOptions, create_client

logger = logging.getLogger(__name__)


class BackendConfigurationError(Exception):
    """Raised when the Supabase URL or keys are not configured."""
    pass


def _require_settings() -> tuple[str, str]:
    url = settings.SUPABASE_URL
    key = settings.SUPABASE_KEY
    if not url or not key:
        raise BackendConfigurationError(
            "Missing required settings SUPABASE_URL or SUPABASE_KEY"
        )
    return url, key


@lru_cache(maxsize=1)
def get_service_client() -> Client:
    """
    Return the shared service-scoped client.

    Falls back to the public key when no service-role key is configured,
    in which case reads are subject to the anonymous RLS policies.
    """
    url, key = _require_settings()
    service_key = settings.SUPABASE_SERVICE_ROLE_KEY or key
    if service_key == key:
        logger.warning("SUPABASE_SERVICE_ROLE_KEY not set, service client uses the public key")
    return create_client(url, service_key)


@lru_cache(maxsize=1)
def get_auth_client() -> Client:
    """Return the client used for identity provider calls."""
    url, key = _require_settings()
    return create_client(url, key)


def get_user_client(access_token: str) -> Client:
    """
    Build a user-scoped client forwarding ``access_token``.

    A new client is created per call; clients hold per-user auth state and
    must not be shared between requests.
    """
    url, key = _require_settings()
    client = create_client(
        url,
        key,
        options=ClientOptions(
            headers={'Authorization': f'Bearer {access_token}'},
            auto_refresh_token=False,
            persist_session=False,
        ),
    )
    client.postgrest.auth(access_token)
    return client


@contextmanager
def user_client(access_token: str):
    """Yield a user-scoped client and close its PostgREST session afterwards."""
    client = get_user_client(access_token)
    try:
        yield client
    finally:
        client.postgrest.session.close()


def reset_clients() -> None:
    """Drop cached clients (used after settings change and in tests)."""
    get_service_client.cache_clear()
    get_auth_client.cache_clear()


def upstream_message(exc: Exception) -> str:
    """Extract the human-readable message from a Supabase client error."""
    message = getattr(exc, 'message', None)
    if message:
        return str(message)
    # storage errors carry the decoded JSON body as their only argument
    if exc.args and isinstance(exc.args[0], dict) and exc.args[0].get('message'):
        return str(exc.args[0]['message'])
    return str(exc) or exc.__class__.__name__
