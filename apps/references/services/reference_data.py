"""Brewery and style reference tables."""

import logging
from typing import Optional

from supabase import PostgrestAPIError

from apps.core.backend import get_service_client, upstream_message, user_client
from .exceptions import ReferencesServiceError, BreweryNotFoundError, StyleNotFoundError

logger = logging.getLogger(__name__)

BREWERIES_TABLE = 'breweries'
STYLES_TABLE = 'styles'


def _list_sorted(table: str) -> list[dict]:
    try:
        response = (
            get_service_client()
            .table(table)
            .select('*')
            .order('name')
            .execute()
        )
    except PostgrestAPIError as e:
        raise ReferencesServiceError(upstream_message(e))
    return response.data


def _get_one(table: str, row_id: str, not_found: type, label: str) -> dict:
    try:
        response = (
            get_service_client()
            .table(table)
            .select('*')
            .eq('id', row_id)
            .limit(1)
            .execute()
        )
    except PostgrestAPIError as e:
        raise ReferencesServiceError(upstream_message(e))

    if not response.data:
        raise not_found(f"{label} {row_id} not found")
    return response.data[0]


def _insert(table: str, access_token: str, values: dict) -> dict:
    payload = {field: value for field, value in values.items() if value is not None}
    try:
        with user_client(access_token) as client:
            response = client.table(table).insert(payload).execute()
    except PostgrestAPIError as e:
        logger.warning("Insert into %s failed: %s", table, upstream_message(e))
        raise ReferencesServiceError(upstream_message(e))

    if not response.data:
        raise ReferencesServiceError(f"Insert into {table} returned no row")

    row = response.data[0]
    logger.info("Created %s row %s", table, row.get('id'))
    return row


def list_breweries() -> list[dict]:
    """Get all breweries sorted by name."""
    return _list_sorted(BREWERIES_TABLE)


def get_brewery_by_id(*, brewery_id: str) -> dict:
    """
    Get brewery by ID.

    Raises:
        BreweryNotFoundError: If brewery doesn't exist
    """
    return _get_one(BREWERIES_TABLE, brewery_id, BreweryNotFoundError, "Brewery")


def create_brewery(
    *,
    access_token: str,
    name: str,
    country: Optional[str] = None,
    city: Optional[str] = None,
) -> dict:
    """Add a brewery on behalf of the token's owner."""
    return _insert(BREWERIES_TABLE, access_token, {
        'name': name,
        'country': country,
        'city': city,
    })


def list_styles() -> list[dict]:
    """Get all beer styles sorted by name."""
    return _list_sorted(STYLES_TABLE)


def get_style_by_id(*, style_id: str) -> dict:
    """
    Get style by ID.

    Raises:
        StyleNotFoundError: If style doesn't exist
    """
    return _get_one(STYLES_TABLE, style_id, StyleNotFoundError, "Style")


def create_style(
    *,
    access_token: str,
    name: str,
    description: Optional[str] = None,
) -> dict:
    """Add a beer style on behalf of the token's owner."""
    return _insert(STYLES_TABLE, access_token, {
        'name': name,
        'description': description,
    })
