"""Beer write operations, executed with the caller's token."""

import logging
from typing import Any, Dict, Optional

from supabase import PostgrestAPIError

from apps.core.backend import upstream_message, user_client
from .exceptions import BeersServiceError, BeerNotFoundError, InvalidBeerDataError

logger = logging.getLogger(__name__)

BEERS_TABLE = 'beers'

# Columns a client may write; everything else is dropped before the request
BEER_FIELDS = (
    'name',
    'brewery',
    'style',
    'abv',
    'score',
    'color',
    'notes',
    'photo_url',
    'brewery_id',
    'style_id',
)


def filter_beer_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only writable beer columns that are present in ``data``."""
    return {field: data[field] for field in BEER_FIELDS if field in data}


def create_beer(
    *,
    access_token: str,
    name: str,
    brewery: Optional[str] = None,
    style: Optional[str] = None,
    abv: Optional[float] = None,
    score: Optional[float] = None,
    color: Optional[str] = None,
    notes: Optional[str] = None,
    photo_url: Optional[str] = None,
    brewery_id: Optional[int] = None,
    style_id: Optional[int] = None,
) -> dict:
    """
    Insert a beer on behalf of the token's owner.

    Optional fields left as None are not sent, so column defaults apply.

    Args:
        access_token: Caller's bearer token, checked by row-level security
        name: Beer name
        brewery: Brewery name as typed by the user
        style: Style name as typed by the user
        abv: Alcohol by volume, percent
        score: User's score
        color: Colour description
        notes: Tasting notes
        photo_url: Public URL of an uploaded photo
        brewery_id: Reference to the breweries table
        style_id: Reference to the styles table

    Returns:
        The inserted row

    Raises:
        BeersServiceError: If the backend rejects the insert
    """
    values = {
        'name': name,
        'brewery': brewery,
        'style': style,
        'abv': abv,
        'score': score,
        'color': color,
        'notes': notes,
        'photo_url': photo_url,
        'brewery_id': brewery_id,
        'style_id': style_id,
    }
    payload = {field: value for field, value in values.items() if value is not None}

    try:
        with user_client(access_token) as client:
            response = (
                client
                .table(BEERS_TABLE)
                .insert(payload)
                .execute()
            )
    except PostgrestAPIError as e:
        logger.warning("Beer insert failed: %s", upstream_message(e))
        raise BeersServiceError(upstream_message(e))

    if not response.data:
        raise BeersServiceError("Beer insert returned no row")

    beer = response.data[0]
    logger.info("Created beer %s", beer.get('id'))
    return beer


def update_beer(*, access_token: str, beer_id: str, data: Dict[str, Any]) -> dict:
    """
    Update writable fields of a beer.

    Args:
        access_token: Caller's bearer token
        beer_id: Beer primary key
        data: Fields to update; unknown keys are ignored

    Returns:
        Updated row

    Raises:
        InvalidBeerDataError: If ``data`` holds no writable field
        BeerNotFoundError: If no row matched (missing or not owned)
        BeersServiceError: If the backend rejects the update
    """
    payload = filter_beer_fields(data)
    if not payload:
        raise InvalidBeerDataError("No updatable beer fields provided")

    try:
        with user_client(access_token) as client:
            response = (
                client
                .table(BEERS_TABLE)
                .update(payload)
                .eq('id', beer_id)
                .execute()
            )
    except PostgrestAPIError as e:
        logger.warning("Beer %s update failed: %s", beer_id, upstream_message(e))
        raise BeersServiceError(upstream_message(e))

    if not response.data:
        raise BeerNotFoundError(f"Beer {beer_id} not found")

    logger.info("Updated beer %s", beer_id)
    return response.data[0]


def delete_beer(*, access_token: str, beer_id: str) -> None:
    """
    Delete a beer.

    Raises:
        BeerNotFoundError: If no row matched (missing or not owned)
        BeersServiceError: If the backend rejects the delete
    """
    try:
        with user_client(access_token) as client:
            response = (
                client
                .table(BEERS_TABLE)
                .delete()
                .eq('id', beer_id)
                .execute()
            )
    except PostgrestAPIError as e:
        logger.warning("Beer %s delete failed: %s", beer_id, upstream_message(e))
        raise BeersServiceError(upstream_message(e))

    if not response.data:
        raise BeerNotFoundError(f"Beer {beer_id} not found")

    logger.info("Deleted beer %s", beer_id)
