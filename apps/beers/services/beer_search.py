"""Beer reads through the service-scoped client."""

from typing import Optional

from supabase import PostgrestAPIError

from apps.core.backend import get_service_client, upstream_message
from .beer_management import BEERS_TABLE
from .exceptions import BeersServiceError, BeerNotFoundError

BEER_COLUMNS = '*'
BEER_COLUMNS_WITH_REFERENCES = '*, breweries(id, name), styles(id, name)'


def _columns(with_references: bool) -> str:
    return BEER_COLUMNS_WITH_REFERENCES if with_references else BEER_COLUMNS


def get_all_beers(
    *,
    search: Optional[str] = None,
    brewery: Optional[str] = None,
    style: Optional[str] = None,
    min_score: Optional[float] = None,
    with_references: bool = False,
) -> list[dict]:
    """
    List beers, newest first.

    Args:
        search: Case-insensitive substring of the beer name
        brewery: Exact brewery name
        style: Exact style name
        min_score: Minimum score
        with_references: Embed the referenced brewery and style rows

    Returns:
        List of beer rows ordered by ``created_at`` descending
    """
    query = get_service_client().table(BEERS_TABLE).select(_columns(with_references))

    if search:
        query = query.ilike('name', f'%{search}%')

    if brewery:
        query = query.eq('brewery', brewery)

    if style:
        query = query.eq('style', style)

    if min_score is not None:
        query = query.gte('score', min_score)

    try:
        response = query.order('created_at', desc=True).execute()
    except PostgrestAPIError as e:
        raise BeersServiceError(upstream_message(e))

    return response.data


def get_beer_by_id(*, beer_id: str, with_references: bool = False) -> dict:
    """
    Get beer by ID.

    Raises:
        BeerNotFoundError: If beer doesn't exist
        BeersServiceError: If the backend rejects the query
    """
    try:
        response = (
            get_service_client()
            .table(BEERS_TABLE)
            .select(_columns(with_references))
            .eq('id', beer_id)
            .limit(1)
            .execute()
        )
    except PostgrestAPIError as e:
        raise BeersServiceError(upstream_message(e))

    if not response.data:
        raise BeerNotFoundError(f"Beer {beer_id} not found")

    return response.data[0]
