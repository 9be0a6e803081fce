"""Statistics service - aggregates over the full beers table."""

from collections import Counter
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime
from supabase import PostgrestAPIError

from apps.core.backend import get_service_client, upstream_message
from .beer_management import BEERS_TABLE
from .exceptions import BeersServiceError


def _created_at(beer: dict) -> Optional[datetime]:
    value = beer.get('created_at')
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        parsed = parse_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed is not None and timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def calculate_statistics(beers: Iterable[dict], *, now: Optional[datetime] = None) -> dict:
    """
    Compute beer statistics from a list of rows.

    This operation:
    1. Counts all rows
    2. Averages ``score`` with missing scores counted as 0
    3. Counts rows created in the calendar month of ``now`` (UTC)
    4. Picks the most frequent non-empty ``brewery``; on a tie the
       brewery that first appears wins

    Args:
        beers: Beer rows
        now: Reference time, defaults to the current time

    Returns:
        Dictionary with:
        - total_beers: int
        - average_score: float rounded to 2 decimals, 0 without rows
        - this_month_count: int
        - favorite_brewery: str or None

    Example:
        >>> calculate_statistics([{'score': 4, 'brewery': 'Pilsner Urquell'}])['average_score']
        4.0
    """
    beers = list(beers)
    now = now or timezone.now()
    if timezone.is_aware(now):
        now = now.astimezone(dt_timezone.utc)

    total_beers = len(beers)
    average_score = 0
    if total_beers:
        mean = sum(beer.get('score') or 0 for beer in beers) / total_beers
        # half up on the exact binary value of the mean
        average_score = float(Decimal(mean).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))

    this_month_count = 0
    for beer in beers:
        created = _created_at(beer)
        if created is None:
            continue
        if timezone.is_aware(created):
            created = created.astimezone(dt_timezone.utc)
        if (created.year, created.month) == (now.year, now.month):
            this_month_count += 1

    # Counter keeps insertion order, so most_common() breaks ties by first appearance
    brewery_counts = Counter(beer['brewery'] for beer in beers if beer.get('brewery'))
    favorite_brewery = brewery_counts.most_common(1)[0][0] if brewery_counts else None

    return {
        'total_beers': total_beers,
        'average_score': average_score,
        'this_month_count': this_month_count,
        'favorite_brewery': favorite_brewery,
    }


def get_beer_statistics(*, now: Optional[datetime] = None) -> dict:
    """
    Scan every beer and compute the dashboard statistics.

    Raises:
        BeersServiceError: If the backend rejects the query
    """
    try:
        response = get_service_client().table(BEERS_TABLE).select('*').execute()
    except PostgrestAPIError as e:
        raise BeersServiceError(upstream_message(e))

    return calculate_statistics(response.data or [], now=now)
