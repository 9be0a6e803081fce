"""Services for brewery and style reference data."""

from .exceptions import (
    ReferencesServiceError,
    BreweryNotFoundError,
    StyleNotFoundError,
)
from .reference_data import (
    list_breweries,
    get_brewery_by_id,
    create_brewery,
    list_styles,
    get_style_by_id,
    create_style,
)

__all__ = [
    # Exceptions
    'ReferencesServiceError',
    'BreweryNotFoundError',
    'StyleNotFoundError',
    # Breweries
    'list_breweries',
    'get_brewery_by_id',
    'create_brewery',
    # Styles
    'list_styles',
    'get_style_by_id',
    'create_style',
]
