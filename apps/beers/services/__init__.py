"""Services for beers business logic."""

from .exceptions import (
    BeersServiceError,
    BeerNotFoundError,
    InvalidBeerDataError,
    InvalidPhotoError,
    PhotoUploadError,
)
from .beer_management import (
    BEER_FIELDS,
    filter_beer_fields,
    create_beer,
    update_beer,
    delete_beer,
)
from .beer_search import (
    get_all_beers,
    get_beer_by_id,
)
from .photo_upload import (
    generate_photo_filename,
    upload_photo,
)
from .statistics import (
    calculate_statistics,
    get_beer_statistics,
)

__all__ = [
    # Exceptions
    'BeersServiceError',
    'BeerNotFoundError',
    'InvalidBeerDataError',
    'InvalidPhotoError',
    'PhotoUploadError',
    # Beer Management
    'BEER_FIELDS',
    'filter_beer_fields',
    'create_beer',
    'update_beer',
    'delete_beer',
    # Beer Search
    'get_all_beers',
    'get_beer_by_id',
    # Photo Upload
    'generate_photo_filename',
    'upload_photo',
    # Statistics
    'calculate_statistics',
    'get_beer_statistics',
]
