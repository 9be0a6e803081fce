"""Domain-specific exceptions for beers services."""


class BeersServiceError(Exception):
    """Base exception for beers services; carries the backend's message."""
    pass


class BeerNotFoundError(BeersServiceError):
    """Raised when beer does not exist or is hidden by row-level security."""
    pass


class InvalidBeerDataError(BeersServiceError):
    """Raised when a write carries no writable field."""
    pass


class InvalidPhotoError(BeersServiceError):
    """Raised when an uploaded file is not an acceptable photo."""
    pass


class PhotoUploadError(BeersServiceError):
    """Raised when object storage rejects an upload."""
    pass
