"""Domain-specific exceptions for reference data services."""


class ReferencesServiceError(Exception):
    """Base exception for reference data services."""
    pass


class BreweryNotFoundError(ReferencesServiceError):
    """Raised when brewery does not exist."""
    pass


class StyleNotFoundError(ReferencesServiceError):
    """Raised when style does not exist."""
    pass
