"""
Error taxonomy for the restaurant search pipeline.

Each error knows the HTTP status and client-facing message it maps to, so the
API layer can render any of them without a lookup table.
"""
from typing import Any, Dict, Optional


class RestaurantSearchError(Exception):
    """Base class for failures that end a search request."""
    status_code: int = 500
    message: str = "Failed to fetch restaurants"

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.message)
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class MissingParameter(RestaurantSearchError):
    """Neither a location nor a page token was supplied."""
    status_code = 400
    message = "Location parameter required"


class ConfigurationError(RestaurantSearchError):
    """Provider credentials are not configured."""
    status_code = 500
    message = "API key not configured"


class LocationNotFound(RestaurantSearchError):
    """The geocoder had no candidate for the requested location."""
    status_code = 400
    message = "Could not find that location. Please check the address or zip code."


class ProviderError(RestaurantSearchError):
    """The place search provider answered with a non-success status."""
    status_code = 500
    message = "Google Places API error"

    def __init__(self, status: str):
        super().__init__(status)
        self.status = status


class UnexpectedFailure(RestaurantSearchError):
    """Network, parse or other unanticipated failure anywhere in the pipeline."""
    status_code = 500
    message = "Failed to fetch restaurants"
