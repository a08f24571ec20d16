"""
Core domain models for the restaurant finder.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NO_RESULTS_MESSAGE = "No restaurants found in this area"
UNKNOWN_LOCATION = "Unknown location"
FALLBACK_CUISINE = "Restaurant"


@dataclass
class FormattedRestaurant:
    """Client-facing restaurant record."""
    name: str
    cuisine: str
    location: str
    rating: Optional[float] = None
    price_level: Optional[int] = None
    place_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cuisine": self.cuisine,
            "location": self.location,
            "rating": self.rating,
            "priceLevel": self.price_level,
            "placeId": self.place_id,
        }


@dataclass
class RestaurantSearchResult:
    """
    Outcome of one search request.

    `next_page_token` is only set when the request was served in
    single-page (continuation token) mode and the provider has more.
    """
    restaurants: List[FormattedRestaurant] = field(default_factory=list)
    next_page_token: Optional[str] = None
    message: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"restaurants": [r.to_dict() for r in self.restaurants]}
        if self.message:
            body["message"] = self.message
        if self.next_page_token:
            body["nextPageToken"] = self.next_page_token
        return body
