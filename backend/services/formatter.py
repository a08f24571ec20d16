"""
Projection of provider records into the client-facing restaurant shape.
"""
from domain.models import UNKNOWN_LOCATION, FormattedRestaurant
from services.places_types import RawPlace


def short_location(place: RawPlace) -> str:
    """Vicinity, else the first segment of the full address, else a placeholder."""
    if place.vicinity and place.vicinity.strip():
        return place.vicinity.strip()
    if place.formatted_address:
        first = place.formatted_address.split(",")[0].strip()
        if first:
            return first
    return UNKNOWN_LOCATION


def format_restaurant(place: RawPlace, cuisine: str) -> FormattedRestaurant:
    return FormattedRestaurant(
        name=place.name or "",
        cuisine=cuisine,
        location=short_location(place),
        rating=place.rating,
        price_level=place.price_level,
        place_id=place.place_id,
    )
