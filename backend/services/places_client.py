"""
Google Places nearby-search client sharing the geocoder's HTTP session.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from services.geocoding import DEFAULT_TIMEOUT_SEC, _get_json
from services.places_types import PlacesPage, RawPlace

NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
PLACE_TYPE = "restaurant"


def parse_places_page(data: dict) -> PlacesPage:
    """Turn a nearby-search JSON body into a PlacesPage."""
    items = data.get("results")
    if not isinstance(items, list):
        items = []
    results: List[RawPlace] = [RawPlace.from_provider(item) for item in items]
    token = data.get("next_page_token")
    return PlacesPage(
        status=str(data.get("status") or ""),
        results=results,
        next_page_token=token if isinstance(token, str) and token else None,
        error_message=data.get("error_message"),
    )


class PlacesClient:
    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        place_type: str = PLACE_TYPE,
    ):
        self.api_key = api_key
        self.base_url = (base_url or NEARBY_SEARCH_URL).rstrip("/")
        self.timeout = timeout
        self.place_type = place_type
        self.logger = logging.getLogger(__name__)

    def _fetch(self, params: dict) -> PlacesPage:
        page = parse_places_page(
            _get_json(self.base_url, params={**params, "key": self.api_key}, timeout=self.timeout)
        )
        self.logger.debug(
            "PlacesClient: status=%s got %d results, next_page_token=%s",
            page.status,
            len(page.results),
            "yes" if page.next_page_token else "no",
        )
        return page

    def search_nearby(self, lat: float, lng: float, radius_m: float) -> PlacesPage:
        """First page of restaurants around a coordinate."""
        return self._fetch(
            {
                "location": f"{lat},{lng}",
                "radius": str(int(radius_m)),
                "type": self.place_type,
            }
        )

    def fetch_page(self, page_token: str) -> PlacesPage:
        """Follow-up page addressed only by its continuation token."""
        return self._fetch({"pagetoken": page_token})
