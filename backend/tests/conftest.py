import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from services.places_types import Coordinates, PlacesPage, RawPlace  # noqa: E402


class FakePlacesClient:
    """Serves a fixed sequence of pages and records every call in `events`."""

    def __init__(self, pages: List[PlacesPage], events: Optional[list] = None):
        self.pages = list(pages)
        self.events = events if events is not None else []
        self.calls: list = []

    def _next(self) -> PlacesPage:
        return self.pages.pop(0)

    def search_nearby(self, lat, lng, radius_m):
        self.calls.append(("search_nearby", lat, lng, radius_m))
        self.events.append("fetch")
        return self._next()

    def fetch_page(self, page_token):
        self.calls.append(("fetch_page", page_token))
        self.events.append("fetch")
        return self._next()


class StubGeocoder:
    def __init__(self, coords: Optional[Coordinates] = None, error: Optional[Exception] = None):
        self.coords = coords or Coordinates(47.6, -122.3)
        self.error = error
        self.calls: List[str] = []

    def geocode(self, address: str) -> Coordinates:
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        return self.coords


def make_places(prefix: str, count: int) -> List[RawPlace]:
    return [RawPlace(name=f"{prefix} {i}", place_id=f"{prefix}-{i}") for i in range(count)]


@pytest.fixture
def fake_client_factory():
    return FakePlacesClient


@pytest.fixture
def stub_geocoder_factory():
    return StubGeocoder


@pytest.fixture
def places_factory():
    return make_places
