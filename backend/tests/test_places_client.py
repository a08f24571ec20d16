from unittest.mock import MagicMock, patch

from services.places_client import NEARBY_SEARCH_URL, PlacesClient, parse_places_page
from services.places_types import RawPlace


def _response(payload):
    mock_resp = MagicMock()
    mock_resp.json.return_value = payload
    mock_resp.raise_for_status.return_value = None
    return mock_resp


SAMPLE_PAGE = {
    "status": "OK",
    "next_page_token": "tok-2",
    "results": [
        {
            "name": "Kyoto Ramen House",
            "types": ["japanese_restaurant", "restaurant", "food"],
            "vicinity": "123 Pine St, Seattle",
            "rating": 4.4,
            "price_level": 2,
            "place_id": "abc123",
        },
        {"name": "Mystery Spot"},
    ],
}


@patch("services.geocoding._session.get")
def test_search_nearby_sends_location_radius_and_type(mock_get):
    mock_get.return_value = _response(SAMPLE_PAGE)

    page = PlacesClient("test-key", timeout=5.0).search_nearby(47.6, -122.3, 8047)

    args, kwargs = mock_get.call_args
    assert args[0] == NEARBY_SEARCH_URL
    assert kwargs["params"] == {
        "location": "47.6,-122.3",
        "radius": "8047",
        "type": "restaurant",
        "key": "test-key",
    }
    assert kwargs["timeout"] == 5.0
    assert page.is_ok
    assert page.next_page_token == "tok-2"
    assert [p.name for p in page.results] == ["Kyoto Ramen House", "Mystery Spot"]


@patch("services.geocoding._session.get")
def test_fetch_page_uses_only_the_token(mock_get):
    mock_get.return_value = _response({"status": "OK", "results": []})

    page = PlacesClient("test-key").fetch_page("tok-2")

    _, kwargs = mock_get.call_args
    assert kwargs["params"] == {"pagetoken": "tok-2", "key": "test-key"}
    assert page.results == []
    assert page.next_page_token is None


@patch("services.geocoding._session.get")
def test_error_status_is_returned_not_raised(mock_get):
    mock_get.return_value = _response({"status": "OVER_QUERY_LIMIT", "error_message": "slow down"})

    page = PlacesClient("test-key").search_nearby(0.0, 0.0, 100)

    assert not page.is_ok
    assert not page.is_zero_results
    assert page.error_message == "slow down"


def test_parse_places_page_maps_provider_fields():
    page = parse_places_page(SAMPLE_PAGE)
    place = page.results[0]

    assert place.category_tags == frozenset({"japanese_restaurant", "restaurant", "food"})
    assert place.tags_in_order() == ("japanese_restaurant", "restaurant", "food")
    assert place.vicinity == "123 Pine St, Seattle"
    assert place.rating == 4.4
    assert place.price_level == 2
    assert place.place_id == "abc123"


def test_raw_place_tolerates_missing_and_odd_fields():
    place = RawPlace.from_provider({"types": "restaurant", "rating": "n/a", "price_level": None})

    assert place.name == ""
    assert place.category_tags == frozenset()
    assert place.rating is None
    assert place.price_level is None
    assert place.vicinity is None

    assert RawPlace.from_provider(None).name == ""
