"""
Tests for multi-page result collection.
"""
import pytest

from domain.errors import ProviderError
from services.aggregator import PageAggregator
from services.places_types import Coordinates, PlacesPage

SEATTLE = Coordinates(47.6, -122.3)


def _recording_sleep(events):
    delays = []

    def _sleep(seconds):
        delays.append(seconds)
        events.append("sleep")

    return _sleep, delays


def test_follows_tokens_for_three_pages(fake_client_factory, places_factory):
    events = []
    pages = [
        PlacesPage("OK", places_factory("p1", 20), "tok-1"),
        PlacesPage("OK", places_factory("p2", 20), "tok-2"),
        PlacesPage("OK", places_factory("p3", 7), None),
    ]
    client = fake_client_factory(pages, events)
    sleep, delays = _recording_sleep(events)

    places = PageAggregator(client, sleep=sleep).collect(SEATTLE, 8047)

    assert len(client.calls) == 3
    assert client.calls[0] == ("search_nearby", 47.6, -122.3, 8047)
    assert client.calls[1] == ("fetch_page", "tok-1")
    assert client.calls[2] == ("fetch_page", "tok-2")
    assert delays == [2.0, 2.0]
    assert events == ["fetch", "sleep", "fetch", "sleep", "fetch"]
    assert len(places) == 47
    assert [p.place_id for p in places[:1]] == ["p1-0"]


def test_never_fetches_more_than_three_pages(fake_client_factory, places_factory):
    pages = [PlacesPage("OK", places_factory(f"p{i}", 2), f"tok-{i}") for i in range(5)]
    client = fake_client_factory(pages)
    sleep, delays = _recording_sleep([])

    places = PageAggregator(client, max_pages=10, sleep=sleep).collect(SEATTLE, 500)

    assert len(client.calls) == 3
    assert len(delays) == 2
    assert len(places) == 6


def test_single_page_without_token(fake_client_factory, places_factory):
    client = fake_client_factory([PlacesPage("OK", places_factory("p", 3), None)])
    sleep, delays = _recording_sleep([])

    places = PageAggregator(client, sleep=sleep).collect(SEATTLE, 8047)

    assert len(places) == 3
    assert delays == []


def test_zero_results_is_empty_not_error(fake_client_factory):
    client = fake_client_factory([PlacesPage("ZERO_RESULTS", [], None)])
    sleep, delays = _recording_sleep([])

    assert PageAggregator(client, sleep=sleep).collect(SEATTLE, 8047) == []
    assert delays == []


def test_error_status_raises_provider_error(fake_client_factory):
    client = fake_client_factory([PlacesPage("REQUEST_DENIED", [], None, "bad key")])

    with pytest.raises(ProviderError) as excinfo:
        PageAggregator(client, sleep=lambda s: None).collect(SEATTLE, 8047)

    assert excinfo.value.status == "REQUEST_DENIED"
    assert excinfo.value.to_body() == {"error": "Google Places API error", "details": "REQUEST_DENIED"}


def test_failed_follow_up_page_keeps_earlier_results(fake_client_factory, places_factory):
    pages = [
        PlacesPage("OK", places_factory("p1", 20), "tok-1"),
        PlacesPage("INVALID_REQUEST", places_factory("bad", 3), None),
    ]
    client = fake_client_factory(pages)

    places = PageAggregator(client, sleep=lambda s: None).collect(SEATTLE, 8047)

    assert len(places) == 20
    assert not any(p.place_id.startswith("bad") for p in places)
    assert len(client.calls) == 2


def test_duplicates_across_pages_are_kept(fake_client_factory, places_factory):
    dupes = places_factory("same", 2)
    pages = [PlacesPage("OK", dupes, "tok-1"), PlacesPage("OK", dupes, None)]
    client = fake_client_factory(pages)

    places = PageAggregator(client, sleep=lambda s: None).collect(SEATTLE, 8047)

    assert [p.place_id for p in places] == ["same-0", "same-1", "same-0", "same-1"]


def test_max_pages_one_ignores_token(fake_client_factory, places_factory):
    client = fake_client_factory([PlacesPage("OK", places_factory("p", 4), "tok-1")])

    places = PageAggregator(client, max_pages=1, sleep=lambda s: None).collect(SEATTLE, 8047)

    assert len(places) == 4
    assert len(client.calls) == 1


def test_collect_single_fetches_exactly_one_page(fake_client_factory, places_factory):
    client = fake_client_factory([PlacesPage("OK", places_factory("p", 5), "tok-next")])
    sleep, delays = _recording_sleep([])

    page = PageAggregator(client, sleep=sleep).collect_single("tok-given")

    assert client.calls == [("fetch_page", "tok-given")]
    assert delays == []
    assert len(page.results) == 5
    assert page.next_page_token == "tok-next"


def test_collect_single_error_status(fake_client_factory):
    client = fake_client_factory([PlacesPage("INVALID_REQUEST", [], None)])

    with pytest.raises(ProviderError):
        PageAggregator(client, sleep=lambda s: None).collect_single("stale")
