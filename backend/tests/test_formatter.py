from services.formatter import format_restaurant, short_location
from services.places_types import RawPlace


def test_vicinity_is_preferred():
    place = RawPlace(name="A", vicinity="500 Main St", formatted_address="1 Other Rd, Town, ST")
    assert short_location(place) == "500 Main St"


def test_first_segment_of_formatted_address():
    place = RawPlace(name="A", formatted_address="1 Other Rd, Town, ST 12345, USA")
    assert short_location(place) == "1 Other Rd"


def test_placeholder_when_no_address():
    assert short_location(RawPlace(name="A")) == "Unknown location"


def test_format_passes_through_rating_and_price():
    place = RawPlace(name="Blue Door", vicinity="Downtown", rating=4.5, price_level=0, place_id="pid")

    out = format_restaurant(place, "Italian").to_dict()

    assert out == {
        "name": "Blue Door",
        "cuisine": "Italian",
        "location": "Downtown",
        "rating": 4.5,
        "priceLevel": 0,
        "placeId": "pid",
    }


def test_missing_rating_and_price_are_none():
    out = format_restaurant(RawPlace(name="X"), "Restaurant").to_dict()
    assert out["rating"] is None
    assert out["priceLevel"] is None
