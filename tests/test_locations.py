from itinerary_gaps.models import Location
from itinerary_gaps.normalize.locations import (
    is_location_mismatch,
    locations_match,
    parse_location,
)


def test_same_city_and_country_match():
    a = Location(address="CDG Terminal 2", city="Paris", country="France")
    b = Location(address="12 Rue de Rivoli", city="paris ", country="FRANCE")
    assert locations_match(a, b)


def test_same_city_different_country_does_not_match():
    a = Location(address="Paris, TX", city="Paris", country="United States")
    b = Location(address="Paris, France", city="Paris", country="France")
    assert not locations_match(a, b)


def test_city_without_country_falls_back_to_address():
    a = Location(address="Gare de Lyon", city="Paris")
    b = Location(address="Gare du Nord", city="Paris")
    assert not locations_match(a, b)
    assert locations_match(a, Location(address="Gare de Lyon"))


def test_coordinates_are_ignored():
    a = Location(address="A", latitude=48.8566, longitude=2.3522)
    b = Location(address="B", latitude=48.8566, longitude=2.3522)
    assert not locations_match(a, b)


def test_unknown_location_is_not_a_mismatch():
    paris = Location(address="Paris", city="Paris", country="France")
    assert not is_location_mismatch(None, paris)
    assert not is_location_mismatch(paris, None)
    assert is_location_mismatch(paris, Location(address="Lyon", city="Lyon", country="France"))


def test_parse_location_from_api_dict():
    loc = parse_location({
        "address": "Heathrow Airport",
        "city": "London",
        "country": "United Kingdom",
        "latitude": "51.47",
        "longitude": -0.4543,
        "placeId": "abc123",
    })
    assert loc == Location(
        address="Heathrow Airport",
        city="London",
        country="United Kingdom",
        latitude=51.47,
        longitude=-0.4543,
        place_id="abc123",
    )


def test_parse_location_from_string_and_empty():
    assert parse_location("Rome Termini") == Location(address="Rome Termini")
    assert parse_location("  ") is None
    assert parse_location({}) is None
    assert parse_location(None) is None
