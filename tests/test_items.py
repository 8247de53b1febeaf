from datetime import datetime, timedelta, timezone

import pytest

from itinerary_gaps.errors import ItemFormatError
from itinerary_gaps.models import (
    Accommodation,
    Flight,
    ItemType,
    Location,
    Transport,
    TransportType,
    arrival_location,
    departure_location,
    item_label,
)
from itinerary_gaps.normalize.date_parser import parse_datetime
from itinerary_gaps.normalize.items import item_from_dict


def test_parse_datetime_iso_with_offset():
    assert parse_datetime("2024-06-01T10:00:00Z") == datetime(2024, 6, 1, 10, tzinfo=timezone.utc)
    assert parse_datetime("2024-06-01T10:00:00+02:00").utcoffset() == timedelta(hours=2)


def test_parse_datetime_naive_and_fallback():
    assert parse_datetime("2024-06-01T10:30") == datetime(2024, 6, 1, 10, 30)
    assert parse_datetime("1 June 2024 10:30") == datetime(2024, 6, 1, 10, 30)


def test_parse_datetime_passthrough_and_empty():
    dt = datetime(2024, 6, 1)
    assert parse_datetime(dt) is dt
    assert parse_datetime("") is None
    assert parse_datetime(None) is None
    assert parse_datetime("null") is None
    assert parse_datetime("not a date at all") is None


def test_flight_from_api_record():
    item = item_from_dict({
        "id": "f1",
        "tripId": "trip-1",
        "type": "flight",
        "startDateTime": "2024-06-01T08:00:00Z",
        "endDateTime": "2024-06-01T10:15:00Z",
        "flightNumber": "AF1234",
        "airline": "Air France",
        "departureLocation": {"address": "Rome FCO", "city": "Rome", "country": "Italy"},
        "arrivalLocation": {"address": "Paris CDG", "city": "Paris", "country": "France"},
        "orderIndex": 2,
        "notes": "window seat",
    })

    assert isinstance(item, Flight)
    assert item.type == ItemType.FLIGHT
    assert item.trip_id == "trip-1"
    assert item.flight_number == "AF1234"
    assert item.order_index == 2
    assert item.notes == "window seat"
    assert departure_location(item).city == "Rome"
    assert arrival_location(item).city == "Paris"
    assert item_label(item) == "Air France AF1234"


def test_transport_snake_case_record():
    item = item_from_dict({
        "id": "t1",
        "trip_id": "trip-1",
        "type": "TRANSPORT",
        "start_datetime": "2024-06-02T09:00",
        "end_datetime": "2024-06-02T11:00",
        "transport_type": "train",
        "departure_location": "Paris Gare de Lyon",
        "arrival_location": "Lyon Part-Dieu",
    })

    assert isinstance(item, Transport)
    assert item.transport_type == TransportType.TRAIN
    assert item.departure_location == Location(address="Paris Gare de Lyon")
    assert item_label(item) == "Train"


def test_unknown_transport_type_becomes_other():
    item = item_from_dict({
        "id": "t2", "type": "transport", "transportType": "rickshaw",
        "startDateTime": "2024-06-02T09:00", "endDateTime": "2024-06-02T10:00",
    })
    assert item.transport_type == TransportType.OTHER


def test_accommodation_uses_check_in_out_when_needed():
    item = item_from_dict({
        "id": "h1",
        "tripId": "trip-1",
        "type": "accommodation",
        "name": "Hotel Lutetia",
        "checkInDateTime": "2024-06-01T15:00",
        "checkOutDateTime": "2024-06-03T11:00",
        "location": {"address": "45 Bd Raspail", "city": "Paris", "country": "France"},
    })

    assert isinstance(item, Accommodation)
    assert item.start_datetime == datetime(2024, 6, 1, 15)
    assert item.end_datetime == datetime(2024, 6, 3, 11)
    assert departure_location(item) is arrival_location(item)
    assert item_label(item) == "Hotel Lutetia"


def test_inverted_range_is_accepted():
    item = item_from_dict({
        "id": "x", "type": "flight",
        "startDateTime": "2024-06-02T09:00", "endDateTime": "2024-06-01T09:00",
    })
    assert item.end_datetime < item.start_datetime


def test_unknown_type_raises():
    with pytest.raises(ItemFormatError) as exc_info:
        item_from_dict({"id": "c1", "type": "cruise",
                        "startDateTime": "2024-06-01T10:00", "endDateTime": "2024-06-01T12:00"})
    assert exc_info.value.item_id == "c1"
    assert "cruise" in str(exc_info.value)


def test_missing_timestamps_raise():
    with pytest.raises(ItemFormatError):
        item_from_dict({"id": "f2", "type": "flight", "startDateTime": "2024-06-01T10:00"})


def test_non_dict_record_raises():
    with pytest.raises(ItemFormatError):
        item_from_dict(["flight"])


def test_record_mixing_offset_and_naive_raises():
    with pytest.raises(ItemFormatError) as exc_info:
        item_from_dict({"id": "f3", "type": "flight",
                        "startDateTime": "2024-06-01T08:00:00Z", "endDateTime": "2024-06-01T10:00:00"})
    assert exc_info.value.item_id == "f3"
