"""Convert raw item records (API JSON shape) into typed itinerary items."""

from typing import Any, Dict, Optional

from itinerary_gaps.errors import ItemFormatError
from itinerary_gaps.models import (
    Accommodation,
    Flight,
    ItemType,
    ItineraryItem,
    Transport,
    TransportType,
)
from itinerary_gaps.normalize.date_parser import parse_datetime
from itinerary_gaps.normalize.locations import parse_location


def _get(raw: Dict[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    """Read a key in either camelCase (API) or snake_case form."""
    if raw.get(camel) is not None:
        return raw[camel]
    if raw.get(snake) is not None:
        return raw[snake]
    return default


def _str(raw: Dict[str, Any], camel: str, snake: Optional[str] = None) -> str:
    value = _get(raw, camel, snake or camel, "")
    return str(value) if value is not None else ""


def _order_index(raw: Dict[str, Any]) -> Optional[int]:
    value = _get(raw, "orderIndex", "order_index")
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _transport_type(raw: Dict[str, Any]) -> TransportType:
    value = _str(raw, "transportType", "transport_type").lower()
    try:
        return TransportType(value)
    except ValueError:
        return TransportType.OTHER


def item_from_dict(raw: Dict[str, Any]) -> ItineraryItem:
    """Build a Flight, Transport or Accommodation from a raw record.

    Raises ItemFormatError when the record has no usable type, its
    start/end timestamps cannot be parsed, or only one of them carries a
    UTC offset. Inverted ranges are accepted.
    """
    if not isinstance(raw, dict):
        raise ItemFormatError(f"Expected an item object, got {type(raw).__name__}")

    item_id = _str(raw, "id")
    type_str = _str(raw, "type").lower()
    try:
        item_type = ItemType(type_str)
    except ValueError as e:
        raise ItemFormatError(f"Unknown item type {type_str!r}", cause=e, item_id=item_id) from e

    start = _get(raw, "startDateTime", "start_datetime")
    end = _get(raw, "endDateTime", "end_datetime")
    # Accommodations from the API also carry explicit check-in/out times
    if item_type == ItemType.ACCOMMODATION:
        start = start or _get(raw, "checkInDateTime", "check_in_datetime")
        end = end or _get(raw, "checkOutDateTime", "check_out_datetime")

    start_dt = parse_datetime(start)
    end_dt = parse_datetime(end)
    if start_dt is None or end_dt is None:
        raise ItemFormatError(
            f"Item {item_id or '?'} has unparseable start/end ({start!r}, {end!r})",
            item_id=item_id,
        )
    if (start_dt.utcoffset() is None) != (end_dt.utcoffset() is None):
        raise ItemFormatError(
            f"Item {item_id or '?'} mixes timestamps with and without an offset ({start!r}, {end!r})",
            item_id=item_id,
        )

    common = dict(
        id=item_id,
        trip_id=_str(raw, "tripId", "trip_id"),
        start_datetime=start_dt,
        end_datetime=end_dt,
        confirmation_number=_str(raw, "confirmationNumber", "confirmation_number"),
        title=_str(raw, "title"),
        notes=_str(raw, "notes"),
        order_index=_order_index(raw),
    )

    if item_type == ItemType.FLIGHT:
        return Flight(
            departure_location=parse_location(_get(raw, "departureLocation", "departure_location")),
            arrival_location=parse_location(_get(raw, "arrivalLocation", "arrival_location")),
            flight_number=_str(raw, "flightNumber", "flight_number"),
            airline=_str(raw, "airline"),
            **common,
        )
    if item_type == ItemType.TRANSPORT:
        return Transport(
            departure_location=parse_location(_get(raw, "departureLocation", "departure_location")),
            arrival_location=parse_location(_get(raw, "arrivalLocation", "arrival_location")),
            transport_type=_transport_type(raw),
            provider=_str(raw, "provider"),
            **common,
        )
    return Accommodation(
        location=parse_location(raw.get("location")),
        name=_str(raw, "name"),
        **common,
    )
