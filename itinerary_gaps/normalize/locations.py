"""Location parsing and the "same place" comparison used for mismatch flags."""

from typing import Any, Dict, Optional, Union

from itinerary_gaps.models import Location


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def locations_match(a: Optional[Location], b: Optional[Location]) -> bool:
    """Decide whether two locations name the same place.

    Same place when city and country are present on both sides and equal
    (trimmed, case-insensitive), or when the address strings are identical.
    Coordinates are never compared.
    """
    if a is None or b is None:
        return False

    if a.city and a.country and b.city and b.country:
        if _norm(a.city) == _norm(b.city) and _norm(a.country) == _norm(b.country):
            return True

    return bool(a.address) and a.address == b.address


def is_location_mismatch(arrival: Optional[Location], departure: Optional[Location]) -> bool:
    """True only when both locations are known and they differ."""
    if arrival is None or departure is None:
        return False
    return not locations_match(arrival, departure)


def _float_or_none(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_location(raw: Union[Dict[str, Any], str, Location, None]) -> Optional[Location]:
    """Build a Location from an API dict, a bare address string, or None."""
    if raw is None or isinstance(raw, Location):
        return raw
    if isinstance(raw, str):
        return Location(address=raw.strip()) if raw.strip() else None
    if not isinstance(raw, dict):
        return None

    address = raw.get("address") or raw.get("formattedAddress") or raw.get("formatted_address") or ""
    city = raw.get("city") or ""
    if not address and not city:
        return None

    return Location(
        address=address,
        formatted_address=raw.get("formattedAddress") or raw.get("formatted_address") or "",
        city=city,
        country=raw.get("country") or "",
        latitude=_float_or_none(raw.get("latitude", raw.get("lat"))),
        longitude=_float_or_none(raw.get("longitude", raw.get("lng"))),
        place_id=raw.get("placeId") or raw.get("place_id") or "",
    )
