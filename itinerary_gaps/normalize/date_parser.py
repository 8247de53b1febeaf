"""Timestamp parsing for raw itinerary records."""

from datetime import datetime
from typing import Optional, Union

from dateutil import parser as dateutil_parser


def parse_datetime(raw: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a timestamp, returning a datetime or None.

    Handles:
      - datetime values (returned as-is)
      - ISO 8601 with or without offset (2024-06-01T10:00:00Z, 2024-06-01T10:00)
      - anything else dateutil understands ("1 June 2024 10:00")

    Offsets are kept exactly as given; no timezone conversion is applied.
    """
    if isinstance(raw, datetime):
        return raw
    if not raw or not isinstance(raw, str):
        return None

    raw = raw.strip()
    if raw.lower() in ("null", "none", "unknown", ""):
        return None

    # 1. ISO 8601 (the shape the API emits)
    try:
        return dateutil_parser.isoparse(raw)
    except (ValueError, OverflowError):
        pass

    # 2. dateutil as general fallback
    try:
        return dateutil_parser.parse(raw)
    except (ValueError, OverflowError):
        pass

    return None
