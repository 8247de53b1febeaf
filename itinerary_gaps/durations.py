"""Duration helpers shared by gap detection and timeline rendering."""

from datetime import datetime, timezone
from typing import Optional

from itinerary_gaps.config import MINUTES_PER_NIGHT


def as_comparable(dt: datetime) -> datetime:
    """Key for ordering and subtracting timestamps.

    Naive values are read as UTC so they compare with offset-aware ones.
    Aware values are left alone; they already compare by instant.
    """
    if dt.utcoffset() is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def elapsed_seconds(start: datetime, end: datetime) -> float:
    """Signed seconds from start to end, tolerating mixed naive/aware values."""
    return (as_comparable(end) - as_comparable(start)).total_seconds()


def calculate_duration(start: Optional[datetime], end: Optional[datetime]) -> int:
    """Whole minutes from start to end, floored. 0 when end <= start."""
    if start is None or end is None:
        return 0
    seconds = elapsed_seconds(start, end)
    if seconds <= 0:
        return 0
    return int(seconds // 60)


def format_duration(minutes: Optional[int]) -> str:
    """Render minutes as "1h 30m", or "45m" below an hour.

    Examples:
      - 0   -> "0m"
      - 45  -> "45m"
      - 60  -> "1h 0m"
      - 150 -> "2h 30m"
    """
    if not minutes or minutes < 0:
        return "0m"
    minutes = int(minutes)
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60}m"
    return f"{minutes}m"


def count_nights(start: Optional[datetime], end: Optional[datetime]) -> int:
    """Number of full 24-hour blocks in a stay.

    Check-in 15:00 on day 1 and check-out 11:00 on day 3 is 44 hours,
    which counts as 1 night.
    """
    return calculate_duration(start, end) // MINUTES_PER_NIGHT


def crosses_midnight(start: datetime, end: datetime) -> bool:
    """True when start and end fall on different calendar dates."""
    return start.date() != end.date()
