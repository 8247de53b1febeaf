"""Chronological merge of a trip's itinerary items."""

from typing import Iterable, List

from itinerary_gaps.durations import as_comparable
from itinerary_gaps.models import ItineraryItem


def sort_items(items: Iterable[ItineraryItem]) -> List[ItineraryItem]:
    """Return a new list sorted by start time.

    The sort is stable, so items starting at the same instant keep their
    input order. ``order_index`` (manual drag-and-drop position) is ignored.
    Inverted or zero-length ranges are sorted by their start like any other.
    Naive starts are ordered as if they were UTC.
    """
    return sorted(items, key=lambda item: as_comparable(item.start_datetime))
