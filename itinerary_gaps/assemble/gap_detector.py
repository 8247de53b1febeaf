"""Detect idle time between consecutive itinerary items."""

from collections.abc import Iterable
from typing import List, Optional

from itinerary_gaps.assemble.timeline import sort_items
from itinerary_gaps.config import (
    ERROR_GAP_HOURS,
    GAP_THRESHOLD_HOURS,
    OVERNIGHT_MIN_HOURS,
    OVERNIGHT_WARNING_HOURS,
    WARNING_GAP_HOURS,
)
from itinerary_gaps.durations import (
    calculate_duration,
    crosses_midnight,
    elapsed_seconds,
    format_duration,
)
from itinerary_gaps.errors import ItineraryInputError
from itinerary_gaps.models import (
    ITEM_CLASSES,
    GapSeverity,
    GapSuggestion,
    ItineraryGap,
    ItineraryItem,
    ItineraryView,
    arrival_location,
    departure_location,
    item_label,
)
from itinerary_gaps.normalize.locations import is_location_mismatch

_ITEM_TYPES = tuple(ITEM_CLASSES.values())


def _check_items(items) -> List[ItineraryItem]:
    if items is None:
        raise ItineraryInputError("items is required (got None)")
    if isinstance(items, (str, bytes, dict)) or not isinstance(items, Iterable):
        raise ItineraryInputError(f"items must be a list of itinerary items, got {type(items).__name__}")

    items = list(items)
    for i, item in enumerate(items):
        if not isinstance(item, _ITEM_TYPES):
            raise ItineraryInputError(f"items[{i}] is not an itinerary item: {type(item).__name__}")
    return items


def suggest_fill(gap_start, gap_end, duration_hours: float,
                 overnight_min_hours: float = OVERNIGHT_MIN_HOURS) -> GapSuggestion:
    """Guess what kind of item would fill a gap.

    Transport by default; accommodation when the gap is long and crosses
    midnight, i.e. it probably includes a night's sleep.
    """
    if duration_hours >= overnight_min_hours and crosses_midnight(gap_start, gap_end):
        return GapSuggestion.ACCOMMODATION
    return GapSuggestion.TRANSPORT


def gap_severity(duration_hours: float, suggestion: GapSuggestion) -> GapSeverity:
    """Grade a gap: errors past a day, warnings past 8h (12h when overnight)."""
    if duration_hours > ERROR_GAP_HOURS:
        return GapSeverity.ERROR
    warning_hours = (
        OVERNIGHT_WARNING_HOURS if suggestion == GapSuggestion.ACCOMMODATION else WARNING_GAP_HOURS
    )
    if duration_hours > warning_hours:
        return GapSeverity.WARNING
    return GapSeverity.INFO


def _gap_message(prev: ItineraryItem, nxt: ItineraryItem, suggestion: GapSuggestion) -> str:
    duration = format_duration(calculate_duration(prev.end_datetime, nxt.start_datetime))
    if suggestion == GapSuggestion.ACCOMMODATION:
        return f'No accommodation for {duration} overnight between "{item_label(prev)}" and "{item_label(nxt)}"'
    return f'{duration} gap between "{item_label(prev)}" and "{item_label(nxt)}"'


def detect_gaps(
    items,
    threshold_hours: Optional[float] = None,
    overnight_min_hours: Optional[float] = None,
) -> ItineraryView:
    """Sort a trip's items and find the gaps between consecutive ones.

    A gap is reported when the idle time between one item's end and the
    next item's start is strictly greater than ``threshold_hours``.
    Overlapping or touching items never produce a gap. Nothing is reported
    before the first item or after the last. Naive timestamps are measured
    as UTC against offset-aware ones.

    Returns:
        ItineraryView(sorted_items, gaps)

    Raises:
        ItineraryInputError: items is None or holds something other than items.
    """
    items = _check_items(items)
    threshold_hours = GAP_THRESHOLD_HOURS if threshold_hours is None else threshold_hours
    overnight_min_hours = OVERNIGHT_MIN_HOURS if overnight_min_hours is None else overnight_min_hours
    threshold_seconds = threshold_hours * 3600

    sorted_items = sort_items(items)
    gaps: List[ItineraryGap] = []

    for prev, nxt in zip(sorted_items, sorted_items[1:]):
        idle_seconds = elapsed_seconds(prev.end_datetime, nxt.start_datetime)

        # Overlap is a data-quality problem, not a gap
        if idle_seconds <= 0 or idle_seconds <= threshold_seconds:
            continue

        duration_hours = idle_seconds / 3600
        suggestion = suggest_fill(
            prev.end_datetime, nxt.start_datetime, duration_hours, overnight_min_hours,
        )
        gaps.append(ItineraryGap(
            start_datetime=prev.end_datetime,
            end_datetime=nxt.start_datetime,
            duration_hours=duration_hours,
            previous_item=prev,
            next_item=nxt,
            suggestion=suggestion,
            location_mismatch=is_location_mismatch(
                arrival_location(prev), departure_location(nxt),
            ),
            severity=gap_severity(duration_hours, suggestion),
            message=_gap_message(prev, nxt, suggestion),
        ))

    return ItineraryView(sorted_items=sorted_items, gaps=gaps)
