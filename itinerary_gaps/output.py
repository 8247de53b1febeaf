"""Output formatters: human-readable timeline and plain-dict rendering."""

from datetime import datetime
from typing import List, Optional

from itinerary_gaps.durations import (
    calculate_duration,
    count_nights,
    elapsed_seconds,
    format_duration,
)
from itinerary_gaps.models import (
    GapSuggestion,
    ItemType,
    ItineraryGap,
    ItineraryItem,
    ItineraryView,
    Location,
    arrival_location,
    departure_location,
    item_label,
)


def _dt_str(dt: Optional[datetime]) -> str:
    if dt is None:
        return "?"
    return dt.isoformat()


def _place(loc: Optional[Location]) -> str:
    return loc.label() if loc else "?"


# ---------------------------------------------------------------------------
# Human-readable timeline
# ---------------------------------------------------------------------------

_ICONS = {
    ItemType.FLIGHT: "✈",
    ItemType.TRANSPORT: "🚆",
    ItemType.ACCOMMODATION: "🏨",
}


def _item_lines(item: ItineraryItem) -> List[str]:
    minutes = calculate_duration(item.start_datetime, item.end_datetime)
    lines = [
        f"\n  {item.start_datetime:%Y-%m-%d %H:%M}  →  {item.end_datetime:%Y-%m-%d %H:%M}"
        f"  |  {_ICONS[item.type]} {item_label(item)}  ({format_duration(minutes)})"
    ]
    if item.type == ItemType.ACCOMMODATION:
        nights = count_nights(item.start_datetime, item.end_datetime)
        lines.append(f"    {_place(item.location)}, {nights} night{'s' if nights != 1 else ''}")
    else:
        lines.append(f"    {_place(item.departure_location)}  →  {_place(item.arrival_location)}")
    if elapsed_seconds(item.start_datetime, item.end_datetime) <= 0:
        lines.append("    ⚠ Ends before it starts")
    return lines


def _gap_lines(gap: ItineraryGap) -> List[str]:
    lines = [
        f"\n  ··· GAP: {format_duration(gap.duration_minutes)} "
        f"[{gap.severity.value.upper()}] "
        f"({gap.start_datetime:%Y-%m-%d %H:%M} → {gap.end_datetime:%Y-%m-%d %H:%M})"
    ]
    if gap.message:
        lines.append(f"      {gap.message}")
    if gap.suggestion == GapSuggestion.ACCOMMODATION:
        lines.append("      Suggestion: add accommodation for this overnight period")
    else:
        lines.append("      Suggestion: add transportation between these items")
    if gap.location_mismatch:
        lines.append(
            f"      ⚠ Arrives in {_place(arrival_location(gap.previous_item))} "
            f"but next item departs from {_place(departure_location(gap.next_item))}"
        )
    return lines


def format_timeline(view: ItineraryView) -> str:
    """Produce a line-by-line itinerary with gap cards between items."""
    lines = []
    lines.append("=" * 72)
    lines.append("  TRIP ITINERARY — Chronological Timeline")
    lines.append("=" * 72)

    # Gaps come in the same order as the consecutive pairs they sit between
    pending = list(view.gaps)
    following = view.sorted_items[1:] + [None]
    current_day = None

    for item, nxt in zip(view.sorted_items, following):
        day = item.start_datetime.date()
        if day != current_day:
            current_day = day
            lines.append(f"\n--- {day:%A %d %B %Y} {'─' * 40}")
        lines.extend(_item_lines(item))
        if pending and pending[0].previous_item is item and pending[0].next_item is nxt:
            lines.extend(_gap_lines(pending.pop(0)))

    lines.append(f"\n{'=' * 72}")
    lines.append(f"  Total: {len(view.sorted_items)} items, {len(view.gaps)} gaps")
    lines.append("=" * 72)

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Dict rendering (API shape, camelCase)
# ---------------------------------------------------------------------------

def _location_to_dict(loc: Optional[Location]) -> Optional[dict]:
    if loc is None:
        return None
    return {
        "address": loc.address,
        "formattedAddress": loc.formatted_address or None,
        "city": loc.city or None,
        "country": loc.country or None,
        "latitude": loc.latitude,
        "longitude": loc.longitude,
        "placeId": loc.place_id or None,
    }


def _item_to_dict(item: ItineraryItem) -> dict:
    data = {
        "id": item.id,
        "tripId": item.trip_id,
        "type": item.type.value,
        "title": item_label(item),
        "startDateTime": _dt_str(item.start_datetime),
        "endDateTime": _dt_str(item.end_datetime),
        "durationMinutes": calculate_duration(item.start_datetime, item.end_datetime),
        "notes": item.notes,
        "orderIndex": item.order_index,
    }
    if item.type == ItemType.ACCOMMODATION:
        data["location"] = _location_to_dict(item.location)
        data["nights"] = count_nights(item.start_datetime, item.end_datetime)
    else:
        data["departureLocation"] = _location_to_dict(item.departure_location)
        data["arrivalLocation"] = _location_to_dict(item.arrival_location)
    return data


def _gap_to_dict(g: ItineraryGap) -> dict:
    return {
        "startDateTime": _dt_str(g.start_datetime),
        "endDateTime": _dt_str(g.end_datetime),
        "durationHours": g.duration_hours,
        "previousItemId": g.previous_item.id if g.previous_item else None,
        "nextItemId": g.next_item.id if g.next_item else None,
        "suggestion": g.suggestion.value if g.suggestion else None,
        "locationMismatch": g.location_mismatch,
        "severity": g.severity.value,
        "message": g.message,
    }


def view_to_dict(view: ItineraryView) -> dict:
    """Plain-dict form of a detection result, ready for json.dumps."""
    return {
        "sortedItems": [_item_to_dict(i) for i in view.sorted_items],
        "gaps": [_gap_to_dict(g) for g in view.gaps],
        "summary": {
            "totalItems": len(view.sorted_items),
            "totalGaps": len(view.gaps),
            "totalGapHours": round(sum(g.duration_hours for g in view.gaps), 2),
        },
    }
