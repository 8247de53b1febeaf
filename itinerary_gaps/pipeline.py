"""Orchestrates a file-based run: load → normalize → sort → detect gaps."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from itinerary_gaps.assemble.gap_detector import detect_gaps
from itinerary_gaps.config import GAP_THRESHOLD_HOURS, ITEMS_PATH
from itinerary_gaps.errors import ItemFormatError, ItineraryInputError
from itinerary_gaps.models import ItineraryItem, ItineraryView
from itinerary_gaps.normalize.items import item_from_dict


def _load_records(path: Path) -> List[Dict[str, Any]]:
    """Read raw item records: either a bare list or {"items": [...]}."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        raise ItineraryInputError(f"Cannot read items from {path}", cause=e) from e

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ItineraryInputError(f"{path} does not hold a list of items")
    return data


def run_pipeline(
    items_path: Optional[str] = None,
    trip_id: Optional[str] = None,
    threshold_hours: Optional[float] = None,
    verbose: bool = True,
) -> Tuple[ItineraryView, int]:
    """Load a trip's items from JSON and detect gaps.

    Args:
        items_path: Path to the JSON file. Defaults to config.
        trip_id: Keep only items belonging to this trip.
        threshold_hours: Minimum idle time reported as a gap. Defaults to config.
        verbose: Print progress to stderr.

    Returns:
        (view, skipped_count) where skipped_count is the number of malformed records
    """
    path = Path(items_path or ITEMS_PATH)
    threshold_hours = GAP_THRESHOLD_HOURS if threshold_hours is None else threshold_hours

    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)

    # Step 1: Load
    log(f"Loading items: {path}")
    records = _load_records(path)
    log(f"  Total records: {len(records)}")

    # Step 2: Normalize
    items: List[ItineraryItem] = []
    skipped = 0
    for raw in records:
        try:
            item = item_from_dict(raw)
        except ItemFormatError as e:
            log(f"  SKIPPED: {e}")
            skipped += 1
            continue
        items.append(item)

    # Step 3: Filter by trip
    if trip_id is not None:
        before_filter = len(items)
        items = [i for i in items if i.trip_id == trip_id]
        filtered_count = before_filter - len(items)
        if filtered_count:
            log(f"  Filtered out {filtered_count} items from other trips (keeping: {trip_id})")

    # Step 4: Sort and detect gaps
    view = detect_gaps(items, threshold_hours=threshold_hours)
    log(f"  Sorted {len(view.sorted_items)} items")
    log(f"  Detected {len(view.gaps)} gaps (>{threshold_hours:g} hours)")

    return view, skipped
