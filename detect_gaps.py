#!/usr/bin/env python3
"""CLI entry point for itinerary gap detection.

Usage:
    python detect_gaps.py path/to/items.json [--trip-id ID] [--format json]

Options:
    ITEMS_JSON             JSON file with a list of items (or {"items": [...]})
    --trip-id ID           Only consider items of this trip
    --threshold-hours H    Minimum idle time reported as a gap (default: 2)
    --format FMT           Output format: timeline, json (default: timeline)
    --quiet                Don't print progress to stderr
"""

import argparse
import json
import sys

from itinerary_gaps.config import GAP_THRESHOLD_HOURS, ITEMS_PATH
from itinerary_gaps.errors import ItineraryError
from itinerary_gaps.pipeline import run_pipeline
from itinerary_gaps.output import format_timeline, view_to_dict


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Sort a trip's itinerary items and report gaps between them.",
    )
    parser.add_argument(
        "items_json",
        nargs="?",
        default=ITEMS_PATH,
        help="Path to the items JSON file",
    )
    parser.add_argument(
        "--trip-id",
        default=None,
        help="Only consider items belonging to this trip",
    )
    parser.add_argument(
        "--threshold-hours",
        type=float,
        default=GAP_THRESHOLD_HOURS,
        help=f"Report idle time longer than this many hours (default: {GAP_THRESHOLD_HOURS:g})",
    )
    parser.add_argument(
        "--format",
        choices=["timeline", "json"],
        default="timeline",
        help="Output format (timeline, json)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print progress to stderr",
    )
    args = parser.parse_args(argv)

    try:
        view, skipped = run_pipeline(
            items_path=args.items_json,
            trip_id=args.trip_id,
            threshold_hours=args.threshold_hours,
            verbose=not args.quiet,
        )
    except ItineraryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(view_to_dict(view), indent=2, ensure_ascii=False))
    else:
        print(format_timeline(view))

    if skipped and not args.quiet:
        print(f"\n{skipped} malformed records skipped.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
