"""Configuration: .env loading, paths, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of itinerary_gaps/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Paths ---
ITEMS_PATH = os.getenv("ITEMS_PATH", str(PROJECT_ROOT / "itinerary_items.json"))

# --- Gap detection ---
GAP_THRESHOLD_HOURS = float(os.getenv("GAP_THRESHOLD_HOURS", "2"))  # flag idle time longer than this
OVERNIGHT_MIN_HOURS = float(os.getenv("OVERNIGHT_MIN_HOURS", "6"))  # overnight gaps at least this long suggest a stay

# --- Durations ---
MINUTES_PER_NIGHT = 60 * 24

# --- Gap severity ---
WARNING_GAP_HOURS = 8  # transport gaps longer than this are warnings
OVERNIGHT_WARNING_HOURS = 12  # overnight gaps without a stay longer than this are warnings
ERROR_GAP_HOURS = 24  # any gap longer than this is an error
