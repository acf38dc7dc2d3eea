"""Project configuration.

Keeps the upstream request shapes, result caps and HTTP settings in one place.
Values can be overridden from search_config.json when it exists; otherwise the
defaults below apply.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

_REPO_ROOT = Path(__file__).resolve().parent.parent

# --- API endpoints ---

PLACES_TEXT_SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
PLACES_NEARBY_SEARCH_URL = "https://places.googleapis.com/v1/places:searchNearby"

# --- Field masks ---

PLACES_FIELD_MASK = (
    "places.id,places.displayName,places.formattedAddress,places.location,"
    "places.primaryType,places.types,places.googleMapsUri,places.websiteUri,"
    "places.rating,places.userRatingCount,places.businessStatus,"
    "places.currentOpeningHours"
)

# --- Credentials ---

API_KEY_ENV_VARS = ("GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_API_KEY_SERVER")

# --- Result caps ---

MAX_RESULTS = 20
NEARBY_MAX_RESULT_COUNT = 20
TEXT_MAX_RESULT_COUNT = 10
BAR_TEXT_MAX_RESULT_COUNT = 20

# --- Search defaults ---

# One mile.
DEFAULT_RADIUS_M = 1609.344

# --- Fan-out ---

FANOUT_MAX_WORKERS = 8

# --- Brand overrides (category key -> brand list), populated from search_config.json ---

BRAND_OVERRIDES: Dict[str, List[str]] = {}

# --- HTTP ---

HTTP_TIMEOUT_SECONDS = 20

# --- Server ---

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8000
PLACES_ENDPOINT_PATH = "/api/places"


def get_api_key() -> Optional[str]:
    for name in API_KEY_ENV_VARS:
        value = (os.environ.get(name) or "").strip()
        if value:
            return value
    return None


def load_search_config(path: Optional[str] = None) -> bool:
    """Load overrides from a JSON file.

    Updates module-level globals with values from the config file.
    Returns True if config was loaded, False if file not found.
    """
    if path is None:
        path = str(_REPO_ROOT / "search_config.json")

    config_path = Path(path)
    if not config_path.exists():
        return False

    with open(config_path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)

    globals_ref = globals()

    max_results = data.get("max_results")
    if max_results is not None:
        if int(max_results) <= 0:
            raise ValueError("max_results must be positive")
        globals_ref["MAX_RESULTS"] = int(max_results)

    workers = data.get("fanout_max_workers")
    if workers is not None:
        if int(workers) <= 0:
            raise ValueError("fanout_max_workers must be positive")
        globals_ref["FANOUT_MAX_WORKERS"] = int(workers)

    radius = data.get("default_radius_m")
    if radius is not None:
        if float(radius) <= 0:
            raise ValueError("default_radius_m must be positive")
        globals_ref["DEFAULT_RADIUS_M"] = float(radius)

    timeout = data.get("http_timeout_seconds")
    if timeout is not None:
        globals_ref["HTTP_TIMEOUT_SECONDS"] = int(timeout)

    brands = data.get("brands") or {}
    if brands:
        globals_ref["BRAND_OVERRIDES"] = {
            str(key): [str(b) for b in values] for key, values in brands.items() if values
        }

    server = data.get("server") or {}
    if "host" in server:
        globals_ref["SERVER_HOST"] = str(server["host"])
    if "port" in server:
        globals_ref["SERVER_PORT"] = int(server["port"])

    return True
