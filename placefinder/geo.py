"""Geospatial helpers."""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

EARTH_RADIUS_M = 6371000.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


def _coerce_coord(value: Any) -> Optional[float]:
    # bool is an int subclass; True/False are not coordinates.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        coord = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(coord):
        return None
    return coord


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def extract_position(location: Any) -> Optional[Tuple[float, float]]:
    """Normalize a provider location into ``(lat, lon)``.

    Accepts ``{"latitude", "longitude"}``, ``{"latLng": {...}}`` and flat
    ``{"lat", "lng"}`` shapes. Returns None when either coordinate is missing
    or not a finite number, so callers never fall back to the origin.
    """
    if not isinstance(location, dict):
        return None
    inner = location.get("latLng")
    if isinstance(inner, dict):
        location = inner
    lat = _coerce_coord(_first_present(location, "latitude", "lat"))
    lon = _coerce_coord(_first_present(location, "longitude", "lng", "lon"))
    if lat is None or lon is None:
        return None
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        return None
    return lat, lon


def distance_to_origin_m(place: Dict[str, Any], origin_lat: float, origin_lng: float) -> Optional[float]:
    lat = place.get("lat")
    lon = place.get("lon")
    if lat is None or lon is None:
        return None
    return haversine_m(origin_lat, origin_lng, lat, lon)


def is_within_radius(distance_m: Optional[float], radius_m: float) -> bool:
    return distance_m is not None and distance_m <= radius_m


def within_radius(
    places: Iterable[Dict[str, Any]],
    origin_lat: float,
    origin_lng: float,
    radius_m: float,
) -> List[Dict[str, Any]]:
    """Keep places inside the radius, annotated with ``distance_m``.

    Places without a usable position are excluded. Input dicts are not mutated.
    """
    kept: List[Dict[str, Any]] = []
    for place in places:
        dist = distance_to_origin_m(place, origin_lat, origin_lng)
        if not is_within_radius(dist, radius_m):
            continue
        annotated = dict(place)
        annotated["distance_m"] = dist
        kept.append(annotated)
    return kept
