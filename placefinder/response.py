"""Outbound response shaping and JSON output."""
from __future__ import annotations

import json
import math
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO, Tuple

from . import config
from .geo import distance_to_origin_m

Origin = Tuple[float, float]


@dataclass(frozen=True)
class ResponseItem:
    id: str
    name: str
    address: str
    primary_type: str
    types: List[str] = field(default_factory=list)
    google_maps_uri: str = ""
    website_uri: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    direct_distance_m: Optional[float] = None
    rating: Optional[float] = None
    open_now: Optional[bool] = None
    current_opening_hours: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        location = None
        if self.lat is not None and self.lng is not None:
            location = {"lat": self.lat, "lng": self.lng}
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "primaryType": self.primary_type,
            "types": list(self.types),
            "googleMapsUri": self.google_maps_uri,
            "websiteUri": self.website_uri,
            "location": location,
            "directDistanceMeters": self.direct_distance_m,
            "rating": self.rating,
            "openNow": self.open_now,
            "currentOpeningHours": self.current_opening_hours,
        }


def build_response_item(place: Dict[str, Any], origin: Origin) -> ResponseItem:
    dist = place.get("distance_m")
    if dist is None:
        dist = distance_to_origin_m(place, origin[0], origin[1])
    hours = place.get("current_opening_hours")
    open_now = hours.get("openNow") if isinstance(hours, dict) else None
    return ResponseItem(
        id=place["place_id"],
        name=place.get("name") or "",
        address=place.get("address") or "",
        primary_type=place.get("primary_type") or "",
        types=list(place.get("types") or []),
        google_maps_uri=place.get("google_maps_uri") or "",
        website_uri=place.get("website_uri"),
        lat=place.get("lat"),
        lng=place.get("lon"),
        direct_distance_m=dist,
        rating=place.get("rating"),
        open_now=open_now if isinstance(open_now, bool) else None,
        current_opening_hours=hours if isinstance(hours, dict) else None,
    )


def distance_sort_key(item: ResponseItem) -> float:
    return item.direct_distance_m if item.direct_distance_m is not None else math.inf


def shape_places(
    places: Iterable[Dict[str, Any]],
    origin: Origin,
    preserve_order: bool = False,
    max_results: Optional[int] = None,
) -> List[ResponseItem]:
    """Map places to items, sort by distance unless told otherwise, truncate."""
    cap = config.MAX_RESULTS if max_results is None else max_results
    if cap <= 0:
        raise ValueError(f"max_results must be positive, got {cap}")
    items = [build_response_item(p, origin) for p in places]
    if not preserve_order:
        items.sort(key=distance_sort_key)
    return items[:cap]


def build_response(request, mode: str, items: Iterable[ResponseItem]) -> Dict[str, Any]:
    return {
        "origin": {"lat": request.lat, "lng": request.lng},
        "mode": mode,
        "debugIncludedTypes": list(request.included_types),
        "places": [item.to_dict() for item in items],
    }


@contextmanager
def atomic_writer(path: str, encoding: str = "utf-8") -> Iterator[TextIO]:
    dir_path = os.path.dirname(path) or "."
    os.makedirs(dir_path, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=dir_path)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def write_response_json(path: str, payload: Dict[str, Any]) -> None:
    with atomic_writer(path) as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")
