"""Places API client and response parsing."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from . import config
from .geo import extract_position
from .http import HttpClient, RequestMetrics, UpstreamError

logger = logging.getLogger(__name__)


class PlacesClient:
    def __init__(
        self,
        http_client: HttpClient,
        field_mask: str = config.PLACES_FIELD_MASK,
        metrics: Optional[RequestMetrics] = None,
    ) -> None:
        self.http = http_client
        self.field_mask = field_mask
        self.metrics = metrics

    def search_nearby(
        self,
        included_types: Sequence[str],
        lat: float,
        lng: float,
        radius_m: float,
        max_results: int = config.NEARBY_MAX_RESULT_COUNT,
    ) -> List[Dict[str, Any]]:
        body = build_nearby_search_body(included_types, lat, lng, radius_m, max_results)
        response = self._post("nearby", config.PLACES_NEARBY_SEARCH_URL, body)
        return parse_places_response(response, source="nearby")

    def search_text(
        self,
        query: str,
        lat: float,
        lng: float,
        radius_m: float,
        max_results: int = config.TEXT_MAX_RESULT_COUNT,
    ) -> List[Dict[str, Any]]:
        body = build_text_search_body(query, lat, lng, radius_m, max_results)
        response = self._post("text", config.PLACES_TEXT_SEARCH_URL, body)
        return parse_places_response(response, source=f"text:{query}")

    def _post(self, kind: str, url: str, body: Dict[str, Any]) -> Dict[str, Any]:
        if self.metrics is not None:
            self.metrics.inc_network(kind)
        try:
            return self.http.post_json(url, body, self.field_mask)
        except requests.HTTPError as exc:
            detail = exc.response.text if exc.response is not None else str(exc)
            raise UpstreamError(f"Places {kind} search failed: {detail}") from exc
        except (requests.RequestException, ValueError) as exc:
            raise UpstreamError(f"Places {kind} search failed: {exc}") from exc


def make_circle(lat: float, lng: float, radius_m: float) -> Dict[str, Any]:
    return {
        "circle": {
            "center": {"latitude": lat, "longitude": lng},
            "radius": float(radius_m),
        }
    }


def build_nearby_search_body(
    included_types: Sequence[str],
    lat: float,
    lng: float,
    radius_m: float,
    max_results: int = config.NEARBY_MAX_RESULT_COUNT,
) -> Dict[str, Any]:
    return {
        "includedTypes": list(included_types),
        "maxResultCount": min(int(max_results), config.NEARBY_MAX_RESULT_COUNT),
        "locationRestriction": make_circle(lat, lng, radius_m),
    }


def build_text_search_body(
    query: str,
    lat: float,
    lng: float,
    radius_m: float,
    max_results: int = config.TEXT_MAX_RESULT_COUNT,
) -> Dict[str, Any]:
    return {
        "textQuery": query,
        "maxResultCount": min(int(max_results), config.BAR_TEXT_MAX_RESULT_COUNT),
        "locationBias": make_circle(lat, lng, radius_m),
    }


def display_name(raw: Any) -> str:
    if isinstance(raw, dict):
        return str(raw.get("text") or raw.get("value") or "")
    if isinstance(raw, str):
        return raw
    return ""


def _optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# Adapter/mapper for Places response fields

def parse_place(p: Dict[str, Any], source: str = "") -> Optional[Dict[str, Any]]:
    place_id = p.get("id") or p.get("placeId")
    if not place_id:
        return None
    position = extract_position(p.get("location"))
    user_rating_count = p.get("userRatingCount")
    if user_rating_count is None:
        user_rating_count = p.get("user_ratings_total")
    types = p.get("types") or []
    hours = p.get("currentOpeningHours")
    return {
        "place_id": str(place_id),
        "name": display_name(p.get("displayName")),
        "address": p.get("formattedAddress") or "",
        "primary_type": str(p.get("primaryType") or "").lower(),
        "types": [str(t) for t in types if t],
        "rating": _optional_float(p.get("rating")),
        "user_rating_count": _optional_int(user_rating_count),
        "business_status": p.get("businessStatus") or p.get("business_status"),
        "lat": position[0] if position else None,
        "lon": position[1] if position else None,
        "google_maps_uri": p.get("googleMapsUri") or "",
        "website_uri": p.get("websiteUri"),
        "current_opening_hours": hours if isinstance(hours, dict) else None,
        "source": source,
    }


def parse_places_response(response: Dict[str, Any], source: str = "") -> List[Dict[str, Any]]:
    places = response.get("places") if isinstance(response, dict) else None
    if not isinstance(places, list):
        return []
    parsed: List[Dict[str, Any]] = []
    for p in places:
        if not isinstance(p, dict):
            continue
        place = parse_place(p, source)
        if place is not None:
            parsed.append(place)
    return parsed
