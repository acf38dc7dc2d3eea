"""Request orchestration: validate, resolve, fetch, merge, geofence, filter, shape."""
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import config
from .categories import get_category, infer_mode, resolve_category
from .dedup import merge_unique
from .geo import within_radius
from .http import HttpClient, RequestMetrics
from .places_client import PlacesClient
from .response import build_response, shape_places

logger = logging.getLogger(__name__)


class InvalidRequestError(ValueError):
    """The inbound request is missing a field or has an invalid value."""


@dataclass(frozen=True)
class SearchRequest:
    lat: float
    lng: float
    radius_m: float
    included_types: List[str] = field(default_factory=list)


@dataclass
class PipelineResult:
    response: Dict[str, Any]
    category: str
    summary: Dict[str, Any]


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_request(payload: Any) -> SearchRequest:
    """Build a SearchRequest from the inbound JSON body or raise InvalidRequestError."""
    if not isinstance(payload, dict):
        raise InvalidRequestError("request body must be a JSON object")
    lat = payload.get("lat")
    lng = payload.get("lng")
    radius = payload.get("radiusMeters")
    if not (_is_number(lat) and _is_number(lng) and _is_number(radius)):
        raise InvalidRequestError("lat, lng, radiusMeters required")
    if not -90.0 <= lat <= 90.0:
        raise InvalidRequestError("lat must be between -90 and 90")
    if not -180.0 <= lng <= 180.0:
        raise InvalidRequestError("lng must be between -180 and 180")
    if radius <= 0:
        raise InvalidRequestError("radiusMeters must be positive")

    types = payload.get("includedTypes")
    if not isinstance(types, list) or not types:
        raise InvalidRequestError("includedTypes required")
    if not all(isinstance(t, str) and t.strip() for t in types):
        raise InvalidRequestError("includedTypes must be non-empty strings")

    return SearchRequest(
        lat=float(lat),
        lng=float(lng),
        radius_m=float(radius),
        included_types=[t.strip() for t in types],
    )


def build_places_client(
    api_key: Optional[str] = None,
    metrics: Optional[RequestMetrics] = None,
) -> PlacesClient:
    key = api_key if api_key is not None else config.get_api_key()
    http_client = HttpClient(key or "", timeout=config.HTTP_TIMEOUT_SECONDS)
    return PlacesClient(http_client, metrics=metrics)


def search_places(
    request: SearchRequest,
    client: PlacesClient,
    max_workers: Optional[int] = None,
    max_results: Optional[int] = None,
) -> PipelineResult:
    category_key = resolve_category(request.included_types)
    category = get_category(request.included_types)
    workers = max_workers or config.FANOUT_MAX_WORKERS
    origin = (request.lat, request.lng)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        batches = category.fetch(client, request, executor)

    merged = merge_unique(batches)
    nearby = within_radius(merged, request.lat, request.lng, request.radius_m)
    if category.needs_origin:
        filtered = category.filter(nearby, origin)
    else:
        filtered = category.filter(nearby)

    logger.info(
        "[%s] raw: %s in radius: %s filtered: %s %s",
        category_key,
        len(merged),
        len(nearby),
        len(filtered),
        [p.get("name") for p in filtered[:3]],
    )

    items = shape_places(
        filtered,
        origin,
        preserve_order=category.preserve_order,
        max_results=max_results,
    )
    response = build_response(request, infer_mode(request.included_types), items)
    summary: Dict[str, Any] = {
        "category": category_key,
        "batches": len(batches),
        "raw_count": len(merged),
        "in_radius_count": len(nearby),
        "filtered_count": len(filtered),
        "returned_count": len(items),
    }
    metrics = getattr(client, "metrics", None)
    if metrics is not None:
        summary["requests"] = metrics.as_dict()
    return PipelineResult(response=response, category=category_key, summary=summary)
