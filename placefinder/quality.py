"""Universal quality gate: closure and low-review checks."""
from __future__ import annotations

from typing import Any, Dict, Optional

CLOSED_STATUSES = frozenset({"CLOSED_TEMPORARILY", "CLOSED_PERMANENTLY"})

LOW_QUALITY_MAX_RATING = 3.5
LOW_QUALITY_MIN_REVIEWS = 5

# Stand-ins for absent metadata so that unknown places are not penalized.
DEFAULT_RATING = 5.0
DEFAULT_REVIEW_COUNT = 100


def is_closed(place: Dict[str, Any]) -> bool:
    status = place.get("business_status")
    if not isinstance(status, str):
        return False
    return status.strip().upper() in CLOSED_STATUSES


def is_low_quality(place: Dict[str, Any]) -> bool:
    rating: Optional[float] = place.get("rating")
    count: Optional[int] = place.get("user_rating_count")
    if rating is None:
        rating = DEFAULT_RATING
    if count is None:
        count = DEFAULT_REVIEW_COUNT
    if count == 0:
        return True
    return rating < LOW_QUALITY_MAX_RATING and count < LOW_QUALITY_MIN_REVIEWS


def quality_reject_reason(place: Dict[str, Any]) -> Optional[str]:
    if is_closed(place):
        return "closed"
    if is_low_quality(place):
        return "low_quality"
    return None


def passes_quality_gate(place: Dict[str, Any]) -> bool:
    return quality_reject_reason(place) is None
