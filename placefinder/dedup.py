"""Merge result batches into a unique-by-id list."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Set


def merge_unique(batches: Iterable[Iterable[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """First occurrence of each place_id wins; batch order is source priority."""
    seen: Set[str] = set()
    merged: List[Dict[str, Any]] = []
    for batch in batches:
        for place in batch:
            place_id = place.get("place_id")
            if not place_id or place_id in seen:
                continue
            seen.add(place_id)
            merged.append(place)
    return merged
