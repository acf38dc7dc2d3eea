"""Category filters: quality gate, then category allow/deny, then ranking.

Each public ``filter_*`` takes parsed places (already inside the radius and
annotated with ``distance_m``) and returns the kept places. Rejections are
counted per reason and logged at DEBUG.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from . import rules
from .geo import distance_to_origin_m
from .quality import quality_reject_reason

logger = logging.getLogger(__name__)

Place = Dict[str, Any]
ReasonFn = Callable[[Place], Optional[str]]


def apply_rules(
    places: Iterable[Place],
    reason_fn: Optional[ReasonFn],
    label: str,
) -> Tuple[List[Place], Dict[str, int]]:
    filtered: List[Place] = []
    rejection_counts: Dict[str, int] = {}
    for place in places:
        reason = quality_reject_reason(place)
        if reason is None and reason_fn is not None:
            reason = reason_fn(place)
        if reason:
            rejection_counts[reason] = rejection_counts.get(reason, 0) + 1
        else:
            filtered.append(place)
    if rejection_counts:
        logger.debug("%s filter rejections: %s", label, rejection_counts)
    return filtered, rejection_counts


def _name(place: Place) -> str:
    return place.get("name") or ""


def _primary(place: Place) -> str:
    return (place.get("primary_type") or "").lower()


def _types(place: Place) -> List[str]:
    return [str(t).lower() for t in place.get("types") or []]


def _has_entity_suffix(name: str) -> bool:
    return bool(rules.ENTITY_SUFFIX.search(name))


# ---------------------------------------------------------------------------
# Reason functions
# ---------------------------------------------------------------------------

def grocery_reason(place: Place) -> Optional[str]:
    name = _name(place)
    if _primary(place) not in rules.GROCERY_PRIMARY_TYPES:
        return "not_grocery_type"
    if rules.CONVENIENCE_WORDS.search(name):
        return "convenience_name"
    if rules.SPECIALTY_CUES.search(name) or rules.NON_ASCII.search(name):
        return "specialty_name"
    if rules.MARKET_SHOP_STORE.search(name) and (
        rules.SPECIALTY_CUES.search(name) or rules.NON_ASCII.search(name)
    ):
        return "specialty_market_name"
    return None


def pharmacy_reason(place: Place) -> Optional[str]:
    if rules.PHARMACY_DENY.search(_name(place)):
        return "deny_name"
    return None


def gas_ev_reason(place: Place) -> Optional[str]:
    if rules.GAS_DENY.search(_name(place)):
        return "deny_name"
    return None


def bank_atm_reason(place: Place) -> Optional[str]:
    if rules.BANK_DENY.search(_name(place)):
        return "deny_name"
    return None


def clothing_reason(place: Place) -> Optional[str]:
    name = _name(place)
    if _primary(place) in rules.CLOTHING_EXCLUDED_PRIMARY_TYPES:
        return "alteration_type"
    if rules.CLOTHING_CHAIN_DENY.search(name):
        return "deny_name"
    if _has_entity_suffix(name) and not rules.KNOWN_APPAREL_CHAINS.search(name):
        return "entity_name"
    return None


def jewelry_reason(place: Place) -> Optional[str]:
    name = _name(place)
    primary = _primary(place)
    if "jewelry" not in primary:
        return "not_jewelry_type"
    if primary in rules.JEWELRY_EXCLUDED_PRIMARY_TYPES:
        return "excluded_type"
    if rules.OFF_PRICE_DENY.search(name):
        return "off_price_name"
    if rules.JEWELRY_CHAIN_DENY.search(name):
        return "deny_name"
    if _has_entity_suffix(name):
        return "entity_name"
    return None


def print_ship_reason(place: Place) -> Optional[str]:
    if rules.PRINT_SHIP_DENY.search(_name(place)):
        return "drop_point_name"
    return None


def specialty_market_reason(place: Place) -> Optional[str]:
    primary = _primary(place)
    if primary in rules.SPECIALTY_EXCLUDED_PRIMARY_TYPES or rules.is_restaurant_type(primary):
        return "food_service_type"
    if rules.CHAIN_DENY.search(_name(place)):
        return "chain_name"
    return None


def is_convenience_store(place: Place) -> bool:
    if _primary(place) in rules.CONVENIENCE_PRIMARY_TYPES:
        return True
    return bool(rules.CONVENIENCE_STORE_NAMES.search(_name(place)))


def liquor_reason(place: Place) -> Optional[str]:
    name = _name(place)
    primary = _primary(place)
    if primary in rules.LIQUOR_PROFESSIONAL_TYPES:
        return "professional_service_type"
    if rules.LIQUOR_CONSULTANCY_DENY.search(name):
        return "consultancy_name"
    if primary != rules.LIQUOR_TOKEN and not rules.LIQUOR_NAME_KEYWORDS.search(name):
        return "not_liquor"
    if is_convenience_store(place):
        state = rules.parse_state_code(place.get("address"))
        if state is not None and state in rules.RESTRICTED_LIQUOR_STATES:
            return "restricted_state_convenience"
    return None


def warehouse_reason(place: Place) -> Optional[str]:
    name = _name(place)
    if not any(club.name_pattern.search(name) for club in rules.WAREHOUSE_CLUBS):
        return "not_club_brand"
    if _primary(place) == "gas_station":
        return "gas_station_type"
    if rules.EXCLUDED_DEPARTMENTS.search(name):
        return "department_name"
    return None


def attraction_reason(place: Place) -> Optional[str]:
    primary = _primary(place)
    if primary not in rules.ATTRACTION_ALLOWED_TYPES:
        return "not_attraction_type"
    if primary in rules.ATTRACTION_DENY_TYPES or any(
        t in rules.ATTRACTION_DENY_TYPES for t in _types(place)
    ):
        return "adjacent_type"
    if rules.ATTRACTION_NAME_DENY.search(_name(place)):
        return "sports_field_name"
    return None


def arts_reason(place: Place) -> Optional[str]:
    if _primary(place) not in rules.ARTS_ALLOWED_TYPES:
        return "not_arts_type"
    return None


def sports_reason(place: Place) -> Optional[str]:
    primary = _primary(place)
    if primary in rules.SPORTS_DENY_TYPES or rules.is_restaurant_type(primary):
        return "food_or_bar_type"
    if primary not in rules.SPORTS_ALLOWED_TYPES:
        return "not_sports_type"
    if rules.SPORTS_NAME_DENY.search(_name(place)):
        return "entertainment_chain_name"
    return None


def bar_reason(place: Place) -> Optional[str]:
    primary = _primary(place)
    if primary in rules.BAR_FAMILY_TYPES:
        return None
    if primary in rules.VENUE_TYPES or any(t in rules.VENUE_TYPES for t in _types(place)):
        return "venue"
    return None


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def _distance_key(place: Place) -> float:
    dist = place.get("distance_m")
    return dist if dist is not None else math.inf


def bar_tier(place: Place) -> int:
    """0 = pure bar, 1 = bar with food or bar as secondary, 2 = restaurant."""
    primary = _primary(place)
    types = _types(place)
    has_restaurant = "restaurant" in types
    if primary in rules.BAR_FAMILY_TYPES:
        return 1 if has_restaurant else 0
    if any(t in rules.BAR_FAMILY_TYPES for t in types) and not has_restaurant:
        return 1
    if has_restaurant:
        return 2
    return 1


def attraction_rank(place: Place) -> int:
    return rules.ATTRACTION_RANK.get(_primary(place), len(rules.ATTRACTION_RANK))


def arts_rank(place: Place) -> int:
    primary = _primary(place)
    if primary in rules.ARTS_GALLERY_TYPES:
        return 0
    if primary in rules.ARTS_THEATER_TYPES:
        return 1
    return 2


# ---------------------------------------------------------------------------
# Public filters
# ---------------------------------------------------------------------------

def filter_default(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, None, "default")
    return filtered


def filter_groceries(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, grocery_reason, "groceries")
    return filtered


def filter_specialty_markets(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, specialty_market_reason, "specialty_markets")
    return filtered


def filter_pharmacy(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, pharmacy_reason, "pharmacy")
    return filtered


def filter_gas_ev(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, gas_ev_reason, "gas_ev")
    return filtered


def filter_bank_atm(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, bank_atm_reason, "bank_atm")
    return filtered


def filter_clothing(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, clothing_reason, "clothing")
    return filtered


def filter_jewelry(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, jewelry_reason, "jewelry")
    return filtered


def filter_print_ship(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, print_ship_reason, "print_ship")
    return filtered


def filter_liquor(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, liquor_reason, "liquor")
    return filtered


def filter_warehouse_clubs(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, warehouse_reason, "warehouse_clubs")
    return filtered


def filter_discount_thrift(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, None, "discount_thrift")
    return filtered


def filter_attractions(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, attraction_reason, "attractions")
    # sorted() is stable, so ties keep their incoming order.
    return sorted(filtered, key=attraction_rank)


def filter_arts_culture(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, arts_reason, "arts_culture")
    return sorted(filtered, key=arts_rank)


def filter_sports(places: Iterable[Place]) -> List[Place]:
    filtered, _ = apply_rules(places, sports_reason, "sports")
    return filtered


def filter_bar(
    places: Iterable[Place],
    origin: Optional[Tuple[float, float]] = None,
) -> List[Place]:
    """Drop venues, then order by tier and distance.

    ``origin`` fills in ``distance_m`` for places that lack it; places with no
    usable position sort last within their tier.
    """
    filtered, _ = apply_rules(places, bar_reason, "bar")
    if origin is not None:
        annotated = []
        for place in filtered:
            if place.get("distance_m") is None:
                place = dict(place)
                place["distance_m"] = distance_to_origin_m(place, origin[0], origin[1])
            annotated.append(place)
        filtered = annotated
    return sorted(filtered, key=lambda p: (bar_tier(p), _distance_key(p)))
