"""Category registry and resolver.

``RESOLUTION_ORDER`` is evaluated top to bottom; the first predicate that
matches the requested type tokens picks the category. ``CATEGORIES`` maps the
chosen key to its fetch strategy and filter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from . import fetchers, filters, rules

Tokens = Sequence[str]


@dataclass(frozen=True)
class Category:
    key: str
    fetch: Callable[..., List[List[Dict[str, Any]]]]
    filter: Callable[..., List[Dict[str, Any]]]
    # Keep the filter's ordering instead of re-sorting by distance.
    preserve_order: bool = False
    # Filter also takes the request origin.
    needs_origin: bool = False


def _any_of(vocab) -> Callable[[Tokens], bool]:
    return lambda tokens: any(t in vocab for t in tokens)


def _has_post_office(tokens: Tokens) -> bool:
    return rules.PRINT_SHIP_TOKEN in tokens


def _only_post_office(tokens: Tokens) -> bool:
    return list(tokens) == [rules.PRINT_SHIP_TOKEN]


def _is_grocery_pair(tokens: Tokens) -> bool:
    return len(tokens) == 2 and set(tokens) == rules.GROCERY_TOKENS


def _is_clothing_only(tokens: Tokens) -> bool:
    return list(tokens) == [rules.CLOTHING_TOKEN]


def _is_single_jewelry(tokens: Tokens) -> bool:
    return len(tokens) == 1 and tokens[0] in rules.JEWELRY_TOKENS


RESOLUTION_ORDER: List[Tuple[Callable[[Tokens], bool], str]] = [
    (_only_post_office, "print_ship"),
    (_has_post_office, "print_ship_and_others"),
    (_is_grocery_pair, "groceries"),
    (_any_of(rules.SPECIALTY_MARKET_TOKENS), "specialty_markets"),
    (_any_of(rules.PHARMACY_TOKENS), "pharmacy"),
    (_any_of(rules.GAS_EV_TOKENS), "gas_ev"),
    (_any_of(rules.BANK_ATM_TOKENS), "bank_atm"),
    (_is_clothing_only, "clothing"),
    (_is_single_jewelry, "jewelry"),
    (_any_of(rules.BAR_TOKENS), "bar"),
    (_any_of({rules.LIQUOR_TOKEN}), "liquor"),
    (_any_of(rules.WAREHOUSE_TOKENS), "warehouse_clubs"),
    (_any_of(rules.ATTRACTION_TOKENS), "attractions"),
    (_any_of(rules.ARTS_TOKENS), "arts_culture"),
    (_any_of(rules.SPORTS_TOKENS), "sports"),
    (_any_of(rules.DISCOUNT_THRIFT_TOKENS), "discount_thrift"),
]

DEFAULT_CATEGORY = "default"

CATEGORIES: Dict[str, Category] = {
    c.key: c
    for c in (
        Category("default", fetchers.fetch_default, filters.filter_default),
        Category("groceries", fetchers.fetch_groceries, filters.filter_groceries),
        Category(
            "specialty_markets",
            fetchers.fetch_specialty_markets,
            filters.filter_specialty_markets,
        ),
        Category("pharmacy", fetchers.fetch_pharmacy, filters.filter_pharmacy),
        Category("gas_ev", fetchers.fetch_gas_ev, filters.filter_gas_ev),
        Category("bank_atm", fetchers.fetch_bank_atm, filters.filter_bank_atm),
        Category("clothing", fetchers.fetch_clothing, filters.filter_clothing),
        Category("jewelry", fetchers.fetch_jewelry, filters.filter_jewelry),
        Category("print_ship", fetchers.fetch_print_ship, filters.filter_print_ship),
        Category(
            "print_ship_and_others",
            fetchers.fetch_print_ship_and_others,
            filters.filter_default,
        ),
        Category(
            "bar",
            fetchers.fetch_bar,
            filters.filter_bar,
            preserve_order=True,
            needs_origin=True,
        ),
        Category("liquor", fetchers.fetch_liquor, filters.filter_liquor),
        Category(
            "warehouse_clubs",
            fetchers.fetch_warehouse_clubs,
            filters.filter_warehouse_clubs,
        ),
        Category("attractions", fetchers.fetch_attractions, filters.filter_attractions),
        Category("arts_culture", fetchers.fetch_arts_culture, filters.filter_arts_culture),
        Category("sports", fetchers.fetch_sports, filters.filter_sports),
        Category(
            "discount_thrift",
            fetchers.fetch_discount_thrift,
            filters.filter_discount_thrift,
        ),
    )
}


def resolve_category(tokens: Tokens) -> str:
    """Return the category key for the requested tokens. Never fails."""
    tokens = list(tokens or [])
    for predicate, key in RESOLUTION_ORDER:
        if predicate(tokens):
            return key
    return DEFAULT_CATEGORY


def get_category(tokens: Tokens) -> Category:
    return CATEGORIES[resolve_category(tokens)]


def infer_mode(tokens: Tokens) -> str:
    tokens = list(tokens or [])
    if _is_grocery_pair(tokens):
        return "groceries"
    if _any_of(rules.SPECIALTY_MARKET_TOKENS)(tokens):
        return "specialty_markets"
    return "generic"
