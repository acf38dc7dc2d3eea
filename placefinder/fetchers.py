"""Source fetchers: one proximity search plus keyword fan-out per category.

Every fetcher has the signature ``fetch(client, request, executor)`` and
returns ordered batches: proximity results first, then keyword results in the
order the queries were issued. A failed keyword query contributes an empty
batch; a failed proximity query raises.
"""
from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Any, Dict, List, Sequence

from . import config, filters, rules
from .http import UpstreamError

logger = logging.getLogger(__name__)

Batch = List[Dict[str, Any]]


def near_query(term: str, lat: float, lng: float) -> str:
    return f"{term} near {lat},{lng}"


def brand_list(category: str, default: Sequence[str]) -> List[str]:
    override = config.BRAND_OVERRIDES.get(category)
    if override:
        return list(override)
    return list(default)


def nearby_batch(client, request, included_types: Sequence[str]) -> Batch:
    return client.search_nearby(
        list(included_types),
        request.lat,
        request.lng,
        request.radius_m,
        max_results=config.NEARBY_MAX_RESULT_COUNT,
    )


def fan_out_text_queries(
    client,
    queries: Sequence[str],
    request,
    executor: Executor,
    max_results: int = config.TEXT_MAX_RESULT_COUNT,
) -> List[Batch]:
    """Issue keyword searches on ``executor`` and collect them in issue order."""
    futures: List[Future] = [
        executor.submit(
            client.search_text,
            query,
            request.lat,
            request.lng,
            request.radius_m,
            max_results=max_results,
        )
        for query in queries
    ]
    batches: List[Batch] = []
    for query, future in zip(queries, futures):
        try:
            batches.append(future.result())
        except UpstreamError as exc:
            logger.warning("Keyword search failed (%s): %s", query, exc)
            metrics = getattr(client, "metrics", None)
            if metrics is not None:
                metrics.inc_failed("text")
            batches.append([])
    return batches


def _nearby_plus_queries(
    client,
    request,
    executor: Executor,
    types: Sequence[str],
    queries: Sequence[str],
    max_results: int = config.TEXT_MAX_RESULT_COUNT,
) -> List[Batch]:
    primary = nearby_batch(client, request, types)
    return [primary] + fan_out_text_queries(client, queries, request, executor, max_results)


def _nearby_plus_brands(client, request, executor, types, category, brands) -> List[Batch]:
    queries = [near_query(b, request.lat, request.lng) for b in brand_list(category, brands)]
    return _nearby_plus_queries(client, request, executor, types, queries)


def fetch_default(client, request, executor) -> List[Batch]:
    return [nearby_batch(client, request, request.included_types)]


def fetch_groceries(client, request, executor) -> List[Batch]:
    return [nearby_batch(client, request, sorted(rules.GROCERY_TOKENS))]


def fetch_specialty_markets(client, request, executor) -> List[Batch]:
    queries = [
        near_query(q, request.lat, request.lng)
        for q in brand_list("specialty_markets", rules.SPECIALTY_MARKET_QUERIES)
    ]
    return _nearby_plus_queries(client, request, executor, request.included_types, queries)


def fetch_pharmacy(client, request, executor) -> List[Batch]:
    return _nearby_plus_brands(
        client, request, executor, rules.PHARMACY_SEARCH_TYPES, "pharmacy", rules.PHARMACY_BRANDS
    )


def fetch_gas_ev(client, request, executor) -> List[Batch]:
    return _nearby_plus_brands(
        client, request, executor, rules.GAS_EV_SEARCH_TYPES, "gas_ev", rules.GAS_BRANDS
    )


def fetch_bank_atm(client, request, executor) -> List[Batch]:
    return _nearby_plus_brands(
        client, request, executor, rules.BANK_ATM_SEARCH_TYPES, "bank_atm", rules.BANK_BRANDS
    )


def fetch_clothing(client, request, executor) -> List[Batch]:
    return [nearby_batch(client, request, rules.CLOTHING_SEARCH_TYPES)]


def fetch_jewelry(client, request, executor) -> List[Batch]:
    return [nearby_batch(client, request, rules.JEWELRY_SEARCH_TYPES)]


def fetch_print_ship(client, request, executor) -> List[Batch]:
    return _nearby_plus_brands(
        client, request, executor, rules.PRINT_SHIP_SEARCH_TYPES, "print_ship", rules.PACK_SHIP_BRANDS
    )


def fetch_print_ship_and_others(client, request, executor) -> List[Batch]:
    """Pack-and-ship retrieval screened by the print/ship rules, plus an
    unscreened proximity batch for the remaining tokens."""
    others = [t for t in request.included_types if t != rules.PRINT_SHIP_TOKEN]
    batches = [
        [p for p in batch if filters.print_ship_reason(p) is None]
        for batch in fetch_print_ship(client, request, executor)
    ]
    if others:
        # Proximity batches lead the merge order.
        batches.insert(1, nearby_batch(client, request, others))
    return batches


def fetch_bar(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.BAR_SEARCH_TYPES,
        [rules.BAR_TEXT_QUERY],
        max_results=config.BAR_TEXT_MAX_RESULT_COUNT,
    )


def fetch_liquor(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.LIQUOR_SEARCH_TYPES,
        brand_list("liquor", rules.LIQUOR_BRANDS),
    )


def fetch_warehouse_clubs(client, request, executor) -> List[Batch]:
    clubs = rules.WAREHOUSE_CLUBS
    raw = fan_out_text_queries(client, [c.query for c in clubs], request, executor)
    batches: List[Batch] = []
    for club, batch in zip(clubs, raw):
        batches.append([p for p in batch if club.name_pattern.search(p.get("name") or "")])
    return batches


def fetch_attractions(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.ATTRACTION_SEARCH_TYPES,
        brand_list("attractions", rules.ATTRACTION_QUERIES),
    )


def fetch_arts_culture(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.ARTS_SEARCH_TYPES,
        brand_list("arts_culture", rules.ARTS_CULTURE_QUERIES),
    )


def fetch_sports(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.SPORTS_SEARCH_TYPES,
        brand_list("sports", rules.SPORTS_QUERIES),
    )


def fetch_discount_thrift(client, request, executor) -> List[Batch]:
    return _nearby_plus_queries(
        client,
        request,
        executor,
        rules.DISCOUNT_SEARCH_TYPES,
        brand_list("discount_thrift", rules.DISCOUNT_THRIFT_QUERIES),
    )
