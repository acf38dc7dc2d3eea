import logging

import pytest

from placefinder import config
from placefinder.geo import haversine_m
from placefinder.http import RequestMetrics, UpstreamError
from placefinder.pipeline import SearchRequest, search_places
from placefinder.places_client import parse_places_response

ORIGIN = (42.3601, -71.0589)


def raw_place(place_id, name, primary_type, dlat=0.001, types=None, **extra):
    raw = {
        "id": place_id,
        "displayName": {"text": name},
        "primaryType": primary_type,
        "types": types or [primary_type],
        "location": {"latitude": ORIGIN[0] + dlat, "longitude": ORIGIN[1]},
        "rating": 4.4,
        "userRatingCount": 80,
        "businessStatus": "OPERATIONAL",
    }
    raw.update(extra)
    return raw


class FakePlacesClient:
    def __init__(self, nearby=None, text=None, fail_nearby=False):
        self.nearby = nearby or []
        self.text = text or {}
        self.fail_nearby = fail_nearby
        self.metrics = RequestMetrics()

    def search_nearby(self, included_types, lat, lng, radius_m, max_results=20):
        self.metrics.inc_network("nearby")
        if self.fail_nearby:
            raise UpstreamError("quota exceeded")
        return parse_places_response({"places": self.nearby}, source="nearby")

    def search_text(self, query, lat, lng, radius_m, max_results=10):
        self.metrics.inc_network("text")
        return parse_places_response({"places": self.text.get(query, [])}, source=f"text:{query}")


def make_request(types, radius_m=1000.0):
    return SearchRequest(lat=ORIGIN[0], lng=ORIGIN[1], radius_m=radius_m, included_types=types)


def test_groceries_end_to_end(caplog):
    client = FakePlacesClient(
        nearby=[
            raw_place("g1", "Fresh Market", "grocery_store", dlat=0.003),
            raw_place("g2", "7-Eleven", "grocery_store"),
            raw_place("g3", "Star Market", "supermarket", dlat=0.001),
            raw_place("g4", "Faraway Foods", "grocery_store", dlat=0.05),
            raw_place("g5", "Lost Grocer", "grocery_store", location={"latitude": None}),
            raw_place("g6", "Closed Grocer", "grocery_store", businessStatus="CLOSED_PERMANENTLY"),
        ]
    )

    with caplog.at_level(logging.INFO):
        result = search_places(make_request(["grocery_store", "supermarket"]), client)

    response = result.response
    assert response["mode"] == "groceries"
    assert response["debugIncludedTypes"] == ["grocery_store", "supermarket"]
    assert [p["name"] for p in response["places"]] == ["Star Market", "Fresh Market"]
    assert result.category == "groceries"
    assert result.summary["raw_count"] == 6
    assert result.summary["in_radius_count"] == 4
    assert result.summary["filtered_count"] == 2
    assert result.summary["requests"]["network_nearby"] == 1
    assert "[groceries] raw: 6" in caplog.text


def test_radius_invariant_and_unique_ids():
    nearby = [raw_place(f"p{i}", f"Pharmacy {i}", "pharmacy", dlat=0.002 * i) for i in range(10)]
    text = {"CVS Pharmacy near 42.3601,-71.0589": [nearby[0], raw_place("cvs", "CVS Pharmacy", "pharmacy")]}
    client = FakePlacesClient(nearby=nearby, text=text)

    response = search_places(make_request(["pharmacy"], radius_m=1000.0), client).response

    ids = [p["id"] for p in response["places"]]
    assert len(ids) == len(set(ids))
    assert "cvs" in ids
    for item in response["places"]:
        loc = item["location"]
        assert haversine_m(ORIGIN[0], ORIGIN[1], loc["lat"], loc["lng"]) <= 1000.0 + 1e-6
        assert item["directDistanceMeters"] <= 1000.0 + 1e-6


def test_bar_order_is_preserved():
    client = FakePlacesClient(
        nearby=[
            raw_place("r", "Restaurant Bar", "bar", dlat=0.001, types=["bar", "restaurant"]),
            raw_place("p", "Pure Bar", "bar", dlat=0.001, types=["bar"]),
            raw_place("g", "Grill", "restaurant", dlat=0.0005, types=["restaurant"]),
        ],
        text={"bars": [raw_place("far", "Far Pub", "pub", dlat=0.004)]},
    )

    response = search_places(make_request(["bar"]), client).response

    assert [p["name"] for p in response["places"]] == ["Pure Bar", "Far Pub", "Restaurant Bar", "Grill"]
    assert response["mode"] == "generic"


def test_default_category_applies_quality_gate_only():
    client = FakePlacesClient(
        nearby=[
            raw_place("a", "Any Shop", "store"),
            raw_place("b", "Unreviewed Shop", "store", userRatingCount=0),
        ]
    )
    response = search_places(make_request(["store"]), client).response
    assert [p["name"] for p in response["places"]] == ["Any Shop"]


def test_results_are_capped(monkeypatch):
    monkeypatch.setattr(config, "MAX_RESULTS", 5)
    client = FakePlacesClient(nearby=[raw_place(f"s{i}", f"Shop {i}", "store", dlat=0.0001 * i) for i in range(12)])

    response = search_places(make_request(["store"]), client).response

    assert [p["id"] for p in response["places"]] == ["s0", "s1", "s2", "s3", "s4"]


def test_primary_failure_surfaces():
    client = FakePlacesClient(fail_nearby=True)
    with pytest.raises(UpstreamError):
        search_places(make_request(["bank"]), client)


class TypeKeyedPlacesClient(FakePlacesClient):
    def __init__(self, nearby_by_types):
        super().__init__()
        self.nearby_by_types = nearby_by_types

    def search_nearby(self, included_types, lat, lng, radius_m, max_results=20):
        self.metrics.inc_network("nearby")
        raw = self.nearby_by_types.get(tuple(included_types), [])
        return parse_places_response({"places": raw}, source="nearby")


def test_post_office_with_other_types_keeps_other_results_unscreened():
    client = TypeKeyedPlacesClient(
        {
            ("post_office",): [
                raw_place("usps", "United States Postal Service", "post_office", dlat=0.002),
                raw_place("box", "FedEx Drop Box", "shipping_service"),
            ],
            ("storage",): [
                raw_place("st", "Public Storage Lockers", "storage", rating=4.6, userRatingCount=80),
            ],
        }
    )

    result = search_places(make_request(["post_office", "storage"]), client)

    assert result.category == "print_ship_and_others"
    assert [p["name"] for p in result.response["places"]] == [
        "Public Storage Lockers",
        "United States Postal Service",
    ]
