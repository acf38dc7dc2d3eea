import json

import pytest

from placefinder.pipeline import SearchRequest
from placefinder.response import build_response, build_response_item, shape_places, write_response_json

ORIGIN = (42.36, -71.06)


def make_place(place_id, lat=None, lon=None, distance_m=None, **extra):
    place = {
        "place_id": place_id,
        "name": place_id.title(),
        "address": "1 Main St",
        "primary_type": "bar",
        "types": ["bar"],
        "lat": lat,
        "lon": lon,
        "distance_m": distance_m,
        "google_maps_uri": f"https://maps.google.com/?q={place_id}",
        "website_uri": None,
        "rating": 4.2,
        "current_opening_hours": None,
    }
    place.update(extra)
    return place


def test_item_shape_and_computed_distance():
    place = make_place("a", lat=42.361, lon=-71.06, current_opening_hours={"openNow": True})

    item = build_response_item(place, ORIGIN).to_dict()

    assert item["id"] == "a"
    assert item["location"] == {"lat": 42.361, "lng": -71.06}
    assert 100 < item["directDistanceMeters"] < 125
    assert item["openNow"] is True
    assert item["currentOpeningHours"] == {"openNow": True}
    assert item["primaryType"] == "bar"
    assert set(item) == {
        "id",
        "name",
        "address",
        "primaryType",
        "types",
        "googleMapsUri",
        "websiteUri",
        "location",
        "directDistanceMeters",
        "rating",
        "openNow",
        "currentOpeningHours",
    }


def test_existing_distance_is_reused():
    item = build_response_item(make_place("a", lat=0.0, lon=0.0, distance_m=12.5), ORIGIN)
    assert item.direct_distance_m == 12.5


def test_shape_sorts_by_distance_stably():
    places = [
        make_place("far", distance_m=300.0),
        make_place("tie-1", distance_m=100.0),
        make_place("nowhere"),
        make_place("tie-2", distance_m=100.0),
    ]

    items = shape_places(places, ORIGIN)

    assert [i.id for i in items] == ["tie-1", "tie-2", "far", "nowhere"]


def test_shape_preserves_order_when_asked():
    places = [make_place("b", distance_m=300.0), make_place("a", distance_m=100.0)]
    items = shape_places(places, ORIGIN, preserve_order=True)
    assert [i.id for i in items] == ["b", "a"]


def test_shape_truncates_to_cap():
    places = [make_place(f"p{i}", distance_m=float(i)) for i in range(30)]
    assert len(shape_places(places, ORIGIN)) == 20
    assert [i.id for i in shape_places(places, ORIGIN, max_results=3)] == ["p0", "p1", "p2"]


@pytest.mark.parametrize("cap", [0, -1])
def test_shape_rejects_non_positive_cap(cap):
    places = [make_place("a", distance_m=1.0), make_place("b", distance_m=2.0)]
    with pytest.raises(ValueError):
        shape_places(places, ORIGIN, max_results=cap)


def test_build_response_envelope():
    request = SearchRequest(lat=1.0, lng=2.0, radius_m=100.0, included_types=["bar"])
    items = shape_places([make_place("a", distance_m=5.0)], ORIGIN)

    response = build_response(request, "generic", items)

    assert response["origin"] == {"lat": 1.0, "lng": 2.0}
    assert response["mode"] == "generic"
    assert response["debugIncludedTypes"] == ["bar"]
    assert [p["id"] for p in response["places"]] == ["a"]


def test_write_response_json(tmp_path):
    path = tmp_path / "out" / "response.json"
    write_response_json(str(path), {"places": [], "mode": "generic"})

    assert json.loads(path.read_text(encoding="utf-8")) == {"places": [], "mode": "generic"}
    assert [p.name for p in path.parent.iterdir()] == ["response.json"]
