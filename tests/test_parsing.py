from placefinder.places_client import (
    build_nearby_search_body,
    build_text_search_body,
    parse_places_response,
)


def test_parse_places_missing_fields():
    response = {
        "places": [
            {"id": "p1"},
            {"id": "p2", "displayName": "Name"},
            {"placeId": "p3", "location": {"lat": 1.0, "lng": 2.0}},
            {"displayName": {"text": "no-id"}},
        ]
    }

    parsed = parse_places_response(response, source="nearby")
    assert [p["place_id"] for p in parsed] == ["p1", "p2", "p3"]
    assert parsed[0]["name"] == ""
    assert parsed[0]["rating"] is None
    assert parsed[0]["user_rating_count"] is None
    assert parsed[0]["primary_type"] == ""
    assert parsed[0]["lat"] is None
    assert parsed[0]["lon"] is None
    assert parsed[1]["name"] == "Name"
    assert parsed[2]["lat"] == 1.0
    assert parsed[2]["lon"] == 2.0
    assert all(p["source"] == "nearby" for p in parsed)


def test_parse_places_location_shapes():
    response = {
        "places": [
            {"id": "a", "location": {"latitude": 42.36, "longitude": -71.06}},
            {"id": "b", "location": {"latLng": {"latitude": 42.1, "longitude": -71.2}}},
            {"id": "c", "location": {"lat": "42.2", "lng": "-71.3"}},
            {"id": "d", "location": {"latitude": True, "longitude": -71.0}},
            {"id": "e", "location": {"latitude": "north", "longitude": -71.0}},
            {"id": "f", "location": {"latitude": float("nan"), "longitude": -71.0}},
        ]
    }

    parsed = {p["place_id"]: p for p in parse_places_response(response)}
    assert (parsed["a"]["lat"], parsed["a"]["lon"]) == (42.36, -71.06)
    assert (parsed["b"]["lat"], parsed["b"]["lon"]) == (42.1, -71.2)
    assert (parsed["c"]["lat"], parsed["c"]["lon"]) == (42.2, -71.3)
    for place_id in ("d", "e", "f"):
        assert parsed[place_id]["lat"] is None
        assert parsed[place_id]["lon"] is None


def test_parse_place_fields():
    response = {
        "places": [
            {
                "id": "p1",
                "displayName": {"text": "Corner Pharmacy", "languageCode": "en"},
                "formattedAddress": "1 Main St, Boston, MA 02101, USA",
                "primaryType": "Pharmacy",
                "types": ["pharmacy", "health"],
                "rating": 4.5,
                "userRatingCount": 12,
                "businessStatus": "OPERATIONAL",
                "googleMapsUri": "https://maps.google.com/?cid=1",
                "currentOpeningHours": {"openNow": True},
            }
        ]
    }

    place = parse_places_response(response, source="text:CVS")[0]
    assert place["name"] == "Corner Pharmacy"
    assert place["address"] == "1 Main St, Boston, MA 02101, USA"
    assert place["primary_type"] == "pharmacy"
    assert place["types"] == ["pharmacy", "health"]
    assert place["rating"] == 4.5
    assert place["user_rating_count"] == 12
    assert place["business_status"] == "OPERATIONAL"
    assert place["website_uri"] is None
    assert place["current_opening_hours"] == {"openNow": True}
    assert place["source"] == "text:CVS"


def test_parse_places_tolerates_bad_payloads():
    assert parse_places_response({}) == []
    assert parse_places_response({"places": None}) == []
    assert parse_places_response({"places": ["junk", 3, {"id": "ok"}]})[0]["place_id"] == "ok"


def test_search_bodies_cap_result_counts():
    nearby = build_nearby_search_body(["bar"], 1.0, 2.0, 500, max_results=50)
    assert nearby["includedTypes"] == ["bar"]
    assert nearby["maxResultCount"] == 20
    assert nearby["locationRestriction"]["circle"]["center"] == {"latitude": 1.0, "longitude": 2.0}
    assert nearby["locationRestriction"]["circle"]["radius"] == 500.0

    text = build_text_search_body("bars", 1.0, 2.0, 500, max_results=20)
    assert text["textQuery"] == "bars"
    assert text["maxResultCount"] == 20
    assert "locationBias" in text
