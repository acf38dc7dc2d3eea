from placefinder.dedup import merge_unique


def test_first_occurrence_wins():
    nearby = [{"place_id": "a", "name": "From nearby", "source": "nearby"}]
    text = [
        {"place_id": "a", "name": "From text", "source": "text:x", "rating": 4.0},
        {"place_id": "b", "name": "Only text", "source": "text:x"},
    ]

    merged = merge_unique([nearby, text])

    assert [p["place_id"] for p in merged] == ["a", "b"]
    assert merged[0]["name"] == "From nearby"
    assert "rating" not in merged[0]


def test_no_repeated_ids_and_order_kept():
    batches = [
        [{"place_id": "c"}, {"place_id": "a"}],
        [{"place_id": "a"}, {"place_id": "b"}, {"place_id": "c"}],
        [],
        [{"place_id": "d"}, {"place_id": "b"}],
    ]

    merged = merge_unique(batches)

    ids = [p["place_id"] for p in merged]
    assert ids == ["c", "a", "b", "d"]
    assert len(ids) == len(set(ids))


def test_records_without_id_are_dropped():
    merged = merge_unique([[{"name": "ghost"}, {"place_id": "", "name": "blank"}, {"place_id": "x"}]])
    assert [p["place_id"] for p in merged] == ["x"]
