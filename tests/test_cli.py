import json

import run
from placefinder.places_client import parse_places_response


class FakePlacesClient:
    def __init__(self, metrics=None):
        self.metrics = metrics

    def search_nearby(self, included_types, lat, lng, radius_m, max_results=20):
        raw = {
            "id": "b1",
            "displayName": "Chase Bank",
            "primaryType": "bank",
            "location": {"latitude": lat, "longitude": lng},
        }
        return parse_places_response({"places": [raw]}, source="nearby")

    def search_text(self, query, lat, lng, radius_m, max_results=10):
        return []


def _no_env(monkeypatch, tmp_path):
    monkeypatch.setattr(run, "_repo_root", lambda: tmp_path)
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY_SERVER", raising=False)


def test_preflight_reports_missing_key(monkeypatch, tmp_path, capsys):
    _no_env(monkeypatch, tmp_path)

    code = run.main(["--config", str(tmp_path / "none.json"), "preflight", "--types", "atm"])

    out = capsys.readouterr().out
    assert code == 1
    assert "API key: MISSING" in out
    assert "Category: bank_atm" in out


def test_search_writes_response(monkeypatch, tmp_path):
    _no_env(monkeypatch, tmp_path)
    monkeypatch.setattr(run, "build_places_client", lambda metrics=None: FakePlacesClient(metrics))
    out_path = tmp_path / "response.json"

    code = run.main(
        [
            "--config",
            str(tmp_path / "none.json"),
            "search",
            "--lat",
            "42.36",
            "--lng",
            "-71.06",
            "--radius-m",
            "500",
            "--types",
            "bank,atm",
            "--out",
            str(out_path),
        ]
    )

    assert code == 0
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["debugIncludedTypes"] == ["bank", "atm"]
    assert [p["id"] for p in payload["places"]] == ["b1"]


def test_search_rejects_bad_radius(monkeypatch, tmp_path):
    _no_env(monkeypatch, tmp_path)
    code = run.main(
        ["--config", str(tmp_path / "none.json"), "search", "--lat", "1", "--lng", "2", "--radius-m", "-5", "--types", "bar"]
    )
    assert code == 2


def test_search_rejects_non_positive_max_results(monkeypatch, tmp_path, capsys):
    _no_env(monkeypatch, tmp_path)
    monkeypatch.setattr(run, "build_places_client", lambda metrics=None: FakePlacesClient(metrics))

    code = run.main(
        ["--config", str(tmp_path / "none.json"), "search", "--lat", "1", "--lng", "2", "--types", "bank", "--max-results", "-1"]
    )

    assert code == 2
    assert "--max-results must be positive" in capsys.readouterr().err
