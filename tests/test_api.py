"""Tests for the HTTP API layer.

Covers:
  - Preset / schema endpoints
  - /calculate, /forecast, /compare, /sensitivity
  - Error mapping (unknown scenario → 404, bad override → 422)
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bitfrost_engine.api.server import app, _build_params
from bitfrost_engine.config import get_scenario_defaults


client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# Metadata endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestMetadata:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        data = client.get("/").json()
        assert data["name"] == "BitFrost Revenue Engine API"
        assert data["scenarios"] == ["bear", "base", "bull"]

    def test_schema(self):
        schema = client.get("/schema").json()
        assert "daily_volume" in schema["properties"]
        assert "hedge_efficiency_bps" in schema["properties"]

    def test_list_scenarios(self):
        data = client.get("/scenarios").json()
        assert data[0] == {"name": "bear", "label": "Bear Case"}
        assert len(data) == 3

    def test_get_scenario(self):
        resp = client.get("/scenarios/bull")
        assert resp.status_code == 200
        assert resp.json() == get_scenario_defaults("bull").model_dump()

    def test_get_unknown_scenario(self):
        resp = client.get("/scenarios/bull2")
        assert resp.status_code == 404
        assert "bull2" in resp.json()["detail"]


# ═══════════════════════════════════════════════════════════════════════════
# Calculation endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestCalculate:
    def test_default_is_base(self):
        resp = client.post("/calculate", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["scenario"] == "base"
        assert data["result"]["total"] == pytest.approx(122_954_000, rel=1e-9)
        assert data["headline"]["annual_revenue"] == "$122.95M"
        assert len(data["breakdown"]) == 4
        assert "BASE CASE" in data["narrative"]

    def test_overrides_applied(self):
        resp = client.post("/calculate", json={"scenario": "base", "overrides": {"leverage": 4}})
        data = resp.json()
        assert data["params"]["leverage"] == 4
        # 0.05488 × 4 × 1e8
        assert data["result"]["funding"] == pytest.approx(21_952_000, rel=1e-9)

    def test_bear_negative_funding(self):
        data = client.post("/calculate", json={"scenario": "bear"}).json()
        assert data["result"]["funding"] < 0
        assert data["headline"]["funding_roe"] == "-2.03%"

    def test_unknown_scenario_404(self):
        resp = client.post("/calculate", json={"scenario": "bull2"})
        assert resp.status_code == 404

    def test_unknown_override_422(self):
        resp = client.post("/calculate", json={"overrides": {"price_per_swap": 50}})
        assert resp.status_code == 422

    def test_non_numeric_override_422(self):
        resp = client.post("/calculate", json={"overrides": {"leverage": "lots"}})
        assert resp.status_code == 422


class TestForecast:
    def test_twelve_flat_months(self):
        data = client.post("/forecast", json={"scenario": "bull"}).json()
        months = data["months"]
        assert [m["month"] for m in months] == list(range(1, 13))
        assert len({m["total"] for m in months}) == 1


class TestCompare:
    def test_compare_presets(self):
        data = client.get("/compare").json()
        assert [e["name"] for e in data["entries"]] == ["bear", "base", "bull"]
        assert data["entries"][1]["funding_roe"] == pytest.approx(43.904, rel=1e-9)
        assert "SCENARIO COMPARISON" in data["narrative"]


class TestSensitivity:
    def test_default_sweeps(self):
        data = client.post("/sensitivity", json={"scenario": "base"}).json()
        assert data["base_total"] == pytest.approx(122_954_000, rel=1e-9)
        deltas = [b["delta_total"] for b in data["tornado_bars"]]
        assert deltas == sorted(deltas, reverse=True)

    def test_custom_sweep(self):
        body = {"sweeps": [{"field": "daily_hedge", "low_pct": -0.5, "high_pct": 0.5}]}
        data = client.post("/sensitivity", json=body).json()
        bar = data["tornado_bars"][0]
        assert bar["param_name"] == "daily_hedge"
        # ±50% of 3,650,000 hedging revenue
        assert bar["delta_total"] == pytest.approx(3_650_000, rel=1e-9)

    def test_unknown_sweep_field_422(self):
        body = {"sweeps": [{"field": "nope"}]}
        assert client.post("/sensitivity", json=body).status_code == 422

    def test_sweep_missing_field_key_422(self):
        body = {"sweeps": [{"name": "No field"}]}
        assert client.post("/sensitivity", json=body).status_code == 422

    @pytest.mark.parametrize(
        "sweep",
        [
            {"field": "leverage", "low_pct": "x"},
            {"field": "leverage", "high_pct": [0.1]},
            {"field": 5},
            {"field": ["leverage"]},
            "leverage",
        ],
    )
    def test_malformed_sweep_422(self, sweep):
        resp = client.post("/sensitivity", json={"sweeps": [sweep]})
        assert resp.status_code == 422

    def test_empty_sweeps_gives_no_bars(self):
        data = client.post("/sensitivity", json={"scenario": "base", "sweeps": []}).json()
        assert data["tornado_bars"] == []
        assert data["base_total"] == pytest.approx(122_954_000, rel=1e-9)

    def test_custom_sweep_name(self):
        body = {"sweeps": [{"name": "Leverage", "field": "leverage"}]}
        bar = client.post("/sensitivity", json=body).json()["tornado_bars"][0]
        assert bar["param_name"] == "Leverage"
        assert bar["param_field"] == "leverage"
        assert bar["low_value"] == pytest.approx(bar["base_value"] * 0.8)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════


def test_build_params_does_not_touch_presets():
    params = _build_params("base", {"equity": 1.0})
    assert params.equity == 1.0
    assert get_scenario_defaults("base").equity == 100_000_000
