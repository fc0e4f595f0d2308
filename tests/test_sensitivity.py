"""Tests for engine/sensitivity.py: tornado sweeps on annual revenue."""

from __future__ import annotations

import pytest

from bitfrost_engine.config import ScenarioParams
from bitfrost_engine.engine.revenue import calculate
from bitfrost_engine.engine.sensitivity import DEFAULT_SWEEPS, run_sensitivity


def test_default_sweeps_cover_all_bars(base_params: ScenarioParams):
    result = run_sensitivity(base_params)
    assert len(result.bars) == len(DEFAULT_SWEEPS)
    assert result.base_total == pytest.approx(122_954_000, rel=1e-9)


def test_bars_sorted_by_impact(base_params: ScenarioParams):
    result = run_sensitivity(base_params)
    deltas = [b.delta_total for b in result.bars]
    assert deltas == sorted(deltas, reverse=True)


def test_daily_volume_swing(base_params: ScenarioParams):
    result = run_sensitivity(base_params, [("Daily volume", "daily_volume", -0.25, 0.25)])
    bar = result.bars[0]
    assert bar.base_value == 2_000_000_000
    assert bar.low_value == pytest.approx(1_500_000_000)
    assert bar.high_value == pytest.approx(2_500_000_000)
    # Clearing is linear in volume: ±25% of 73,000,000 = ±18,250,000
    assert bar.total_at_low == pytest.approx(122_954_000 - 18_250_000, rel=1e-9)
    assert bar.total_at_high == pytest.approx(122_954_000 + 18_250_000, rel=1e-9)
    assert bar.delta_total == pytest.approx(36_500_000, rel=1e-9)


def test_leverage_swing_in_bear_case(bear_params: ScenarioParams):
    """With a negative spread more leverage lowers revenue."""
    result = run_sensitivity(bear_params, [("Leverage", "leverage", -0.5, 0.5)])
    bar = result.bars[0]
    assert bar.total_at_high < bar.total_at_low


def test_input_not_mutated(base_params: ScenarioParams):
    snapshot = base_params.model_dump()
    run_sensitivity(base_params)
    assert base_params.model_dump() == snapshot
    assert calculate(base_params).total == pytest.approx(122_954_000, rel=1e-9)


def test_unknown_field_raises(base_params: ScenarioParams):
    with pytest.raises(ValueError, match="price_per_swap"):
        run_sensitivity(base_params, [("Swap price", "price_per_swap", -0.1, 0.1)])


def test_empty_sweeps(base_params: ScenarioParams):
    result = run_sensitivity(base_params, [])
    assert result.bars == []
