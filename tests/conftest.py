"""Shared test fixtures: the three stored presets."""

from __future__ import annotations

import pytest

from bitfrost_engine.config import ScenarioParams, get_scenario_defaults


@pytest.fixture
def base_params() -> ScenarioParams:
    return get_scenario_defaults("base")


@pytest.fixture
def bear_params() -> ScenarioParams:
    return get_scenario_defaults("bear")


@pytest.fixture
def bull_params() -> ScenarioParams:
    return get_scenario_defaults("bull")
