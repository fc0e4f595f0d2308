"""Configuration models — scenario inputs, presets and runtime settings."""

from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.config.presets import (
    SCENARIO_LABELS,
    SCENARIO_NAMES,
    ScenarioName,
    UnknownScenarioError,
    all_scenario_defaults,
    get_scenario_defaults,
)
from bitfrost_engine.config.settings import Settings, load_settings

__all__ = [
    "ScenarioParams",
    "ScenarioName",
    "SCENARIO_NAMES",
    "SCENARIO_LABELS",
    "UnknownScenarioError",
    "get_scenario_defaults",
    "all_scenario_defaults",
    "Settings",
    "load_settings",
]
