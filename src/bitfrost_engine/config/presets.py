"""Named scenario presets — bear / base / bull.

The values are business-chosen constants, not derived.  The table is built
once at import and only ever handed out as copies, so a dashboard tab or an
API request can edit its working parameters freely.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Literal, Mapping

from bitfrost_engine.config.scenario import ScenarioParams

logger = logging.getLogger(__name__)

ScenarioName = Literal["bear", "base", "bull"]

SCENARIO_NAMES: tuple[str, ...] = ("bear", "base", "bull")

SCENARIO_LABELS: Mapping[str, str] = MappingProxyType({
    "bear": "Bear Case",
    "base": "Base Case",
    "bull": "Bull Case",
})


class UnknownScenarioError(LookupError):
    """Raised when a preset name is not one of :data:`SCENARIO_NAMES`."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown scenario {name!r}; expected one of: {', '.join(SCENARIO_NAMES)}"
        )


_PRESETS: Mapping[str, ScenarioParams] = MappingProxyType({
    "bear": ScenarioParams(
        daily_volume=500_000_000,
        internal_match_ratio=0.30,
        clearing_fee_bps=1.5,
        netting_fee_bps=0.5,
        hl_funding_rate_pct=2,
        arch_borrow_rate_pct=3,
        friction_cost_bps=1.5,
        equity=50_000_000,
        leverage=2.0,
        monthly_liquidations=10_000_000,
        liquidation_fee_pct=0.3,
        daily_hedge=50_000_000,
        hedge_efficiency_bps=0.2,
    ),
    "base": ScenarioParams(
        daily_volume=2_000_000_000,
        internal_match_ratio=0.50,
        clearing_fee_bps=1.5,
        netting_fee_bps=0.5,
        hl_funding_rate_pct=8,
        arch_borrow_rate_pct=2.5,
        friction_cost_bps=1.2,
        equity=100_000_000,
        leverage=8.0,
        monthly_liquidations=50_000_000,
        liquidation_fee_pct=0.4,
        daily_hedge=200_000_000,
        hedge_efficiency_bps=0.5,
    ),
    "bull": ScenarioParams(
        daily_volume=5_000_000_000,
        internal_match_ratio=0.65,
        clearing_fee_bps=1.5,
        netting_fee_bps=0.5,
        hl_funding_rate_pct=25,
        arch_borrow_rate_pct=2,
        friction_cost_bps=0.8,
        equity=200_000_000,
        leverage=12.0,
        monthly_liquidations=150_000_000,
        liquidation_fee_pct=0.5,
        daily_hedge=500_000_000,
        hedge_efficiency_bps=1.0,
    ),
})


def get_scenario_defaults(name: str) -> ScenarioParams:
    """Return a fresh copy of the named preset.

    Raises
    ------
    UnknownScenarioError
        If *name* is not a known preset.
    """
    try:
        preset = _PRESETS[name]
    except KeyError:
        logger.warning("Unknown scenario requested: %r", name)
        raise UnknownScenarioError(name) from None
    return preset.model_copy(deep=True)


def all_scenario_defaults() -> dict[str, ScenarioParams]:
    """Fresh copies of every preset, keyed by name in bear → base → bull order."""
    return {name: get_scenario_defaults(name) for name in SCENARIO_NAMES}
