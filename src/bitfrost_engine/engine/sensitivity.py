"""Sensitivity / tornado analysis on annual revenue.

One-at-a-time parameter sweeps: vary one input, recalculate, measure the
change in total annual revenue.  Produces tornado chart data sorted by impact.

Default sweep set:
  - daily_volume ± 25%
  - internal_match_ratio ± 20%
  - hl_funding_rate_pct ± 50%
  - arch_borrow_rate_pct ± 20%
  - leverage ± 25%
  - equity ± 25%
  - monthly_liquidations ± 30%
  - daily_hedge ± 30%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.engine.revenue import calculate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_field: str
    """Field on ScenarioParams (e.g. 'daily_volume')."""

    base_value: float
    low_value: float
    high_value: float

    total_at_low: float
    """Annual revenue when param = low_value."""

    total_at_high: float
    """Annual revenue when param = high_value."""

    delta_total: float
    """abs(total_at_high − total_at_low), the total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_total: float
    """Annual revenue of the unswept scenario."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_total (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Daily volume", "daily_volume", -0.25, 0.25),
    ("Internal match ratio", "internal_match_ratio", -0.20, 0.20),
    ("HL funding rate", "hl_funding_rate_pct", -0.50, 0.50),
    ("Borrow rate", "arch_borrow_rate_pct", -0.20, 0.20),
    ("Leverage", "leverage", -0.25, 0.25),
    ("Equity", "equity", -0.25, 0.25),
    ("Monthly liquidations", "monthly_liquidations", -0.30, 0.30),
    ("Daily hedge", "daily_hedge", -0.30, 0.30),
]


def _total_with(params: ScenarioParams, field_name: str, value: float) -> float:
    return calculate(params.model_copy(update={field_name: value})).total


def run_sensitivity(
    params: ScenarioParams,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run sensitivity analysis for one scenario.

    Parameters
    ----------
    params : ScenarioParams
        Base scenario.  Not modified.
    sweeps : list[tuple[name, field, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by revenue impact.

    Raises
    ------
    ValueError
        If a sweep names a field that ScenarioParams does not have.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    for _, field_name, _, _ in sweeps:
        if field_name not in ScenarioParams.model_fields:
            raise ValueError(f"Cannot sweep unknown parameter {field_name!r}")

    base_total = calculate(params).total
    bars: list[TornadoBar] = []

    for name, field_name, low_pct, high_pct in sweeps:
        base_val = float(getattr(params, field_name))
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        total_low = _total_with(params, field_name, low_val)
        total_high = _total_with(params, field_name, high_val)

        bars.append(TornadoBar(
            param_name=name,
            param_field=field_name,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            total_at_low=total_low,
            total_at_high=total_high,
            delta_total=abs(total_high - total_low),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_total, reverse=True)

    logger.debug("sensitivity: %d sweeps, base_total=%.2f", len(bars), base_total)
    return SensitivityResult(base_total=base_total, bars=bars)
