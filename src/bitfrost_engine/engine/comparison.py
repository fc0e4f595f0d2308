"""Scenario analysis — revenue breakdown and multi-scenario comparison.

Feeds the breakdown table and comparison tab.  Everything here is derived
from :func:`calculate`; nothing is clamped except the chart magnitudes
returned by :func:`chart_streams`.
"""

from __future__ import annotations

from typing import Mapping

from bitfrost_engine.config.presets import SCENARIO_LABELS, all_scenario_defaults
from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.engine.revenue import calculate
from bitfrost_engine.models.results import (
    RevenueResult,
    ScenarioComparison,
    ScenarioSummary,
    StreamName,
    StreamShare,
)

STREAM_LABELS: dict[StreamName, str] = {
    "clearing": "Clearing",
    "funding": "Funding Arbitrage",
    "liquidations": "Liquidations",
    "hedging": "Hedging",
}


def compute_revenue_breakdown(result: RevenueResult) -> list[StreamShare]:
    """One row per stream with its share of total revenue (percent).

    A zero total gives NaN shares rather than raising.
    """
    rows: list[StreamShare] = []
    for stream, label in STREAM_LABELS.items():
        annual = getattr(result, stream)
        pct = annual / result.total * 100 if result.total != 0 else float("nan")
        rows.append(StreamShare(stream=stream, label=label, annual=annual, pct_of_total=pct))
    return rows


def chart_streams(result: RevenueResult) -> list[tuple[str, float]]:
    """Pie-chart magnitudes.  Funding is floored at zero for display only."""
    return [
        ("Clearing", result.clearing),
        ("Funding", max(0.0, result.funding)),
        ("Liquidations", result.liquidations),
        ("Hedging", result.hedging),
    ]


def summarize_scenario(name: str, params: ScenarioParams) -> ScenarioSummary:
    """Headline row for one scenario."""
    result = calculate(params)
    return ScenarioSummary(
        name=name,
        label=SCENARIO_LABELS.get(name, name.title()),
        daily_volume=params.daily_volume,
        total=result.total,
        monthly_avg=result.monthly_avg,
        funding_spread_pct=result.funding_spread * 100,
        funding_roe=result.funding_roe,
        result=result,
    )


def compare_scenarios(
    params_by_name: Mapping[str, ScenarioParams] | None = None,
) -> ScenarioComparison:
    """Compare several scenarios side by side.

    Parameters
    ----------
    params_by_name : Mapping[str, ScenarioParams] | None
        Working parameter sets keyed by scenario name.  None = the three
        stored presets.

    Returns
    -------
    ScenarioComparison
        One summary per scenario, in the mapping's order.
    """
    if params_by_name is None:
        params_by_name = all_scenario_defaults()

    return ScenarioComparison(
        entries=[summarize_scenario(name, params) for name, params in params_by_name.items()],
    )
