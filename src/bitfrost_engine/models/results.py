"""Result types — the contract between engine, API, and dashboard.

Every model here is a pure function of a :class:`ScenarioParams`; none of
them carry history.  Values are stored unrounded so downstream identities
(``total == sum of streams``, ``monthly_avg == total / 12``) hold exactly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


StreamName = Literal["clearing", "funding", "liquidations", "hedging"]


# ═══════════════════════════════════════════════════════════════════════════
# Revenue calculation
# ═══════════════════════════════════════════════════════════════════════════

class RevenueResult(BaseModel):
    """Annualized revenue breakdown for one parameter set."""

    model_config = ConfigDict(frozen=True)

    total: float
    """clearing + funding + liquidations + hedging."""

    # --- Streams (annual) ---
    clearing: float
    """365 × daily_volume × internal_match_ratio × (clearing_fee + netting_fee)."""

    funding: float
    """funding_spread × deployed_notional.  Negative when borrow + friction exceed the funding rate."""

    liquidations: float
    """12 × monthly_liquidations × liquidation_fee."""

    hedging: float
    """365 × daily_hedge × hedge_efficiency."""

    # --- Averages ---
    monthly_avg: float
    daily_avg: float

    # --- Funding arbitrage ---
    funding_spread: float
    """Net annual rate on deployed notional, as a ratio (0.05 = 5%).  Signed."""

    deployed_notional: float
    """leverage × equity."""

    funding_roe: float
    """funding_spread × leverage × 100 (percent)."""

    # --- Daily run-rates ---
    clearing_daily: float
    hedge_daily: float


class MonthlyForecastPoint(BaseModel):
    """One month of the 12-month forecast series.

    Stream fields hold the daily run-rate of each stream (annual / 365), and
    ``total`` holds ``daily_avg``.  Every month carries the same values.
    """

    model_config = ConfigDict(frozen=True)

    month: int
    clearing: float
    funding: float
    liquidations: float
    hedging: float
    total: float


# ═══════════════════════════════════════════════════════════════════════════
# Scenario analysis
# ═══════════════════════════════════════════════════════════════════════════

class StreamShare(BaseModel):
    """One row of the revenue breakdown table."""

    model_config = ConfigDict(frozen=True)

    stream: StreamName
    label: str
    annual: float
    pct_of_total: float
    """annual / total × 100.  NaN when total is zero."""


class ScenarioSummary(BaseModel):
    """Headline metrics for one scenario in the comparison view."""

    name: str
    label: str
    daily_volume: float
    total: float
    monthly_avg: float
    funding_spread_pct: float
    """funding_spread × 100."""
    funding_roe: float
    result: RevenueResult


class ScenarioComparison(BaseModel):
    """Side-by-side comparison; entries keep the caller's order."""

    entries: list[ScenarioSummary]

    def get(self, name: str) -> ScenarioSummary | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None
