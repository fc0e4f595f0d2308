"""Revenue calculator — scenario parameters → annual revenue streams.

Pure arithmetic: ScenarioParams → RevenueResult, and RevenueResult → a flat
12-month forecast.  No validation, no clamping, no exceptions: a negative
funding spread yields negative funding revenue and non-finite inputs yield
non-finite outputs.
"""

from __future__ import annotations

import logging

from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.models.results import MonthlyForecastPoint, RevenueResult

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
BPS_PER_UNIT = 10_000
PCT_PER_UNIT = 100
FORECAST_MONTHS = 12


def calculate(params: ScenarioParams) -> RevenueResult:
    """Compute the four revenue streams and derived ratios for one scenario."""

    # ── Normalise quoted rates to plain ratios ─────────────────────────
    clearing_fee = params.clearing_fee_bps / BPS_PER_UNIT
    netting_fee = params.netting_fee_bps / BPS_PER_UNIT
    hl_funding_rate = params.hl_funding_rate_pct / PCT_PER_UNIT
    borrow_rate = params.arch_borrow_rate_pct / PCT_PER_UNIT
    friction = params.friction_cost_bps / BPS_PER_UNIT
    liquidation_fee = params.liquidation_fee_pct / PCT_PER_UNIT
    hedge_efficiency = params.hedge_efficiency_bps / BPS_PER_UNIT

    # ── Clearing: fees on internally matched volume ────────────────────
    clearing = (
        DAYS_PER_YEAR * params.daily_volume * params.internal_match_ratio
        * (clearing_fee + netting_fee)
    )

    # ── Funding arbitrage ──────────────────────────────────────────────
    # Spread may be negative (borrow + friction above the funding rate).
    funding_spread = hl_funding_rate - borrow_rate - friction
    deployed_notional = params.leverage * params.equity
    funding = funding_spread * deployed_notional

    # ── Liquidations & hedging ─────────────────────────────────────────
    liquidations = MONTHS_PER_YEAR * params.monthly_liquidations * liquidation_fee
    hedging = DAYS_PER_YEAR * params.daily_hedge * hedge_efficiency

    total = clearing + funding + liquidations + hedging

    logger.debug(
        "calculated revenue total=%.2f clearing=%.2f funding=%.2f liquidations=%.2f hedging=%.2f",
        total, clearing, funding, liquidations, hedging,
    )

    return RevenueResult(
        total=total,
        clearing=clearing,
        funding=funding,
        liquidations=liquidations,
        hedging=hedging,
        monthly_avg=total / MONTHS_PER_YEAR,
        daily_avg=total / DAYS_PER_YEAR,
        funding_spread=funding_spread,
        deployed_notional=deployed_notional,
        funding_roe=funding_spread * params.leverage * 100,
        clearing_daily=clearing / DAYS_PER_YEAR,
        hedge_daily=hedging / DAYS_PER_YEAR,
    )


def forecast_from_result(result: RevenueResult) -> list[MonthlyForecastPoint]:
    """Expand an existing result into the 12-month forecast series.

    Each month carries the daily run-rate of every stream and ``daily_avg``
    as the total; the series is flat.
    """
    clearing = result.clearing / DAYS_PER_YEAR
    funding = result.funding / DAYS_PER_YEAR
    liquidations = result.liquidations / DAYS_PER_YEAR
    hedging = result.hedging / DAYS_PER_YEAR

    return [
        MonthlyForecastPoint(
            month=month,
            clearing=clearing,
            funding=funding,
            liquidations=liquidations,
            hedging=hedging,
            total=result.daily_avg,
        )
        for month in range(1, FORECAST_MONTHS + 1)
    ]


def generate_monthly_forecast(params: ScenarioParams) -> list[MonthlyForecastPoint]:
    """Calculate once, then build the 12-point forecast from that result."""
    return forecast_from_result(calculate(params))
