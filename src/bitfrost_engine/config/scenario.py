"""Scenario parameters — the thirteen business inputs of the revenue model.

Units follow the business convention rather than plain ratios: fee and
friction fields are quoted in basis points, rate fields in percent.  The
engine normalises them before use.

No range constraints are declared.  Negative volumes, ratios above 1 and
non-finite numbers are accepted and flow through the arithmetic unchanged.
"""

from pydantic import BaseModel, ConfigDict, Field


class ScenarioParams(BaseModel):
    """Complete input set for one revenue calculation.

    Defaults reproduce the ``base`` preset so that a partial payload still
    describes a full scenario.
    """

    model_config = ConfigDict(extra="forbid")

    # --- Volumes & fees ---
    daily_volume: float = Field(
        default=2_000_000_000.0,
        description="Total matched trading volume per day (currency/day)",
    )
    internal_match_ratio: float = Field(
        default=0.50,
        description="Fraction of volume matched internally and therefore monetizable (0–1)",
    )
    clearing_fee_bps: float = Field(default=1.5, description="Clearing fee rate (bps)")
    netting_fee_bps: float = Field(default=0.5, description="Netting fee rate (bps)")

    # --- Funding arbitrage ---
    hl_funding_rate_pct: float = Field(
        default=8.0,
        description="Annual funding rate earned on deployed notional (%)",
    )
    arch_borrow_rate_pct: float = Field(
        default=2.5,
        description="Annual borrowing cost on deployed notional (%)",
    )
    friction_cost_bps: float = Field(
        default=1.2,
        description="Execution / friction drag on the funding spread (bps)",
    )
    equity: float = Field(default=100_000_000.0, description="Capital base backing the deployment (currency)")
    leverage: float = Field(default=8.0, description="Multiplier on equity → deployed notional")

    # --- Liquidations ---
    monthly_liquidations: float = Field(
        default=50_000_000.0,
        description="Notional liquidated per month (currency/month)",
    )
    liquidation_fee_pct: float = Field(default=0.4, description="Fee charged on liquidated notional (%)")

    # --- Hedging ---
    daily_hedge: float = Field(default=200_000_000.0, description="Notional hedged per day (currency/day)")
    hedge_efficiency_bps: float = Field(
        default=0.5,
        description="Net margin captured per unit of notional hedged (bps)",
    )
