"""FastAPI server for the BitFrost revenue engine.

Run with:
    uvicorn bitfrost_engine.api.server:app --reload --port 8000

Or:
    python -m bitfrost_engine.api.server

Endpoints:
    GET  /scenarios            — preset names and labels
    GET  /scenarios/{name}     — one preset's parameters
    GET  /schema               — JSON Schema for ScenarioParams
    POST /calculate            — revenue result + breakdown + narrative
    POST /forecast             — 12-month forecast series
    GET  /compare              — bear / base / bull side by side
    POST /sensitivity          — parameter sweep → tornado data
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from bitfrost_engine import __version__
from bitfrost_engine.api.narrative import generate_comparison_narrative, generate_narrative
from bitfrost_engine.config.presets import (
    SCENARIO_LABELS,
    SCENARIO_NAMES,
    UnknownScenarioError,
    get_scenario_defaults,
)
from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.config.settings import load_settings
from bitfrost_engine.engine.comparison import compare_scenarios, compute_revenue_breakdown
from bitfrost_engine.engine.revenue import calculate, forecast_from_result
from bitfrost_engine.engine.sensitivity import run_sensitivity
from bitfrost_engine.formatting import format_currency, format_percentage
from bitfrost_engine.logging_setup import setup_logging
from bitfrost_engine.models.results import MonthlyForecastPoint, RevenueResult, StreamShare

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="BitFrost Revenue Engine API",
    version=__version__,
    description=(
        "Annualized revenue projections for a trading / clearing operation. "
        "Pick a preset scenario (bear, base, bull), override any parameter, "
        "and get the revenue breakdown, derived ratios and monthly forecast."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ScenarioRequest(BaseModel):
    """Preset name plus optional per-field overrides."""
    scenario: str = Field(default="base", description="Preset to start from: bear, base or bull")
    overrides: dict[str, float] = Field(
        default_factory=dict,
        description="ScenarioParams fields to replace. Example: {'leverage': 4, 'hl_funding_rate_pct': 12}",
    )


class SweepSpec(BaseModel):
    """One parameter sweep for /sensitivity."""
    field: str = Field(description="ScenarioParams field to vary, e.g. 'leverage'")
    name: str | None = Field(default=None, description="Display name. Defaults to the field name.")
    low_pct: float = Field(default=-0.20, description="Relative change for the low run (-0.2 = −20%)")
    high_pct: float = Field(default=0.20, description="Relative change for the high run")


class SensitivityRequest(ScenarioRequest):
    """Request body for /sensitivity."""
    sweeps: list[SweepSpec] | None = Field(
        default=None,
        description="Optional override of sweep parameters. None = default sweeps, [] = no sweeps. "
                    "Format: [{'name': 'Leverage', 'field': 'leverage', 'low_pct': -0.25, 'high_pct': 0.25}]",
    )


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    scenario: str
    params: ScenarioParams
    result: RevenueResult
    breakdown: list[StreamShare]
    headline: dict[str, str]
    narrative: str = ""


class ForecastResponse(BaseModel):
    """Response from /forecast."""
    scenario: str
    months: list[MonthlyForecastPoint]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_params(scenario: str, overrides: dict[str, float]) -> ScenarioParams:
    """Preset copy with overrides applied.  Raises HTTPException on bad input."""
    try:
        base = get_scenario_defaults(scenario)
    except UnknownScenarioError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    try:
        return ScenarioParams(**{**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc


def _headline(result: RevenueResult) -> dict[str, str]:
    return {
        "annual_revenue": format_currency(result.total),
        "monthly_avg": format_currency(result.monthly_avg),
        "funding_roe": format_percentage(result.funding_roe),
        "funding_spread": format_percentage(result.funding_spread * 100),
    }


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "BitFrost Revenue Engine API",
        "version": __version__,
        "scenarios": list(SCENARIO_NAMES),
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for ScenarioParams, with units in the descriptions."""
    return ScenarioParams.model_json_schema()


@app.get("/scenarios")
def list_scenarios():
    return [{"name": name, "label": SCENARIO_LABELS[name]} for name in SCENARIO_NAMES]


@app.get("/scenarios/{name}", response_model=ScenarioParams)
def get_scenario(name: str):
    try:
        return get_scenario_defaults(name)
    except UnknownScenarioError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/calculate", response_model=CalculateResponse)
def calculate_revenue(req: ScenarioRequest):
    """Calculate annual revenue for a preset with optional overrides.

    Example minimal request:
    ```json
    {"scenario": "bear", "overrides": {"leverage": 4}}
    ```
    """
    params = _build_params(req.scenario, req.overrides)
    result = calculate(params)
    label = SCENARIO_LABELS.get(req.scenario, req.scenario)
    logger.info("calculate scenario=%s overrides=%s total=%.2f", req.scenario, sorted(req.overrides), result.total)
    return CalculateResponse(
        scenario=req.scenario,
        params=params,
        result=result,
        breakdown=compute_revenue_breakdown(result),
        headline=_headline(result),
        narrative=generate_narrative(label, params, result),
    )


@app.post("/forecast", response_model=ForecastResponse)
def forecast(req: ScenarioRequest):
    """12-month forecast series (daily run-rate per stream, flat across months)."""
    params = _build_params(req.scenario, req.overrides)
    return ForecastResponse(scenario=req.scenario, months=forecast_from_result(calculate(params)))


@app.get("/compare")
def compare():
    """Bear, base and bull presets side by side."""
    comparison = compare_scenarios()
    return {
        "entries": [
            {
                "name": e.name,
                "label": e.label,
                "daily_volume": e.daily_volume,
                "total": e.total,
                "monthly_avg": e.monthly_avg,
                "funding_spread_pct": e.funding_spread_pct,
                "funding_roe": e.funding_roe,
            }
            for e in comparison.entries
        ],
        "narrative": generate_comparison_narrative(comparison),
    }


@app.post("/sensitivity")
def sensitivity(req: SensitivityRequest):
    """One-at-a-time sweeps, sorted by impact on annual revenue."""
    params = _build_params(req.scenario, req.overrides)

    sweeps = None
    if req.sweeps is not None:
        sweeps = [(sp.name or sp.field, sp.field, sp.low_pct, sp.high_pct) for sp in req.sweeps]

    try:
        result = run_sensitivity(params, sweeps)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "base_total": result.base_total,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_field": bar.param_field,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "total_at_low": bar.total_at_low,
                "total_at_high": bar.total_at_high,
                "delta_total": bar.delta_total,
            }
            for bar in result.bars
        ],
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = load_settings()
    setup_logging(settings.log_level)
    logger.info("starting API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(
        "bitfrost_engine.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
