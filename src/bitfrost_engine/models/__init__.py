"""Result models — engine output contracts."""

from bitfrost_engine.models.results import (
    MonthlyForecastPoint,
    RevenueResult,
    ScenarioComparison,
    ScenarioSummary,
    StreamName,
    StreamShare,
)

__all__ = [
    "MonthlyForecastPoint",
    "RevenueResult",
    "ScenarioComparison",
    "ScenarioSummary",
    "StreamName",
    "StreamShare",
]
