"""BitFrost revenue engine: annual revenue projections for a clearing operation."""

from bitfrost_engine.config import (
    SCENARIO_NAMES,
    ScenarioParams,
    UnknownScenarioError,
    get_scenario_defaults,
)
from bitfrost_engine.engine import (
    calculate,
    compare_scenarios,
    forecast_from_result,
    generate_monthly_forecast,
)
from bitfrost_engine.formatting import format_currency, format_percentage
from bitfrost_engine.models import MonthlyForecastPoint, RevenueResult

__version__ = "1.0.0"

__all__ = [
    "SCENARIO_NAMES",
    "ScenarioParams",
    "UnknownScenarioError",
    "get_scenario_defaults",
    "calculate",
    "compare_scenarios",
    "forecast_from_result",
    "generate_monthly_forecast",
    "format_currency",
    "format_percentage",
    "MonthlyForecastPoint",
    "RevenueResult",
]
