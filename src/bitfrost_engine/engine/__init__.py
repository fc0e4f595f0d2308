"""Engine — deterministic revenue computation and scenario analysis."""

from bitfrost_engine.engine.revenue import (
    calculate,
    forecast_from_result,
    generate_monthly_forecast,
)
from bitfrost_engine.engine.comparison import (
    chart_streams,
    compare_scenarios,
    compute_revenue_breakdown,
    summarize_scenario,
)
from bitfrost_engine.engine.sensitivity import SensitivityResult, TornadoBar, run_sensitivity

__all__ = [
    "calculate",
    "forecast_from_result",
    "generate_monthly_forecast",
    "chart_streams",
    "compare_scenarios",
    "compute_revenue_breakdown",
    "summarize_scenario",
    "run_sensitivity",
    "SensitivityResult",
    "TornadoBar",
]
