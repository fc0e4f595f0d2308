"""Chart and table builders for the dashboard.

Kept free of Streamlit so they can be built and inspected in tests.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from bitfrost_engine.engine.comparison import chart_streams, compute_revenue_breakdown
from bitfrost_engine.engine.sensitivity import SensitivityResult
from bitfrost_engine.formatting import format_currency, format_percentage
from bitfrost_engine.models.results import MonthlyForecastPoint, RevenueResult, ScenarioComparison

STREAM_COLORS = ["#208480", "#32b8c6", "#f38ba8", "#fab387"]

_LAYOUT = dict(
    height=320,
    margin=dict(l=20, r=20, t=30, b=20),
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Inter", size=11),
)


def stream_pie(result: RevenueResult) -> go.Figure:
    """Revenue mix pie.  Negative funding shows as an empty slice."""
    labels, values = zip(*chart_streams(result))
    fig = go.Figure(go.Pie(
        labels=list(labels),
        values=list(values),
        marker=dict(colors=STREAM_COLORS),
        sort=False,
    ))
    fig.update_layout(**_LAYOUT)
    return fig


def forecast_frame(points: list[MonthlyForecastPoint]) -> pd.DataFrame:
    """Forecast points as a DataFrame indexed by month."""
    return pd.DataFrame([p.model_dump() for p in points]).set_index("month")


def forecast_bar(points: list[MonthlyForecastPoint]) -> go.Figure:
    """Stacked monthly bars, one trace per stream."""
    df = forecast_frame(points)
    fig = go.Figure()
    for column, color in zip(("clearing", "funding", "liquidations", "hedging"), STREAM_COLORS):
        fig.add_trace(go.Bar(x=df.index, y=df[column], name=column.title(), marker_color=color))
    fig.update_layout(barmode="stack", xaxis_title="Month", yaxis_title="Revenue", **_LAYOUT)
    return fig


def breakdown_rows(result: RevenueResult) -> list[dict[str, str]]:
    """Breakdown table rows including the TOTAL line."""
    rows = [
        {
            "Stream": r.label,
            "Annual": format_currency(r.annual),
            "% of Total": format_percentage(r.pct_of_total),
        }
        for r in compute_revenue_breakdown(result)
    ]
    rows.append({"Stream": "TOTAL", "Annual": format_currency(result.total), "% of Total": "100%"})
    return rows


def comparison_frame(comparison: ScenarioComparison) -> pd.DataFrame:
    """Metric × scenario table, formatted for display."""
    columns = {
        e.label: {
            "Daily Volume": format_currency(e.daily_volume),
            "Annual Revenue": format_currency(e.total),
            "Monthly Average": format_currency(e.monthly_avg),
            "Funding Spread": format_percentage(e.funding_spread_pct),
            "Funding ROE": format_percentage(e.funding_roe),
        }
        for e in comparison.entries
    }
    df = pd.DataFrame(columns)
    df.index.name = "Metric"
    return df


def tornado_chart(result: SensitivityResult) -> go.Figure:
    """Horizontal tornado bars around the base total, biggest swing on top."""
    bars = list(reversed(result.bars))
    names = [b.param_name for b in bars]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=names,
        x=[b.total_at_low - result.base_total for b in bars],
        orientation="h",
        name="Low",
        marker_color="#f38ba8",
    ))
    fig.add_trace(go.Bar(
        y=names,
        x=[b.total_at_high - result.base_total for b in bars],
        orientation="h",
        name="High",
        marker_color="#32b8c6",
    ))
    fig.update_layout(barmode="overlay", xaxis_title="Δ annual revenue", **_LAYOUT)
    return fig
