"""BitFrost Revenue Engine: Streamlit dashboard.

Layout: four tabs (Bear | Base | Bull | Comparison).  Each scenario tab
holds its own working parameters, seeded from the preset, and recomputes
metrics, charts and the breakdown table on every edit.

Run with:
    streamlit run src/bitfrost_engine/dashboard/app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from bitfrost_engine.config import (
    SCENARIO_LABELS,
    SCENARIO_NAMES,
    ScenarioParams,
    get_scenario_defaults,
    load_settings,
)
from bitfrost_engine.dashboard.charts import (
    breakdown_rows,
    comparison_frame,
    forecast_bar,
    stream_pie,
    tornado_chart,
)
from bitfrost_engine.engine.comparison import compare_scenarios
from bitfrost_engine.engine.revenue import calculate, forecast_from_result
from bitfrost_engine.engine.sensitivity import run_sensitivity
from bitfrost_engine.formatting import format_currency, format_percentage
from bitfrost_engine.logging_setup import setup_logging

logger = logging.getLogger(__name__)

_SETTINGS = load_settings()
setup_logging(_SETTINGS.log_level)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="BitFrost Revenue Engine", page_icon="📊", layout="wide")
st.title("BitFrost Revenue Engine")
st.caption("Annualized revenue projections: clearing, funding arbitrage, liquidations and hedging.")

# (label, field, step, format)
_INPUTS: dict[str, list[tuple[str, str, float, str]]] = {
    "Volumes & Fees": [
        ("Daily Volume", "daily_volume", 1e8, "%.0f"),
        ("Internal Match Ratio", "internal_match_ratio", 0.01, "%.2f"),
        ("Clearing Fee (bps)", "clearing_fee_bps", 0.1, "%.2f"),
        ("Netting Fee (bps)", "netting_fee_bps", 0.1, "%.2f"),
    ],
    "Funding Arbitrage": [
        ("HL Funding Rate (%)", "hl_funding_rate_pct", 0.5, "%.2f"),
        ("Borrow Rate (%)", "arch_borrow_rate_pct", 0.1, "%.2f"),
        ("Friction Cost (bps)", "friction_cost_bps", 0.1, "%.2f"),
        ("Equity", "equity", 1e7, "%.0f"),
        ("Leverage", "leverage", 0.5, "%.1f"),
    ],
    "Liquidations & Hedging": [
        ("Monthly Liquidations", "monthly_liquidations", 1e7, "%.0f"),
        ("Liquidation Fee (%)", "liquidation_fee_pct", 0.1, "%.2f"),
        ("Daily Hedge", "daily_hedge", 1e7, "%.0f"),
        ("Hedge Efficiency (bps)", "hedge_efficiency_bps", 0.1, "%.2f"),
    ],
}


def _param_inputs(name: str) -> ScenarioParams:
    """Render the parameter form for one tab and return its working params."""
    defaults = get_scenario_defaults(name)
    values: dict[str, float] = {}
    cols = st.columns(len(_INPUTS))
    for col, (group, fields) in zip(cols, _INPUTS.items()):
        with col:
            st.markdown(f"**{group}**")
            for label, field, step, fmt in fields:
                values[field] = st.number_input(
                    label,
                    value=float(getattr(defaults, field)),
                    step=step,
                    format=fmt,
                    key=f"{name}_{field}",
                )
    return ScenarioParams(**values)


def _render_scenario(name: str) -> ScenarioParams:
    st.subheader(SCENARIO_LABELS[name])
    with st.expander("Parameters", expanded=True):
        params = _param_inputs(name)

    result = calculate(params)
    months = forecast_from_result(result)

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Annual Revenue", format_currency(result.total))
    m2.metric("Monthly Average", format_currency(result.monthly_avg))
    m3.metric("Funding ROE", format_percentage(result.funding_roe))
    m4.metric("Funding Spread", format_percentage(result.funding_spread * 100))

    if result.funding_spread < 0:
        st.warning("Funding spread is negative: the arbitrage leg loses money at these rates.")

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**Revenue Mix**")
        st.plotly_chart(stream_pie(result), use_container_width=True)
    with c2:
        st.markdown("**Monthly Forecast**")
        st.plotly_chart(forecast_bar(months), use_container_width=True)

    st.markdown("**Revenue Breakdown**")
    st.dataframe(breakdown_rows(result), use_container_width=True, hide_index=True)

    with st.expander("Sensitivity"):
        st.plotly_chart(tornado_chart(run_sensitivity(params)), use_container_width=True)

    return params


# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------
_tab_names = [*SCENARIO_NAMES, "comparison"]
# Streamlit has no default-tab argument, so the configured scenario goes first.
_tab_names.remove(_SETTINGS.default_scenario)
_tab_names.insert(0, _SETTINGS.default_scenario)

tabs = st.tabs([SCENARIO_LABELS.get(n, "Comparison") for n in _tab_names])
working: dict[str, ScenarioParams] = {}

for tab, name in zip(tabs, _tab_names):
    if name == "comparison":
        continue
    with tab:
        working[name] = _render_scenario(name)

with tabs[_tab_names.index("comparison")]:
    st.subheader("Scenario Comparison")
    comparison = compare_scenarios({n: working[n] for n in SCENARIO_NAMES})
    st.dataframe(comparison_frame(comparison), use_container_width=True)

st.caption("BitFrost Revenue Engine v1.0")
