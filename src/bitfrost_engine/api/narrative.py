"""Narrative generator — plain-English interpretation of revenue results.

Converts a ``RevenueResult`` (plus the parameters behind it) into a
structured text block: headline, stream breakdown, funding arbitrage
health, and flags worth a second look.
"""

from __future__ import annotations

from bitfrost_engine.config.scenario import ScenarioParams
from bitfrost_engine.engine.comparison import compute_revenue_breakdown
from bitfrost_engine.formatting import format_currency, format_percentage
from bitfrost_engine.models.results import RevenueResult, ScenarioComparison


def generate_narrative(label: str, params: ScenarioParams, result: RevenueResult) -> str:
    """Generate a plain-English narrative for one scenario.

    Returns a structured text block covering:
      1. Headline revenue
      2. Stream breakdown (largest first)
      3. Funding arbitrage
      4. Flags
    """
    sections: list[str] = []

    # ── 1. Headline ──
    sections.append("=" * 60)
    sections.append(f"{label.upper()}: REVENUE SUMMARY")
    sections.append("=" * 60)
    sections.append(
        f"Annual revenue: {format_currency(result.total)}\n"
        f"Monthly average: {format_currency(result.monthly_avg)}\n"
        f"Daily average: {format_currency(result.daily_avg)}"
    )

    # ── 2. Breakdown ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("REVENUE STREAMS")
    sections.append("=" * 60)
    rows = sorted(compute_revenue_breakdown(result), key=lambda r: r.annual, reverse=True)
    for row in rows:
        sections.append(
            f"  {row.label:20s}  {format_currency(row.annual):>12s}  ({format_percentage(row.pct_of_total)})"
        )

    # ── 3. Funding arbitrage ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("FUNDING ARBITRAGE")
    sections.append("=" * 60)
    sections.append(
        f"Deployed notional: {format_currency(result.deployed_notional)} "
        f"({params.leverage:.1f}x on {format_currency(params.equity)} equity)\n"
        f"Funding spread: {format_percentage(result.funding_spread * 100)}\n"
        f"Funding ROE: {format_percentage(result.funding_roe)}"
    )

    # ── 4. Flags ──
    flags: list[str] = []
    if result.funding_spread < 0:
        flags.append(
            "Funding spread is NEGATIVE: borrow cost plus friction exceeds the funding rate, "
            f"so the arbitrage loses {format_currency(abs(result.funding))} a year. "
            "More leverage makes this worse, not better."
        )
    if result.total < 0:
        flags.append("Total revenue is NEGATIVE under these assumptions.")
    if not 0 <= params.internal_match_ratio <= 1:
        flags.append(
            f"Internal match ratio {params.internal_match_ratio:.2f} is outside 0–1."
        )

    if flags:
        sections.append("")
        sections.append("=" * 60)
        sections.append("FLAGS")
        sections.append("=" * 60)
        for i, flag in enumerate(flags, 1):
            sections.append(f"  {i}. {flag}")

    return "\n".join(sections)


def generate_comparison_narrative(comparison: ScenarioComparison) -> str:
    """Table-style comparison across scenarios, in the comparison's order."""
    if not comparison.entries:
        return "No scenarios to compare."

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("SCENARIO COMPARISON")
    sections.append("=" * 60)

    header = f"{'Scenario':12s}  {'Annual':>10s}  {'Monthly':>10s}  {'Spread':>8s}  {'ROE':>8s}"
    sections.append(header)
    sections.append("-" * len(header))
    for e in comparison.entries:
        sections.append(
            f"{e.label:12s}  {format_currency(e.total):>10s}  {format_currency(e.monthly_avg):>10s}  "
            f"{format_percentage(e.funding_spread_pct):>8s}  {format_percentage(e.funding_roe):>8s}"
        )

    if len(comparison.entries) > 1:
        ranked = sorted(comparison.entries, key=lambda e: e.total)
        low, high = ranked[0], ranked[-1]
        sections.append(
            f"\nRange: {format_currency(low.total)} ({low.label}) to "
            f"{format_currency(high.total)} ({high.label})."
        )

    return "\n".join(sections)
