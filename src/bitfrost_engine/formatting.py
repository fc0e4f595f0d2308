"""Display formatting for currency and percentages.

Values below $1K (including all negative values) are printed in full with
two decimals; larger values are abbreviated to K / M / B.

Two-decimal rounding works on the float's exact binary value and sends
ties away from zero, so 1.125 → '1.13' and 0.125 → '0.13'.  NaN and
infinities print as 'NaN' / 'Infinity' / '-Infinity'; negative zero
prints as '0.00'.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_CENT = Decimal("0.01")
# Wide enough for the full integer part of any finite float.
_WIDE = Context(prec=400)


def _to_fixed(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0
    return str(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP, context=_WIDE))


def format_currency(value: float) -> str:
    if value >= 1_000_000_000:
        return f"${_to_fixed(value / 1_000_000_000)}B"
    if value >= 1_000_000:
        return f"${_to_fixed(value / 1_000_000)}M"
    if value >= 1_000:
        return f"${_to_fixed(value / 1_000)}K"
    return f"${_to_fixed(value)}"


def format_percentage(value: float) -> str:
    """``value`` is already in percent: 12.5 → '12.50%'."""
    return f"{_to_fixed(value)}%"
