"""Tests for formatting.py: K / M / B currency and percentage strings."""

from __future__ import annotations

import pytest

from bitfrost_engine.config import get_scenario_defaults
from bitfrost_engine.engine.revenue import calculate
from bitfrost_engine.formatting import format_currency, format_percentage


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "$0.00"),
        (999.5, "$999.50"),
        (1_000, "$1.00K"),
        (12_346, "$12.35K"),
        (1_000_000, "$1.00M"),
        (122_954_000, "$122.95M"),
        (1_000_000_000, "$1.00B"),
        (2_500_000_000_000, "$2500.00B"),
        (-1_015_000, "$-1015000.00"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_percentage():
    assert format_percentage(43.904) == "43.90%"
    assert format_percentage(-2.03) == "-2.03%"
    assert format_percentage(0) == "0.00%"


def test_golden_headlines():
    """Headline strings as the dashboard shows them for each preset."""
    base = calculate(get_scenario_defaults("base"))
    assert format_currency(base.total) == "$122.95M"
    assert format_currency(base.monthly_avg) == "$10.25M"
    assert format_percentage(base.funding_roe) == "43.90%"
    assert format_percentage(base.funding_spread * 100) == "5.49%"

    bear = calculate(get_scenario_defaults("bear"))
    assert format_currency(bear.total) == "$10.66M"
    assert format_percentage(bear.funding_roe) == "-2.03%"

    bull = calculate(get_scenario_defaults("bull"))
    assert format_currency(bull.total) == "$816.31M"
    assert format_percentage(bull.funding_roe) == "275.90%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_125, "$1.13K"),
        (1_125_000, "$1.13M"),
        (1_125_000_000, "$1.13B"),
        (0.125, "$0.13"),
        (-0.125, "$-0.13"),
        (2.675, "$2.67"),
    ],
)
def test_format_currency_ties_round_away_from_zero(value, expected):
    # 2.675 is stored just below the tie, so it rounds down.
    assert format_currency(value) == expected


def test_format_percentage_ties():
    assert format_percentage(0.125) == "0.13%"
    assert format_percentage(-0.125) == "-0.13%"
    assert format_percentage(1.005) == "1.00%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (float("nan"), "$NaN"),
        (float("inf"), "$InfinityB"),
        (float("-inf"), "$-Infinity"),
        (-0.0, "$0.00"),
        (-0.001, "$-0.00"),
    ],
)
def test_format_currency_special_values(value, expected):
    assert format_currency(value) == expected


def test_format_percentage_special_values():
    assert format_percentage(float("nan")) == "NaN%"
    assert format_percentage(float("-inf")) == "-Infinity%"
    assert format_percentage(-0.0) == "0.00%"


def test_format_currency_huge_value_prints_in_full():
    assert format_currency(1e30) == "$1000000000000000000000.00B"
