"""Discounted cash flow valuation."""

from __future__ import annotations

import math

from dcfvalue.condition import Condition

# The terminal phase is anchored on earnings after this many years of growth.
_ANCHOR_YEARS = 10


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _growth_phase_value(
    earnings: float, growth_rate: float, discount_rate: float, years: int
) -> float:
    return sum(
        earnings * (1 + growth_rate) ** year / (1 + discount_rate) ** year
        for year in range(1, years + 1)
    )


def _terminal_phase_value(
    earnings: float,
    growth_rate: float,
    terminal_growth_rate: float,
    discount_rate: float,
    growth_years: int,
    years: int,
) -> float:
    anchored = earnings * (1 + growth_rate) ** _ANCHOR_YEARS
    return sum(
        anchored
        * (1 + terminal_growth_rate) ** (year - _ANCHOR_YEARS)
        / (1 + discount_rate) ** year
        for year in range(growth_years + 1, years + 1)
    )


def intrinsic_value(condition: Condition) -> float:
    """Return the present value of future earnings, rounded to a whole number."""
    value = _growth_phase_value(
        condition.current_earnings,
        condition.growth_rate,
        condition.discount_rate,
        condition.growth_years,
    )
    value += _terminal_phase_value(
        condition.current_earnings,
        condition.growth_rate,
        condition.terminal_growth_rate,
        condition.discount_rate,
        condition.growth_years,
        condition.years,
    )
    return _round_half_away(value)