"""
Rate conversions used across the engine.

Two conventions coexist on purpose and must not be unified:
  - simple_monthly_rate (annual / 12) feeds the projector, future value and
    sensitivity grids;
  - geometric_monthly_rate ((1 + annual) ** (1/12) - 1) feeds the financing
    and consorcio simulators.
Likewise real_annual_rate is the approximate Fisher form used by every
calculation, while exact_real_annual_rate is only a display figure.

Nothing here raises on numeric domain problems: results follow IEEE float
semantics (inf / nan) so callers can validate ranges themselves.
"""

from __future__ import annotations

import math


def divide(numerator: float, denominator: float) -> float:
    """Float division that returns inf/nan on a zero denominator instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def growth_factor(rate: float, periods: float) -> float:
    """(1 + rate) ** periods, with overflow mapped to inf and complex results to nan."""
    try:
        result = (1 + rate) ** periods
    except OverflowError:
        return math.inf
    except ZeroDivisionError:
        # 0 ** negative
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def real_annual_rate(nominal_annual_pct: float, inflation_annual_pct: float) -> float:
    return divide(nominal_annual_pct - inflation_annual_pct, 1 + inflation_annual_pct / 100) * 100


def exact_real_annual_rate(nominal_annual_pct: float, inflation_annual_pct: float) -> float:
    return (divide(1 + nominal_annual_pct / 100, 1 + inflation_annual_pct / 100) - 1) * 100


def simple_monthly_rate(annual_pct: float) -> float:
    """Annual percentage to a monthly decimal rate by plain division."""
    return annual_pct / 100 / 12


def geometric_monthly_rate(annual_pct: float) -> float:
    """Annual percentage to the equivalent compounded monthly decimal rate."""
    return growth_factor(annual_pct / 100, 1 / 12) - 1


def geometric_annual_rate(monthly_pct: float) -> float:
    """Monthly percentage to the equivalent compounded annual percentage."""
    return (growth_factor(monthly_pct / 100, 12) - 1) * 100
