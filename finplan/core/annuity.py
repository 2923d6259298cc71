"""Future value and withdrawal formulas over a simple monthly rate."""

from __future__ import annotations

from finplan.core.rates import divide, growth_factor, simple_monthly_rate


def future_value(
    present_value: float,
    periodic_contribution: float,
    annual_rate_pct: float,
    period_count: float,
) -> float:
    """
    Compounded value of a principal plus equal end-of-period contributions.

    FV = PV * (1 + r)^n + PMT * ((1 + r)^n - 1) / r, with r = annual / 12.
    A zero rate returns the limit PV + PMT * n.
    """
    rate = simple_monthly_rate(annual_rate_pct)
    factor = growth_factor(rate, period_count)
    if rate == 0:
        return present_value * factor + periodic_contribution * period_count
    return present_value * factor + periodic_contribution * divide(factor - 1, rate)


def sustainable_withdrawal(principal: float, annual_rate_pct: float, period_count: float) -> float:
    """
    Constant withdrawal that exhausts principal after period_count periods.

    W = P * r(1 + r)^n / ((1 + r)^n - 1); a zero rate returns P / n.
    period_count == 0 gives inf/nan rather than an error.
    """
    rate = simple_monthly_rate(annual_rate_pct)
    if rate == 0:
        return divide(principal, period_count)
    factor = growth_factor(rate, period_count)
    return principal * divide(rate * factor, factor - 1)


def interest_only_withdrawal(principal: float, annual_rate_pct: float) -> float:
    """Monthly amount that keeps the principal intact: only the interest is taken."""
    return principal * simple_monthly_rate(annual_rate_pct)
