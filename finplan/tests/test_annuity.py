from __future__ import annotations

import math
from math import isclose

import pytest

from finplan.core.annuity import future_value, interest_only_withdrawal, sustainable_withdrawal
from finplan.core.rates import simple_monthly_rate


@pytest.mark.parametrize("periods", [0, 1, 12, 360])
def test_zero_rate_without_contribution_keeps_principal(periods):
    assert future_value(25000.0, 0.0, 0.0, periods) == 25000.0


def test_zero_rate_accumulates_contributions_only():
    assert future_value(1000.0, 100.0, 0.0, 12) == 2200.0


def test_future_value_compounds_monthly():
    # 12% a year is 1% a month
    assert isclose(future_value(1000.0, 0.0, 12.0, 12), 1000.0 * 1.01**12)
    assert isclose(future_value(0.0, 100.0, 12.0, 2), 201.0)


def test_future_value_without_periods_is_the_principal():
    assert future_value(50000.0, 2000.0, 7.5, 0) == 50000.0


def test_sustainable_withdrawal_exhausts_principal():
    """Withdrawing W every month for n months leaves (almost) nothing."""
    principal, annual_rate, months = 350000.0, 6.0, 300
    withdrawal = sustainable_withdrawal(principal, annual_rate, months)
    rate = simple_monthly_rate(annual_rate)

    balance = principal
    for _ in range(months):
        balance = balance * (1 + rate) - withdrawal

    assert abs(balance) <= 1e-6 * principal


def test_sustainable_withdrawal_zero_rate_spreads_principal():
    assert sustainable_withdrawal(1200.0, 0.0, 12) == 100.0


def test_sustainable_withdrawal_without_periods_is_not_finite():
    assert not math.isfinite(sustainable_withdrawal(1000.0, 6.0, 0))
    assert not math.isfinite(sustainable_withdrawal(1000.0, 0.0, 0))


def test_interest_only_withdrawal_takes_the_monthly_interest():
    assert isclose(interest_only_withdrawal(120000.0, 12.0), 1200.0)
    assert interest_only_withdrawal(120000.0, 0.0) == 0.0


def test_interest_only_is_below_exhausting_withdrawal():
    principal = 500000.0
    assert interest_only_withdrawal(principal, 5.0) < sustainable_withdrawal(principal, 5.0, 360)
