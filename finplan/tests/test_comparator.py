from __future__ import annotations

from math import isclose

import pytest

from finplan.core.comparator import (
    DEFAULT_RATE_SCENARIOS,
    DepositScenario,
    RateScenario,
    compare_rates,
    final_amount,
)


def test_default_table_has_one_row_per_rate():
    rows = compare_rates()
    assert [row.monthly_rate for row in rows] == [0.2, 0.4, 0.6, 0.8, 1.0, 1.2]
    assert [row.annual_rate for row in rows] == [2.44, 4.91, 7.44, 10.03, 12.68, 15.39]
    amounts = [row.final_amount for row in rows]
    assert amounts == sorted(amounts)


def test_final_amount_compounds_at_the_monthly_rate():
    scenario = DepositScenario()
    growth = 1.01**120
    expected = 10000 * growth + 1000 * (growth - 1) / 0.01
    assert isclose(final_amount(scenario, 1.0), expected)


def test_zero_rate_is_the_sum_of_deposits():
    assert final_amount(DepositScenario(), 0.0) == 130000


def test_missing_annual_rate_is_derived_geometrically():
    rows = compare_rates(
        DepositScenario(initial_deposit=0, monthly_deposit=100, months=12),
        [RateScenario(monthly_rate=1.0)],
    )
    assert rows[0].annual_rate == pytest.approx(12.6825, abs=1e-4)
    assert len(DEFAULT_RATE_SCENARIOS) == 6


def test_no_months_returns_initial_deposit():
    scenario = DepositScenario(initial_deposit=5000, monthly_deposit=700, months=0)
    assert final_amount(scenario, 0.8) == 5000
