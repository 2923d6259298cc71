"""Final amount of one deposit scenario under a ladder of monthly rates."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import Field

from finplan.core.rates import divide, geometric_annual_rate, growth_factor
from finplan.models import FrozenCamelModel


class RateScenario(FrozenCamelModel):
    monthly_rate: float  # percent per month
    annual_rate: Optional[float] = None  # percent per year; derived geometrically when missing

    def effective_annual_rate(self) -> float:
        if self.annual_rate is not None:
            return self.annual_rate
        return geometric_annual_rate(self.monthly_rate)


class DepositScenario(FrozenCamelModel):
    initial_deposit: float = 10000.0
    monthly_deposit: float = 1000.0
    months: int = Field(120, ge=0)


class RateComparisonRow(FrozenCamelModel):
    monthly_rate: float
    annual_rate: float
    final_amount: float


DEFAULT_RATE_SCENARIOS = [
    RateScenario(monthly_rate=0.2, annual_rate=2.44),
    RateScenario(monthly_rate=0.4, annual_rate=4.91),
    RateScenario(monthly_rate=0.6, annual_rate=7.44),
    RateScenario(monthly_rate=0.8, annual_rate=10.03),
    RateScenario(monthly_rate=1.0, annual_rate=12.68),
    RateScenario(monthly_rate=1.2, annual_rate=15.39),
]


def final_amount(scenario: DepositScenario, monthly_rate_pct: float) -> float:
    """Initial deposit plus monthly deposits compounded at the monthly rate itself."""
    rate = monthly_rate_pct / 100
    factor = growth_factor(rate, scenario.months)
    if rate == 0:
        return scenario.initial_deposit + scenario.monthly_deposit * scenario.months
    return scenario.initial_deposit * factor + scenario.monthly_deposit * divide(factor - 1, rate)


def compare_rates(
    scenario: Optional[DepositScenario] = None,
    rates: Optional[Sequence[RateScenario]] = None,
) -> List[RateComparisonRow]:
    scenario = scenario or DepositScenario()
    return [
        RateComparisonRow(
            monthly_rate=rate.monthly_rate,
            annual_rate=rate.effective_annual_rate(),
            final_amount=final_amount(scenario, rate.monthly_rate),
        )
        for rate in (DEFAULT_RATE_SCENARIOS if rates is None else rates)
    ]
