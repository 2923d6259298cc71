from __future__ import annotations

import logging
from typing import List

from finplan.core.annuity import future_value, interest_only_withdrawal
from finplan.core.rates import exact_real_annual_rate, real_annual_rate, simple_monthly_rate
from finplan.models import (
    FinancialInputs,
    PatrimonyEvolutionPoint,
    Phase,
    ProjectionReport,
    ProjectionResult,
)

logger = logging.getLogger(__name__)


def _floor_at_zero(value: float) -> float:
    # nan passes through untouched
    return 0.0 if value < 0 else value


def years_to_retirement(inputs: FinancialInputs) -> int:
    return max(0, inputs.retirement_age - inputs.current_age)


def years_in_retirement(inputs: FinancialInputs) -> int:
    return max(0, inputs.life_expectancy_age - inputs.retirement_age)


def inputs_real_rate(inputs: FinancialInputs) -> float:
    return real_annual_rate(inputs.expected_annual_return, inputs.annual_inflation)


def patrimony_at_retirement(inputs: FinancialInputs) -> float:
    return future_value(
        inputs.initial_capital,
        inputs.monthly_contribution,
        inputs_real_rate(inputs),
        years_to_retirement(inputs) * 12,
    )


def ideal_monthly_withdrawal(inputs: FinancialInputs) -> float:
    """Interest-only withdrawal on the patrimony reached at retirement."""
    return interest_only_withdrawal(patrimony_at_retirement(inputs), inputs_real_rate(inputs))


def with_derived_fields(inputs: FinancialInputs) -> FinancialInputs:
    """Return a new snapshot with the derived fields recomputed; the input is left untouched."""
    return inputs.model_copy(update={"ideal_monthly_withdrawal": ideal_monthly_withdrawal(inputs)})


def project_patrimony_evolution(inputs: FinancialInputs) -> List[PatrimonyEvolutionPoint]:
    """
    Walk forward one point per year, from current age to life expectancy.

    Conventions:
      - Accumulation (years 0..years_to_retirement, inclusive):
            patrimony = future_value(initial, contribution, real rate, year * 12),
            recomputed from scratch every year.
      - The last accumulation point (age == retirement_age) seeds the withdrawal phase.
      - Withdrawal (years 1..years_in_retirement):
            12 monthly steps of p = p * (1 + r) - withdrawal.
            The first time p drops below zero it is pinned to 0 for good.
      - Negative spans (ages out of order) run zero iterations, so the
        sequence always holds years_to_retirement + years_in_retirement + 1 points.
      - Retirement before the current age: withdrawal ages still count on from
        current_age, so they can run past life_expectancy_age (50/40/60 ends at 70).
    """
    real_rate = inputs_real_rate(inputs)
    monthly_rate = simple_monthly_rate(real_rate)

    evolution: List[PatrimonyEvolutionPoint] = []

    # ---------- Accumulation ----------
    for year in range(years_to_retirement(inputs) + 1):
        patrimony = future_value(
            inputs.initial_capital,
            inputs.monthly_contribution,
            real_rate,
            year * 12,
        )
        evolution.append(
            PatrimonyEvolutionPoint(
                age=inputs.current_age + year,
                year_index=year + 1,
                patrimony=patrimony,
                phase=Phase.ACCUMULATION,
            )
        )

    # ---------- Withdrawal ----------
    pivot = evolution[-1]
    current = pivot.patrimony
    depleted = False

    for year in range(1, years_in_retirement(inputs) + 1):
        for _month in range(12):
            if depleted:
                break
            current = current * (1 + monthly_rate) - inputs.monthly_withdrawal
            if current < 0:
                current = 0.0
                depleted = True

        evolution.append(
            PatrimonyEvolutionPoint(
                age=pivot.age + year,
                year_index=pivot.year_index + year,
                patrimony=_floor_at_zero(current),
                phase=Phase.WITHDRAWAL,
            )
        )

    return evolution


def summarize_projection(inputs: FinancialInputs) -> ProjectionResult:
    """
    Headline figures for a plan.

    final_patrimony runs the same monthly drawdown as the projector but stops
    as soon as the balance reaches zero (<= 0), and is never negative.
    """
    months_to_retirement = years_to_retirement(inputs) * 12
    months_in_retirement = years_in_retirement(inputs) * 12
    monthly_rate = simple_monthly_rate(inputs_real_rate(inputs))

    at_retirement = patrimony_at_retirement(inputs)

    final = at_retirement
    for _ in range(months_in_retirement):
        final = final * (1 + monthly_rate) - inputs.monthly_withdrawal
        if final <= 0:
            final = 0.0
            break

    return ProjectionResult(
        patrimony_at_retirement=at_retirement,
        final_patrimony=_floor_at_zero(final),
        total_contributions=inputs.monthly_contribution * months_to_retirement,
    )


def build_projection(inputs: FinancialInputs) -> ProjectionReport:
    """Derive the ideal withdrawal first, then feed the populated snapshot to the projector."""
    snapshot = with_derived_fields(inputs)
    real_rate = inputs_real_rate(snapshot)

    report = ProjectionReport(
        inputs=snapshot,
        real_annual_rate=real_rate,
        exact_real_annual_rate=exact_real_annual_rate(
            snapshot.expected_annual_return, snapshot.annual_inflation
        ),
        summary=summarize_projection(snapshot),
        evolution=project_patrimony_evolution(snapshot),
    )
    logger.debug(
        "projection ages %s->%s->%s real rate %.4f%%: %d points",
        snapshot.current_age,
        snapshot.retirement_age,
        snapshot.life_expectancy_age,
        real_rate,
        len(report.evolution),
    )
    return report


__all__ = [
    "years_to_retirement",
    "years_in_retirement",
    "inputs_real_rate",
    "patrimony_at_retirement",
    "ideal_monthly_withdrawal",
    "with_derived_fields",
    "project_patrimony_evolution",
    "summarize_projection",
    "build_projection",
]
