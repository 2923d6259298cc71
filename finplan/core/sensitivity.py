"""Sensitivity grids: contribution amounts x retirement ages."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from finplan.core.annuity import future_value, interest_only_withdrawal, sustainable_withdrawal
from finplan.core.projection import inputs_real_rate
from finplan.models import FinancialInputs, SensitivityCell, SensitivityGrid

DEFAULT_BASE_CONTRIBUTION = 2000.0
DEFAULT_CONTRIBUTION_DELTAS = [-1000.0, -500.0, 0.0, 500.0, 1000.0, 1500.0]
DEFAULT_RETIREMENT_AGES = [55, 60, 65, 70]

CellFormula = Callable[[FinancialInputs, float, int], float]


def _patrimony_for(inputs: FinancialInputs, monthly_contribution: float, retirement_age: int) -> float:
    months_to_retirement = (retirement_age - inputs.current_age) * 12
    return future_value(
        inputs.initial_capital,
        monthly_contribution,
        inputs_real_rate(inputs),
        months_to_retirement,
    )


def preserving_withdrawal(inputs: FinancialInputs, monthly_contribution: float, retirement_age: int) -> float:
    """Monthly amount that leaves the principal intact, in real terms."""
    return interest_only_withdrawal(
        _patrimony_for(inputs, monthly_contribution, retirement_age),
        inputs_real_rate(inputs),
    )


def exhausting_withdrawal(inputs: FinancialInputs, monthly_contribution: float, retirement_age: int) -> float:
    """Monthly amount that runs the principal down to zero at life expectancy."""
    months_in_retirement = (inputs.life_expectancy_age - retirement_age) * 12
    return sustainable_withdrawal(
        _patrimony_for(inputs, monthly_contribution, retirement_age),
        inputs_real_rate(inputs),
        months_in_retirement,
    )


def build_grid(
    kind: str,
    inputs: FinancialInputs,
    formula: CellFormula,
    base_contribution: float,
    contribution_deltas: Sequence[float],
    retirement_ages: Sequence[int],
) -> SensitivityGrid:
    contributions = [base_contribution + delta for delta in contribution_deltas]
    cells: List[SensitivityCell] = []
    for contribution in contributions:
        for age in retirement_ages:
            cells.append(
                SensitivityCell(
                    row_parameter=contribution,
                    column_parameter=age,
                    result_value=formula(inputs, contribution, age),
                )
            )
    return SensitivityGrid(
        kind=kind,
        row_parameters=contributions,
        column_parameters=[float(age) for age in retirement_ages],
        cells=cells,
    )


def preserving_patrimony_grid(
    inputs: FinancialInputs,
    base_contribution: Optional[float] = None,
    contribution_deltas: Optional[Sequence[float]] = None,
    retirement_ages: Optional[Sequence[int]] = None,
) -> SensitivityGrid:
    return build_grid(
        "preserving",
        inputs,
        preserving_withdrawal,
        DEFAULT_BASE_CONTRIBUTION if base_contribution is None else base_contribution,
        DEFAULT_CONTRIBUTION_DELTAS if contribution_deltas is None else contribution_deltas,
        DEFAULT_RETIREMENT_AGES if retirement_ages is None else retirement_ages,
    )


def exhausting_patrimony_grid(
    inputs: FinancialInputs,
    base_contribution: Optional[float] = None,
    contribution_deltas: Optional[Sequence[float]] = None,
    retirement_ages: Optional[Sequence[int]] = None,
) -> SensitivityGrid:
    return build_grid(
        "exhausting",
        inputs,
        exhausting_withdrawal,
        DEFAULT_BASE_CONTRIBUTION if base_contribution is None else base_contribution,
        DEFAULT_CONTRIBUTION_DELTAS if contribution_deltas is None else contribution_deltas,
        DEFAULT_RETIREMENT_AGES if retirement_ages is None else retirement_ages,
    )
