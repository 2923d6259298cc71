from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class InvestmentProfile(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class Phase(str, Enum):
    ACCUMULATION = "accumulation"
    WITHDRAWAL = "withdrawal"


class FinancialInputs(FrozenCamelModel):
    """
    Snapshot of the planning assumptions.

    Rates are percentages (9 means 9%), money is in a single currency unit.
    Age ordering is deliberately not validated here: the engine turns
    out-of-order ages into degenerate (empty or zero) results instead.
    ideal_monthly_withdrawal is derived; see core.projection.with_derived_fields.
    """

    name: str = ""
    current_age: int
    retirement_age: int
    life_expectancy_age: int
    investment_profile: InvestmentProfile = InvestmentProfile.MODERATE
    expected_annual_return: float
    annual_inflation: float
    initial_capital: float = 0.0
    monthly_contribution: float = 0.0
    monthly_withdrawal: float = 0.0
    ideal_monthly_withdrawal: float = 0.0


class PatrimonyEvolutionPoint(FrozenCamelModel):
    age: int
    year_index: int
    patrimony: float
    phase: Phase


class ProjectionResult(FrozenCamelModel):
    patrimony_at_retirement: float
    final_patrimony: float
    total_contributions: float


class ProjectionReport(FrozenCamelModel):
    inputs: FinancialInputs
    real_annual_rate: float
    # exact Fisher ratio, shown next to the inputs only
    exact_real_annual_rate: float
    summary: ProjectionResult
    evolution: List[PatrimonyEvolutionPoint]


class SensitivityCell(FrozenCamelModel):
    row_parameter: float
    column_parameter: float
    result_value: float


class SensitivityGrid(FrozenCamelModel):
    """Row-major cells over row_parameters x column_parameters."""

    kind: str
    row_parameters: List[float]
    column_parameters: List[float]
    cells: List[SensitivityCell]


__all__ = [
    "CamelModel",
    "FrozenCamelModel",
    "InvestmentProfile",
    "Phase",
    "FinancialInputs",
    "PatrimonyEvolutionPoint",
    "ProjectionResult",
    "ProjectionReport",
    "SensitivityCell",
    "SensitivityGrid",
]
