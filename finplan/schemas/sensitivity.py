"""Data contracts for the sensitivity and rate-comparison endpoints."""

from typing import List, Optional

from pydantic import Field

from finplan.core.comparator import RateComparisonRow, RateScenario
from finplan.models import CamelModel, FinancialInputs, SensitivityGrid


class SensitivityRequest(CamelModel):
    """Plan assumptions plus optional overrides for the grid axes."""

    inputs: FinancialInputs
    base_contribution: Optional[float] = Field(
        None,
        description="Contribution the deltas are applied to (defaults to 2000).",
    )
    contribution_deltas: Optional[List[float]] = Field(None, min_length=1)
    retirement_ages: Optional[List[int]] = Field(None, min_length=1)


class SensitivityResponse(CamelModel):
    preserving: SensitivityGrid
    exhausting: SensitivityGrid


class ComparatorRequest(CamelModel):
    initial_deposit: float = 10000.0
    monthly_deposit: float = 1000.0
    months: int = Field(120, ge=0, le=1200)
    scenarios: Optional[List[RateScenario]] = Field(None, min_length=1)


class ComparatorResponse(CamelModel):
    rows: List[RateComparisonRow]
