"""Data contracts for ledger reports."""

import datetime as dt
from typing import List, Optional

from pydantic import Field, model_validator

from finplan.domain.ledger import (
    CategoryTotal,
    LedgerSummary,
    ReportMode,
    Transaction,
    WaterfallPoint,
)
from finplan.models import CamelModel


class LedgerReportRequest(CamelModel):
    """
    Transactions to report on and the period to keep.

    Either month + year, or a start/end range; with neither, every
    transaction is reported.
    """

    transactions: List[Transaction] = Field(default_factory=list)
    month: Optional[int] = Field(None, ge=1, le=12)
    year: Optional[int] = None
    start: Optional[dt.date] = None
    end: Optional[dt.date] = None
    mode: ReportMode = ReportMode.ALL

    @model_validator(mode="after")
    def ensure_period(self) -> "LedgerReportRequest":
        if (self.month is None) != (self.year is None):
            raise ValueError("month and year must be given together")
        if self.month is not None and (self.start is not None or self.end is not None):
            raise ValueError("use either month/year or start/end, not both")
        return self


class LedgerReportResponse(CamelModel):
    summary: LedgerSummary
    categories: List[CategoryTotal]
    waterfall: List[WaterfallPoint]
    total_label: str
    final_value: float


class CategoryListResponse(CamelModel):
    income: List[str]
    expense: List[str]
