from __future__ import annotations

import datetime as dt
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from pydantic import Field, ValidationInfo, field_validator

from finplan.models import FrozenCamelModel

UNCATEGORIZED = "Sem categoria"


def category_sort_key(name: str) -> str:
    """Case- and accent-insensitive ordering, so "Água" sorts with the A's."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


INCOME_CATEGORIES = sorted(["Dividendos", "Freelance", "Salário"], key=category_sort_key)
EXPENSE_CATEGORIES = sorted(
    [
        "Alimentação",
        "Combustível",
        "Compras",
        "Educação",
        "Lazer",
        "Moradia",
        "Outros",
        "Saúde",
        "Transporte",
    ],
    key=category_sort_key,
)


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ReportMode(str, Enum):
    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(FrozenCamelModel):
    """Ledger line. amount is signed: expenses are stored negative."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    date: dt.date
    type: TransactionType
    amount: float
    category: str = ""
    description: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def sign_from_type(cls, amount: float, info: ValidationInfo) -> float:
        # type is declared before amount, so it is already validated here
        transaction_type = info.data.get("type")
        if transaction_type == TransactionType.EXPENSE:
            return -abs(amount)
        if transaction_type == TransactionType.INCOME:
            return abs(amount)
        return amount

    @classmethod
    def create(
        cls,
        when: dt.date,
        transaction_type: TransactionType,
        amount: float,
        category: str,
        description: Optional[str] = None,
    ) -> "Transaction":
        """Build a transaction; the sign of amount always follows its type."""
        return cls(date=when, type=transaction_type, amount=amount, category=category, description=description)


class LedgerSummary(FrozenCamelModel):
    total_income: float
    total_expenses: float
    balance: float


class CategoryTotal(FrozenCamelModel):
    category: str
    total: float


class WaterfallPoint(FrozenCamelModel):
    name: str
    start: float
    value: float
    end: float
    kind: str  # "category" or "total"
    raw_amount: float


@dataclass
class WaterfallSeries:
    points: List[WaterfallPoint]
    final_value: float
    total_label: str


TOTAL_LABELS = {
    ReportMode.INCOME: "Total Receitas",
    ReportMode.EXPENSE: "Total Despesas",
    ReportMode.ALL: "Saldo Final",
}


def filter_by_period(transactions: Iterable[Transaction], month: int, year: int) -> List[Transaction]:
    """Transactions dated in the given calendar month (1-12) of year."""
    return [t for t in transactions if t.date.month == month and t.date.year == year]


def filter_by_range(
    transactions: Iterable[Transaction],
    start: Optional[dt.date],
    end: Optional[dt.date],
) -> List[Transaction]:
    """Inclusive date range. With either bound missing nothing is filtered out."""
    if start is None or end is None:
        return list(transactions)
    return [t for t in transactions if start <= t.date <= end]


def summarize_ledger(transactions: Iterable[Transaction]) -> LedgerSummary:
    total_income = 0.0
    total_expenses = 0.0
    for transaction in transactions:
        if transaction.amount > 0:
            total_income += transaction.amount
        elif transaction.amount < 0:
            total_expenses += abs(transaction.amount)
    return LedgerSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )


def _matches(transaction: Transaction, mode: ReportMode) -> bool:
    if mode == ReportMode.INCOME:
        return transaction.amount > 0
    if mode == ReportMode.EXPENSE:
        return transaction.amount < 0
    return True


def category_totals(
    transactions: Iterable[Transaction],
    mode: ReportMode = ReportMode.ALL,
) -> List[CategoryTotal]:
    """Net amount per category, sorted by name, zero totals dropped."""
    aggregated: Dict[str, float] = {}
    for transaction in transactions:
        if not _matches(transaction, mode):
            continue
        key = transaction.category or UNCATEGORIZED
        aggregated[key] = aggregated.get(key, 0.0) + transaction.amount

    return [
        CategoryTotal(category=category, total=total)
        for category, total in sorted(aggregated.items(), key=lambda item: category_sort_key(item[0]))
        if total != 0
    ]


def waterfall_series(totals: List[CategoryTotal], mode: ReportMode = ReportMode.ALL) -> WaterfallSeries:
    """
    Cumulative bars, one per category, closed by a total bar.

    Income bars are forced positive and expense bars negative; in ALL mode the
    signed totals are used as-is.
    """
    if not totals:
        return WaterfallSeries(points=[], final_value=0.0, total_label="")

    cumulative = 0.0
    points: List[WaterfallPoint] = []
    for entry in totals:
        if mode == ReportMode.INCOME:
            value = abs(entry.total)
        elif mode == ReportMode.EXPENSE:
            value = -abs(entry.total)
        else:
            value = entry.total

        start = cumulative
        cumulative += value
        points.append(
            WaterfallPoint(
                name=entry.category,
                start=start,
                value=value,
                end=cumulative,
                kind="category",
                raw_amount=abs(value),
            )
        )

    if mode == ReportMode.INCOME:
        total_value = abs(cumulative)
    elif mode == ReportMode.EXPENSE:
        total_value = -abs(cumulative)
    else:
        total_value = cumulative

    label = TOTAL_LABELS[mode]
    points.append(
        WaterfallPoint(
            name=label,
            start=0.0,
            value=total_value,
            end=total_value,
            kind="total",
            raw_amount=abs(cumulative),
        )
    )
    return WaterfallSeries(points=points, final_value=cumulative, total_label=label)
