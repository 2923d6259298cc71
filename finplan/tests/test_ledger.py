from __future__ import annotations

from datetime import date

import pytest

from finplan.domain.ledger import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    UNCATEGORIZED,
    ReportMode,
    Transaction,
    TransactionType,
    category_totals,
    filter_by_period,
    filter_by_range,
    summarize_ledger,
    waterfall_series,
)


@pytest.fixture()
def transactions() -> list:
    return [
        Transaction.create(date(2024, 5, 5), TransactionType.INCOME, 8000, "Salário"),
        Transaction.create(date(2024, 5, 10), TransactionType.EXPENSE, 2500, "Moradia"),
        Transaction.create(date(2024, 5, 12), TransactionType.EXPENSE, 400, "Alimentação"),
        Transaction.create(date(2024, 5, 20), TransactionType.INCOME, 1200, "Freelance"),
        Transaction.create(date(2024, 6, 2), TransactionType.EXPENSE, 300, "Alimentação"),
        Transaction.create(date(2024, 6, 3), TransactionType.EXPENSE, 50, ""),
    ]


def test_create_signs_amount_by_type():
    expense = Transaction.create(date(2024, 1, 1), TransactionType.EXPENSE, 99.9, "Lazer")
    income = Transaction.create(date(2024, 1, 1), TransactionType.INCOME, -10, "Salário")
    assert expense.amount == -99.9
    assert income.amount == 10
    assert expense.id != income.id


def test_summary_totals(transactions):
    summary = summarize_ledger(filter_by_period(transactions, month=5, year=2024))
    assert summary.total_income == 9200
    assert summary.total_expenses == 2900
    assert summary.balance == 6300


def test_filter_by_range_is_inclusive(transactions):
    kept = filter_by_range(transactions, date(2024, 5, 12), date(2024, 6, 2))
    assert [t.date.day for t in kept] == [12, 20, 2]
    assert filter_by_range(transactions, None, date(2024, 6, 2)) == transactions


def test_category_totals_are_sorted_and_labelled(transactions):
    totals = category_totals(transactions, ReportMode.EXPENSE)
    assert [t.category for t in totals] == ["Alimentação", "Moradia", UNCATEGORIZED]
    assert totals[0].total == -700


def test_offsetting_category_is_dropped():
    entries = [
        Transaction.create(date(2024, 1, 1), TransactionType.INCOME, 100, "Outros"),
        Transaction.create(date(2024, 1, 2), TransactionType.EXPENSE, 100, "Outros"),
    ]
    assert category_totals(entries) == []


def test_income_waterfall(transactions):
    totals = category_totals(transactions, ReportMode.INCOME)
    series = waterfall_series(totals, ReportMode.INCOME)

    assert [p.name for p in series.points] == ["Freelance", "Salário", "Total Receitas"]
    assert series.points[1].start == 1200
    assert series.points[1].end == 9200
    assert series.points[-1].kind == "total"
    assert series.points[-1].value == 9200
    assert series.final_value == 9200


def test_expense_waterfall_runs_downwards(transactions):
    series = waterfall_series(category_totals(transactions, ReportMode.EXPENSE), ReportMode.EXPENSE)
    assert all(p.value < 0 for p in series.points)
    assert series.points[-1].value == -3250
    assert series.points[-1].raw_amount == 3250
    assert series.total_label == "Total Despesas"


def test_empty_waterfall():
    series = waterfall_series([], ReportMode.ALL)
    assert series.points == []
    assert series.total_label == ""


def test_default_categories_are_sorted_per_type():
    assert INCOME_CATEGORIES == ["Dividendos", "Freelance", "Salário"]
    assert EXPENSE_CATEGORIES[0] == "Alimentação"


def test_sign_follows_type_when_validated_from_payload():
    expense = Transaction.model_validate({"date": "2024-05-10", "type": "expense", "amount": 2500})
    income = Transaction.model_validate({"date": "2024-05-05", "type": "income", "amount": -8000})
    assert expense.amount == -2500
    assert income.amount == 8000


def test_category_order_ignores_accents_and_case():
    entries = [
        Transaction.create(date(2024, 5, 1), TransactionType.EXPENSE, 100, name)
        for name in ["Moradia", "lazer", "Água"]
    ]
    totals = category_totals(entries, ReportMode.EXPENSE)
    assert [entry.category for entry in totals] == ["Água", "lazer", "Moradia"]
