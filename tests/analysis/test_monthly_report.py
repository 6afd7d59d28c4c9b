# tests/analysis/test_monthly_report.py
from __future__ import annotations

from decimal import Decimal

import pytest

from qif_ledger.analysis.monthly_report import monthly_report
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData


def test_january_totals_exclude_transfers(ledger):
    # Act
    report = monthly_report(ledger, 2024, 1)

    # Assert
    assert report.total_income == Decimal("2500.00")
    assert report.total_expense == Decimal("400.00"), "Rent plus the split purchase; transfers excluded."
    assert report.net_income == Decimal("2100.00")
    assert report.transaction_count == 3


def test_breakdown_percentages_sum_to_100(ledger):
    # Act
    breakdown = monthly_report(ledger, 2024, 1).category_breakdown

    # Assert
    assert [(b.category, b.percentage_of_total) for b in breakdown] == [
        ("Salary", Decimal("86.21")),
        ("Rent", Decimal("10.34")),
        ("Groceries", Decimal("2.07")),
        ("Household", Decimal("1.38")),
    ]
    assert sum(b.percentage_of_total for b in breakdown) == Decimal("100.00")


def test_month_without_transactions_is_zero(ledger):
    # Act
    report = monthly_report(ledger, 2023, 12)

    # Assert
    assert report.total_income == report.total_expense == report.net_income == Decimal("0")
    assert report.transaction_count == 0
    assert report.category_breakdown == ()


def test_empty_ledger_is_zero():
    report = monthly_report(FinancialData(), 2024, 6)
    assert report.net_income == Decimal("0")
    assert report.period.label == "2024-06"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_raises(ledger, month):
    with pytest.raises(ValueError):
        monthly_report(ledger, 2024, month)
