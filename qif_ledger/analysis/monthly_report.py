# qif_ledger/analysis/monthly_report.py
from __future__ import annotations

import logging

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData

from .allocations import income_and_expense, iter_allocations, warn_if_mixed_currencies
from .category_analysis import breakdown
from .report_models import MonthlyReport

log = logging.getLogger(__name__)


def monthly_report(data: FinancialData, year: int, month: int) -> MonthlyReport:
    """
    Income, expense and net income for one calendar month.

    Income is the sum of positive analysed amounts and expense the sum of
    the absolute negative ones, so a split paycheck with deductions counts
    once, at its net value. Transfers contribute nothing.

    Raises:
        ValueError: if ``month`` is not 1-12.
    """
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
        raise ValueError(f"Invalid year: {year!r}")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month!r} (expected 1-12)")
    warn_if_mixed_currencies(data)

    in_month = [
        (index, txn)
        for index, txn in enumerate(data.transactions)
        if txn.date.year == year and txn.date.month == month
    ]
    income, expense, count = income_and_expense(txn for _, txn in in_month)
    report = MonthlyReport(
        year=year,
        month=month,
        total_income=income,
        total_expense=expense,
        net_income=income - expense,
        transaction_count=count,
        category_breakdown=tuple(breakdown(iter_allocations(in_month))),
    )
    log.debug(
        "Monthly report %04d-%02d: income=%s expense=%s count=%d",
        year,
        month,
        income,
        expense,
        count,
    )
    return report
