# qif_ledger/analysis/report_frames.py
"""
pandas views of report objects, for display and export.

Amount columns hold the original ``Decimal`` values (``object`` dtype); no
conversion to float happens here.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData

from .report_models import AnomalyFlag, CategoryBreakdown, MonthlyReport, TrendPoint

CATEGORY_COLUMNS = ["category", "total_amount", "percentage_of_total", "transaction_count", "average_amount"]
TREND_COLUMNS = ["period", "income", "expense", "net_income", "transaction_count"]
ANOMALY_COLUMNS = ["index", "date", "payee", "category", "amount", "mean", "std_dev", "z_score"]
LEDGER_COLUMNS = ["account", "date", "payee", "category", "amount", "memo", "cleared", "splits"]


def _frame(rows: list[dict[str, object]], columns: list[str]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=columns, dtype=object)


def category_frame(entries: Iterable[CategoryBreakdown]) -> pd.DataFrame:
    rows = [
        {
            "category": e.category,
            "total_amount": e.total_amount,
            "percentage_of_total": e.percentage_of_total,
            "transaction_count": e.transaction_count,
            "average_amount": e.average_amount,
        }
        for e in entries
    ]
    return _frame(rows, CATEGORY_COLUMNS)


def monthly_frame(report: MonthlyReport) -> pd.DataFrame:
    """Single-row summary; the category breakdown is available via ``category_frame``."""
    row = {
        "period": report.period.label,
        "total_income": report.total_income,
        "total_expense": report.total_expense,
        "net_income": report.net_income,
        "transaction_count": report.transaction_count,
    }
    return _frame([row], list(row))


def trend_frame(points: Sequence[TrendPoint]) -> pd.DataFrame:
    rows = [
        {
            "period": p.period.label,
            "income": p.income,
            "expense": p.expense,
            "net_income": p.net_income,
            "transaction_count": p.transaction_count,
        }
        for p in points
    ]
    return _frame(rows, TREND_COLUMNS)


def anomaly_frame(flags: Iterable[AnomalyFlag]) -> pd.DataFrame:
    """Flags ordered by ledger position."""
    ordered = sorted(flags, key=lambda f: (f.index, -1 if f.split_index is None else f.split_index))
    rows = [
        {
            "index": f.index,
            "date": f.transaction.date,
            "payee": f.transaction.payee,
            "category": f.category,
            "amount": f.amount,
            "mean": f.mean,
            "std_dev": f.std_dev,
            "z_score": f.z_score,
        }
        for f in ordered
    ]
    return _frame(rows, ANOMALY_COLUMNS)


def ledger_frame(data: FinancialData) -> pd.DataFrame:
    """One row per transaction, with the account shown by name."""
    rows = []
    for txn in data.transactions:
        category = txn.category
        if txn.is_transfer:
            category = f"[{data.get_account(txn.transfer_account).name}]"
        rows.append(
            {
                "account": data.get_account(txn.account).name,
                "date": txn.date,
                "payee": txn.payee,
                "category": category,
                "amount": txn.amount,
                "memo": txn.memo,
                "cleared": txn.cleared.value,
                "splits": len(txn.splits),
            }
        )
    return _frame(rows, LEDGER_COLUMNS)
