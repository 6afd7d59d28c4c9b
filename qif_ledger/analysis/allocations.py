# qif_ledger/analysis/allocations.py
"""
How transactions count towards reports.

Transfers move money between the user's own accounts, so they are neither
income nor expense: a transaction whose category is a transfer contributes
nothing, and split lines that are transfers are subtracted from the
transaction's amount.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, Optional

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction
from qif_ledger.utilities.money import ZERO, sum_money

from .report_models import UNCATEGORIZED

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    """A signed amount attributed to one category label."""

    label: str
    amount: Decimal
    transaction: QTransaction
    index: int
    split_index: Optional[int] = None


def analysed_amount(txn: QTransaction) -> Decimal:
    if txn.is_transfer:
        return ZERO
    return txn.amount - sum_money(s.amount for s in txn.splits if s.is_transfer)


def counts_towards_reports(txn: QTransaction) -> bool:
    return not txn.is_transfer


def iter_allocations(
    transactions: Iterable[tuple[int, QTransaction]],
) -> Iterator[Allocation]:
    """
    Yield the category allocations of ``(index, transaction)`` pairs.

    Split transactions contribute one allocation per non-transfer split;
    the others contribute their whole amount under their category.
    """
    for index, txn in transactions:
        if not counts_towards_reports(txn):
            continue
        if not txn.splits:
            yield Allocation(txn.category or UNCATEGORIZED, txn.amount, txn, index)
            continue
        for split_index, split in enumerate(txn.splits):
            if split.is_transfer:
                continue
            yield Allocation(
                split.category or UNCATEGORIZED, split.amount, txn, index, split_index
            )


def income_and_expense(transactions: Iterable[QTransaction]) -> tuple[Decimal, Decimal, int]:
    """Return ``(income, expense, count)``; expense is reported as a positive number."""
    income = ZERO
    expense = ZERO
    count = 0
    for txn in transactions:
        if not counts_towards_reports(txn):
            continue
        count += 1
        amount = analysed_amount(txn)
        if amount > 0:
            income += amount
        elif amount < 0:
            expense += -amount
    return income, expense, count


def warn_if_mixed_currencies(data: FinancialData) -> None:
    currencies = data.currencies
    if len(currencies) > 1:
        log.warning(
            "Ledger mixes currencies %s; amounts are aggregated without conversion",
            ", ".join(sorted(currencies)),
        )
