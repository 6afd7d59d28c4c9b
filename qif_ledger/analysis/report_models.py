# qif_ledger/analysis/report_models.py
"""
Report value objects returned by the analysis functions.

They are computed on demand from a ledger and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction
from qif_ledger.utilities.periods import Period, PeriodGranularity

UNCATEGORIZED = "Uncategorized"


class TrendDirection(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class CategoryBreakdown:
    category: str
    total_amount: Decimal
    percentage_of_total: Decimal
    transaction_count: int = 0
    average_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class MonthlyReport:
    """Income and expense for one calendar month. ``net_income`` is income minus expense."""

    year: int
    month: int
    total_income: Decimal
    total_expense: Decimal
    net_income: Decimal
    transaction_count: int = 0
    category_breakdown: tuple[CategoryBreakdown, ...] = field(default_factory=tuple)

    @property
    def period(self) -> Period:
        return Period.containing(date(self.year, self.month, 1))


@dataclass(frozen=True)
class TrendPoint:
    period: Period
    income: Decimal
    expense: Decimal
    net_income: Decimal
    transaction_count: int = 0


@dataclass(frozen=True)
class AnomalyFlag:
    """
    One allocation whose size is unusual for its category.

    ``index`` is the position of the transaction in the ledger and
    ``split_index`` the position of the split (None for an unsplit
    transaction), so identical-looking transactions stay distinct.
    """

    transaction: QTransaction
    index: int
    category: str
    amount: Decimal
    mean: Decimal
    std_dev: Decimal
    threshold_multiple: Decimal
    split_index: Optional[int] = None

    @property
    def deviation(self) -> Decimal:
        """Absolute amount minus the category mean."""
        return abs(self.amount) - self.mean

    @property
    def z_score(self) -> Decimal:
        if self.std_dev == 0:
            return Decimal("0")
        return self.deviation / self.std_dev


__all__ = [
    "UNCATEGORIZED",
    "AnomalyFlag",
    "CategoryBreakdown",
    "MonthlyReport",
    "Period",
    "PeriodGranularity",
    "TrendDirection",
    "TrendPoint",
]
