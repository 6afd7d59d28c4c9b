# qif_ledger/analysis/trend_analysis.py
from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction
from qif_ledger.utilities.money import mean_money
from qif_ledger.utilities.periods import Period, PeriodGranularity, iter_periods

from .allocations import income_and_expense, warn_if_mixed_currencies
from .report_models import TrendDirection, TrendPoint

log = logging.getLogger(__name__)

DEFAULT_TOLERANCE = Decimal("0.10")


def trend_analysis(
    data: FinancialData, granularity: PeriodGranularity = PeriodGranularity.MONTH
) -> list[TrendPoint]:
    """
    One point per period from the earliest to the latest transaction date.

    Periods without transactions are included with zero values, so the
    result has no gaps. An empty ledger gives an empty list.
    """
    warn_if_mixed_currencies(data)
    span = data.date_range()
    if span is None:
        return []

    by_period: dict[Period, list[QTransaction]] = defaultdict(list)
    for txn in data.transactions:
        by_period[Period.containing(txn.date, granularity)].append(txn)

    points: list[TrendPoint] = []
    for period in iter_periods(span[0], span[1], granularity):
        income, expense, count = income_and_expense(by_period.get(period, ()))
        points.append(
            TrendPoint(
                period=period,
                income=income,
                expense=expense,
                net_income=income - expense,
                transaction_count=count,
            )
        )
    log.debug("Trend analysis produced %d %s points", len(points), granularity.value)
    return points


def classify_trend(
    points: Sequence[TrendPoint], tolerance: Decimal = DEFAULT_TOLERANCE
) -> TrendDirection:
    """
    Compare the average net income of the second half of ``points`` with
    the first half. Changes within ``tolerance`` (a fraction of the first
    half's average) are STABLE. Fewer than two points are always STABLE.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must not be negative, got {tolerance}")
    if len(points) < 2:
        return TrendDirection.STABLE
    middle = len(points) // 2
    first = mean_money([p.net_income for p in points[:middle]])
    second = mean_money([p.net_income for p in points[middle:]])
    difference = second - first
    threshold = abs(first) * tolerance
    if difference > threshold:
        return TrendDirection.INCREASING
    if difference < -threshold:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def moving_average(points: Sequence[TrendPoint], window: int) -> list[Decimal]:
    """Simple moving average of net income; one value per full window."""
    if window < 1:
        raise ValueError(f"window must be at least 1, got {window}")
    values = [p.net_income for p in points]
    return [
        mean_money(values[start : start + window])
        for start in range(len(values) - window + 1)
    ]
