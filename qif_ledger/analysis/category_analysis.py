# qif_ledger/analysis/category_analysis.py
from __future__ import annotations

import logging
import math
from collections import defaultdict
from decimal import Decimal
from fractions import Fraction
from typing import Iterable

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.utilities.money import CENT, ZERO, mean_money, percent_of, sum_money

from .allocations import Allocation, iter_allocations, warn_if_mixed_currencies
from .report_models import CategoryBreakdown

log = logging.getLogger(__name__)


def _percentages(magnitudes: list[Decimal]) -> list[Decimal]:
    """
    Largest-remainder split of 100.00 over ``magnitudes``.

    Each exact share is floored to hundredths; the hundredths left over go to
    the largest remainders, earlier entries first on ties.
    """
    grand_total = Fraction(sum_money(magnitudes))
    if grand_total == 0:
        return [percent_of(ZERO, ZERO) for _ in magnitudes]
    shares = [Fraction(m) * 10_000 / grand_total for m in magnitudes]
    hundredths = [math.floor(share) for share in shares]
    leftover = 10_000 - sum(hundredths)
    by_remainder = sorted(
        range(len(shares)), key=lambda i: (-(shares[i] - hundredths[i]), i)
    )
    for i in by_remainder[:leftover]:
        hundredths[i] += 1
    return [Decimal(h).scaleb(-2).quantize(CENT) for h in hundredths]


def breakdown(allocations: Iterable[Allocation]) -> list[CategoryBreakdown]:
    """
    Group allocations by label.

    Each entry's percentage is its share of the sum of absolute totals in
    hundredths, apportioned by largest remainder so the percentages add up
    to exactly 100.00 and none is negative. When every total is zero all
    percentages are 0.00. Entries are ordered by absolute total, largest
    first, then by label.
    """
    amounts: dict[str, list[Decimal]] = defaultdict(list)
    for allocation in allocations:
        amounts[allocation.label].append(allocation.amount)

    totals = {label: sum_money(values) for label, values in amounts.items()}
    ordered = sorted(totals, key=lambda label: (-abs(totals[label]), label))
    percentages = _percentages([abs(totals[label]) for label in ordered])

    return [
        CategoryBreakdown(
            category=label,
            total_amount=totals[label],
            percentage_of_total=percentage,
            transaction_count=len(amounts[label]),
            average_amount=mean_money(amounts[label]),
        )
        for label, percentage in zip(ordered, percentages)
    ]


def category_analysis(data: FinancialData) -> list[CategoryBreakdown]:
    """Per-category totals over the whole ledger, transfers excluded."""
    warn_if_mixed_currencies(data)
    result = breakdown(iter_allocations(enumerate(data.transactions)))
    log.debug("Category analysis produced %d entries", len(result))
    return result
