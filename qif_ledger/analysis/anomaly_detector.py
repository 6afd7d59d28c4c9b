# qif_ledger/analysis/anomaly_detector.py
"""Anomaly detection for ledger transactions."""

from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.utilities.money import mean_money, pstdev_money, to_money

from .allocations import Allocation, iter_allocations, warn_if_mixed_currencies
from .report_models import AnomalyFlag

log = logging.getLogger(__name__)


def detect_anomalies(
    data: FinancialData,
    threshold_multiple: Decimal | int | str,
    *,
    min_samples: int = 3,
) -> frozenset[AnomalyFlag]:
    """
    Flag allocations whose size is unusual for their category.

    For each category the mean and population standard deviation of the
    absolute allocation amounts are computed; an allocation is flagged when
    its absolute amount differs from the mean by strictly more than
    ``threshold_multiple`` standard deviations. Categories with fewer than
    ``min_samples`` allocations are not examined. Transfers are excluded.

    Args:
        data: Ledger to examine. It is not modified.
        threshold_multiple: Number of standard deviations; must be positive.
        min_samples: Smallest category size that is examined.

    Returns:
        The flagged allocations.

    Raises:
        ValueError: if ``threshold_multiple`` is not positive or
            ``min_samples`` is less than 1.
    """
    threshold = to_money(threshold_multiple)
    if threshold <= 0:
        raise ValueError(f"threshold_multiple must be positive, got {threshold_multiple!r}")
    if min_samples < 1:
        raise ValueError(f"min_samples must be at least 1, got {min_samples}")
    warn_if_mixed_currencies(data)

    by_category: dict[str, list[Allocation]] = defaultdict(list)
    for allocation in iter_allocations(enumerate(data.transactions)):
        by_category[allocation.label].append(allocation)

    flags: set[AnomalyFlag] = set()
    for category, allocations in by_category.items():
        if len(allocations) < min_samples:
            log.debug(
                "Category %r has %d allocation(s); below %d, not examined",
                category,
                len(allocations),
                min_samples,
            )
            continue
        sizes = [abs(a.amount) for a in allocations]
        mean = mean_money(sizes)
        std_dev = pstdev_money(sizes)
        limit = threshold * std_dev
        for allocation, size in zip(allocations, sizes):
            if abs(size - mean) > limit:
                flags.add(
                    AnomalyFlag(
                        transaction=allocation.transaction,
                        index=allocation.index,
                        category=category,
                        amount=allocation.amount,
                        mean=mean,
                        std_dev=std_dev,
                        threshold_multiple=threshold,
                        split_index=allocation.split_index,
                    )
                )
    log.info("Detected %d anomalies at %s standard deviations", len(flags), threshold)
    return frozenset(flags)
