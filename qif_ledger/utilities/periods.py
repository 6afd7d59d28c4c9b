# qif_ledger/utilities/periods.py
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterator


class PeriodGranularity(Enum):
    """Calendar period sizes used to bucket transactions."""

    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def months(self) -> int:
        return {"month": 1, "quarter": 3, "year": 12}[self.value]

    @classmethod
    def from_text(cls, text: str) -> "PeriodGranularity":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown period granularity {text!r}; expected one of "
                f"{', '.join(g.value for g in cls)}"
            ) from None


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def month_start(d: date) -> date:
    return d.replace(day=1)


def add_months(d: date, months: int) -> date:
    """Shift ``d`` by whole months, clamping the day to the target month."""
    index = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(index, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(d.day, last_day))


def period_start(d: date, granularity: PeriodGranularity) -> date:
    if granularity is PeriodGranularity.YEAR:
        return date(d.year, 1, 1)
    if granularity is PeriodGranularity.QUARTER:
        return date(d.year, 3 * ((d.month - 1) // 3) + 1, 1)
    return month_start(d)


@dataclass(frozen=True, order=True)
class Period:
    """A calendar month, quarter or year identified by its first day."""

    start: date
    granularity: PeriodGranularity = PeriodGranularity.MONTH

    @classmethod
    def containing(
        cls, d: date, granularity: PeriodGranularity = PeriodGranularity.MONTH
    ) -> "Period":
        return cls(period_start(d, granularity), granularity)

    @property
    def end(self) -> date:
        """Last day of the period (inclusive)."""
        return add_months(self.start, self.granularity.months) - timedelta(days=1)

    @property
    def label(self) -> str:
        if self.granularity is PeriodGranularity.YEAR:
            return f"{self.start.year}"
        if self.granularity is PeriodGranularity.QUARTER:
            return f"{self.start.year}-Q{(self.start.month - 1) // 3 + 1}"
        return f"{self.start.year}-{self.start.month:02d}"

    def next(self) -> "Period":
        return Period(add_months(self.start, self.granularity.months), self.granularity)

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    def __str__(self) -> str:
        return self.label


def iter_periods(
    first: date, last: date, granularity: PeriodGranularity
) -> Iterator[Period]:
    """Every period from the one holding ``first`` to the one holding ``last``."""
    period = Period.containing(first, granularity)
    while period.start <= last:
        yield period
        period = period.next()
