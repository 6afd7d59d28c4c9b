"""
Fixed-point currency helpers.

All monetary values in the ledger are ``decimal.Decimal``. Aggregation code
goes through the helpers here so that no binary floating point ever enters a
total, a percentage or a standard deviation.
"""

from __future__ import annotations

import re
import statistics
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Final, Iterable, Sequence

ZERO: Final[Decimal] = Decimal(0)
CENT: Final[Decimal] = Decimal("0.01")

_AMOUNT_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-])?\$?(?P<body>\d{1,3}(?:,\d{3})+|\d*)(?P<frac>\.\d*)?$"
)
_UNICODE_MINUS = "−"


def to_money(value: object) -> Decimal:
    """
    Convert QIF amount text (or a number) to a finite Decimal.

    Accepts "1234.56", "-1,234.56", "+5", "$12.00", "(12.00)" and "12.00-".

    Raises:
        ValueError: if the value is empty, not a number, NaN or infinite.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {type(value).__name__} to an amount")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Amount must be finite, got {value!r}")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return to_money(str(value))
    if not isinstance(value, str):
        raise ValueError(f"Cannot convert {type(value).__name__} to an amount")

    s = value.strip().replace(_UNICODE_MINUS, "-")
    if not s:
        raise ValueError("Empty amount")

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()

    m = _AMOUNT_RE.match(s)
    if not m or not (m.group("body") or (m.group("frac") or "").strip(".")):
        raise ValueError(f"Could not parse amount from {value!r}")

    digits = (m.group("body") or "0").replace(",", "") + (m.group("frac") or "")
    try:
        amount = Decimal(digits)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount from {value!r}") from e
    if m.group("sign") == "-":
        neg = not neg
    return -amount if neg else amount


def format_money(value: Decimal) -> str:
    """
    Canonical text for an amount: plain notation with at least two
    fractional digits (``-42.5`` -> ``-42.50``, ``1E+2`` -> ``100.00``).
    """
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent > -2:
        return f"{value:.2f}"
    return f"{value:f}"


def sum_money(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """``part / whole * 100`` rounded half-even to 0.01, computed exactly."""
    if whole == 0:
        return ZERO.quantize(CENT)
    hundredths = round(Fraction(part) * 10_000 / Fraction(whole))
    return Decimal(hundredths).scaleb(-2).quantize(CENT)


def mean_money(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return ZERO
    return statistics.mean(values)


def pstdev_money(values: Sequence[Decimal]) -> Decimal:
    """
    Population standard deviation of Decimal values.

    ``statistics`` accumulates Decimal input as exact fractions and takes the
    square root in Decimal arithmetic, so no float is involved.
    """
    if len(values) < 2:
        return ZERO
    return statistics.pstdev(values)
