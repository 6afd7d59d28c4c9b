# qif_ledger/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Final, overload


@overload
def to_qif_date(s: date, /) -> date: ...
@overload
def to_qif_date(s: str, /) -> date: ...


def to_qif_date(s: object, /) -> date:
    """
    Parse the date encodings found in QIF exports into a date.

    Supported examples:
      - 12/31'24, 1/ 5'24     (QIF classic, 2-digit year with apostrophe)
      - 12/31/2024, 1/5/24    (US)
      - 12-31-2024, 12.31.2024
      - 2024-12-31            (ISO)
      - 2024/12/31, 2024.12.31
      - 20241231              (ISO compact)
      - 31/12/2024            (D/M/Y when unambiguous: first token > 12)

    Raises:
        ValueError: if the text is empty or no format matches.
    """
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s

    # Quicken pads single digits with a space ("1/ 5'24")
    txt = "".join(str(s).split())
    if not txt:
        raise ValueError("Empty date")

    # Normalize curly/back quotes used in some exports
    txt = txt.replace("’", "'").replace("`", "'")

    # Apostrophe years: Quicken writes '00..'99 for 2000..2099
    m = _DATE_RE_APOSTROPHE.match(txt)
    if m:
        month, day, year = (int(g) for g in m.groups())
        if year < 100:
            year += 2000
        return date(year, month, day)

    for fmt in _PATTERNS:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    # Heuristic for D/M/Y vs M/D/Y ambiguity:
    m = _DATE_RE_NUMERIC.match(txt)
    if m:
        a, sep, b, c = m.groups()
        first = int(a)
        second = int(b)
        year_fmt = "%Y" if len(c) == 4 else "%y"
        is_dmy = first > 12 and second <= 12
        fmt = ("%d{sep}%m{sep}" + year_fmt) if is_dmy else ("%m{sep}%d{sep}" + year_fmt)
        try:
            return datetime.strptime(txt, fmt.format(sep=sep)).date()
        except ValueError:
            pass

    raise ValueError(f"Unrecognized date format: {s!r}")


def format_qif_date(d: date) -> str:
    """Canonical QIF date text: MM/DD/YYYY."""
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


_PATTERNS: Final[tuple[str, ...]] = (
    "%m/%d/%Y",  # 01/02/2025
    "%Y-%m-%d",  # 2025-01-02
    "%Y/%m/%d",  # 2025/01/02
    "%Y.%m.%d",  # 2025.01.02
    "%m-%d-%Y",  # 01-02-2025
    "%m.%d.%Y",  # 01.02.2025
    "%Y%m%d",  # 20250102
)
_DATE_RE_APOSTROPHE: Final[re.Pattern[str]] = re.compile(
    r"^(\d{1,2})/(\d{1,2})'(\d{2}|\d{4})$"
)
_DATE_RE_NUMERIC: Final[re.Pattern[str]] = re.compile(
    r"^(\d{1,2})([/\-.])(\d{1,2})[/\-.](\d{2}|\d{4})$"
)
