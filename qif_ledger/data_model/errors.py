# qif_ledger/data_model/errors.py
"""
Exceptions raised by the ledger model and the QIF codec.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch that, while callers implementing skip-and-continue policies can
inspect ``record_index`` / ``line_number`` on a ``ParseError``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional


class LedgerError(ValueError):
    """Base class for ledger and codec errors."""


class ParseError(LedgerError):
    """
    A record could not be turned into ledger data.

    Attributes:
        reason: Short description of what is wrong.
        record_index: Zero-based index of the record in the input, if known.
        line_number: One-based line number of the offending line, if known.
        line: The offending line as read (trimmed), if known.
    """

    def __init__(
        self,
        reason: str,
        *,
        record_index: Optional[int] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.record_index = record_index
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.record_index is not None:
            where.append(f"record {self.record_index}")
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        text = self.reason
        if where:
            text = f"{', '.join(where)}: {text}"
        if self.line is not None:
            text = f"{text}: {self.line!r}"
        return text


class MalformedRecord(ParseError):
    """Missing or unparseable date/amount, or an unexpected record boundary."""


class SplitSumMismatch(ParseError):
    """Split amounts do not add up to the transaction amount."""

    def __init__(
        self,
        expected: Decimal,
        actual: Decimal,
        *,
        record_index: Optional[int] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"split amounts sum to {actual} but the transaction amount is {expected}",
            record_index=record_index,
            line_number=line_number,
            line=line,
        )


class UnresolvedTransferTarget(ParseError):
    """A transfer names an account that the input never declares (strict mode only)."""


class SerializationInvariantViolation(LedgerError):
    """The writer was handed a ledger it cannot emit without producing corrupt text."""
