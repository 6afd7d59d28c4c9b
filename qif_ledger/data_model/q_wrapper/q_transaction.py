from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from qif_ledger.utilities.converters_scalar import format_qif_date
from qif_ledger.utilities.money import format_money, sum_money

from ..errors import SplitSumMismatch
from ..interfaces import (
    EnumClearedStatus,
    IComparable,
    IEquatable,
    IToDict,
    ITransaction,
    RecursiveDictStr,
)
from .q_split import QSplit

NaturalKey = tuple[date, Decimal, str, str]


@total_ordering
@dataclass(frozen=True)
class QTransaction:
    """
    Represents a single ledger transaction.

    Positive amounts are inflows, negative amounts outflows. ``account`` is
    the key of the owning account (a back-reference, the ledger owns the
    account). Unrecognized QIF lines are kept in ``passthrough`` as
    ``(tag, value)`` pairs so the writer can reproduce them.
    """

    # region Core Fields

    account: str
    date: date
    amount: Decimal
    payee: str = ""
    category: str = ""
    tag: str = ""
    memo: str = ""
    cleared: EnumClearedStatus = EnumClearedStatus.NOT_CLEARED
    check_number: str = ""

    # endregion Core Fields

    # region Optional Fields

    splits: tuple[QSplit, ...] = field(default_factory=tuple)
    transfer_account: str = ""
    passthrough: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    # endregion Optional Fields

    @property
    def is_transfer(self) -> bool:
        return bool(self.transfer_account)

    @property
    def natural_key(self) -> NaturalKey:
        """Identity used to recognise the same transaction across imports."""
        return (self.date, self.amount, self.payee, self.account)

    def splits_exist(self) -> bool:
        return bool(self.splits)

    def split_total(self) -> Decimal:
        return sum_money(s.amount for s in self.splits)

    def splits_balance(self) -> bool:
        return not self.splits or self.split_total() == self.amount

    def validate(self) -> None:
        """
        Raises:
            SplitSumMismatch: if splits are present and do not add up to the amount.
        """
        if not self.splits_balance():
            raise SplitSumMismatch(self.amount, self.split_total())

    # region IComparable

    def _sort_key(self) -> tuple:
        return (self.date, self.payee, self.amount, self.category, self.tag, self.memo)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QTransaction):
            return NotImplemented
        if self._sort_key() != other._sort_key():
            return self._sort_key() < other._sort_key()
        return tuple(sorted(self.splits)) < tuple(sorted(other.splits))

    # endregion IComparable

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the transaction to a dictionary of strings.
        """
        d: dict[str, RecursiveDictStr] = {
            "account": self.account,
            "date": self.date.isoformat(),
            "amount": format_money(self.amount),
        }

        def _addif(key: str, value: str) -> None:
            if value:
                d[key] = value

        _addif("payee", self.payee)
        _addif("category", self.category)
        _addif("tag", self.tag)
        _addif("memo", self.memo)
        _addif("cleared", self.cleared.value)
        _addif("check_number", self.check_number)
        _addif("transfer_account", self.transfer_account)
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        if self.passthrough:
            d["passthrough"] = [f"{tag}{value}" for tag, value in self.passthrough]
        return d

    def describe(self) -> str:
        """One-line human readable summary used in log and error messages."""
        return f"{format_qif_date(self.date)} {format_money(self.amount)} {self.payee!r}"


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
    _is_IEquatable: type[IEquatable] = QTransaction
    _is_IComparable: type[IComparable] = QTransaction
