from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING

from qif_ledger.utilities.money import format_money

from ..interfaces import IComparable, IEquatable, ISplit, IToDict, RecursiveDictStr


@total_ordering
@dataclass(frozen=True)
class QSplit:
    """
    Represents a single split line group (S/E/$) of a transaction.

    ``transfer_account`` holds the key of the account named in brackets when
    the split category is a transfer; ``category`` is empty in that case.
    """

    category: str
    amount: Decimal
    memo: str = ""
    tag: str = ""
    transfer_account: str = ""

    @property
    def is_transfer(self) -> bool:
        return bool(self.transfer_account)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QSplit):
            return NotImplemented
        return (self.category, self.tag, self.amount, self.memo) < (
            other.category,
            other.tag,
            other.amount,
            other.memo,
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the QSplit to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {
            "category": self.category,
            "amount": format_money(self.amount),
        }
        if self.memo:
            d["memo"] = self.memo
        if self.tag:
            d["tag"] = self.tag
        if self.transfer_account:
            d["transfer_account"] = self.transfer_account
        return d


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
    _is_IEquatable: type[IEquatable] = QSplit
    _is_IComparable: type[IComparable] = QSplit
