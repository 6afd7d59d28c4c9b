from __future__ import annotations

from decimal import Decimal

from typing_extensions import Protocol, runtime_checkable

from .i_comparable import IComparable
from .i_equatable import IEquatable
from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IComparable, IEquatable, IToDict, Protocol):
    """Structural shape of a split row (S/E/$) that can be sorted and compared."""

    category: str
    amount: Decimal
    memo: str
    tag: str
    transfer_account: str

    @property
    def is_transfer(self) -> bool: ...
