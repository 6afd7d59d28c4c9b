# qif_ledger/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from typing_extensions import Protocol, runtime_checkable

from .enum_cleared_status import EnumClearedStatus
from .i_comparable import IComparable
from .i_equatable import IEquatable
from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IComparable, IEquatable, IToDict, Protocol):
    """Structural shape of a ledger transaction as the analysis code reads it."""

    account: str
    date: date
    amount: Decimal
    payee: str
    category: str
    tag: str
    memo: str
    cleared: EnumClearedStatus
    check_number: str
    splits: tuple[ISplit, ...]
    transfer_account: str
    passthrough: tuple[tuple[str, str], ...]

    @property
    def is_transfer(self) -> bool: ...

    def splits_exist(self) -> bool: ...
    def splits_balance(self) -> bool: ...
