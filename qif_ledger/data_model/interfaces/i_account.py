from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .enum_account_type import AccountType
from .i_equatable import IEquatable
from .i_to_dict import IToDict


@runtime_checkable
class IAccount(IEquatable, IToDict, Protocol):
    # --- identity ---
    key: str
    name: str

    # --- data attributes ---
    type: AccountType
    description: str
    opening_balance: Decimal
    currency: str
    credit_limit: Optional[Decimal]
    balance_date: Optional[date]
    placeholder: bool
