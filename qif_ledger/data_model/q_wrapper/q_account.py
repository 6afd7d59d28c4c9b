from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from qif_ledger.utilities.converters_scalar import format_qif_date
from qif_ledger.utilities.core_util import normalize_name
from qif_ledger.utilities.money import format_money

from ..interfaces import AccountType, IAccount, IEquatable, IToDict, RecursiveDictStr

# Fixed namespace so an account name always maps to the same key
_ACCOUNT_NAMESPACE = uuid.UUID("5b0f5a4e-3f4c-4b8e-9a51-2f6f0d1c9e27")


def account_key(name: str) -> str:
    """Stable identity for an account name (case and spacing insensitive)."""
    return str(uuid.uuid5(_ACCOUNT_NAMESPACE, normalize_name(name)))


@dataclass
class QAccount:
    """
    Represents an account in the ledger.

    ``key`` is derived from the name when not given, so parsing the same text
    twice yields the same keys. ``placeholder`` marks accounts that were only
    seen as a transfer target; it does not take part in equality.
    """

    name: str
    type: AccountType = AccountType.BANK
    description: str = ""
    opening_balance: Decimal = Decimal("0")
    currency: str = "USD"
    credit_limit: Optional[Decimal] = None
    balance_date: Optional[date] = None
    placeholder: bool = field(default=False, compare=False)
    key: str = ""

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Account name must not be empty")
        if not self.key:
            self.key = account_key(self.name)

    def __hash__(self) -> int:
        return hash(self.key)

    def merged_with(self, other: "QAccount") -> "QAccount":
        """
        Return this account updated with the details ``other`` declares.

        Used when the same account is declared more than once (or declared
        after being referenced as a transfer target): empty or default fields
        in ``other`` never wipe what is already known. The key is kept.
        """
        defaults = QAccount(name=other.name)
        changes: dict[str, object] = {"placeholder": self.placeholder and other.placeholder}
        if not other.placeholder:
            changes["name"] = other.name
            changes["type"] = other.type if (self.placeholder or other.type != defaults.type) else self.type
        for attr in ("description", "opening_balance", "credit_limit", "balance_date"):
            value = getattr(other, attr)
            if value != getattr(defaults, attr):
                changes[attr] = value
        if other.currency != defaults.currency:
            changes["currency"] = other.currency
        return replace(self, **changes)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "key": self.key,
            "name": self.name,
            "type": self.type.qif_code,
            "opening_balance": format_money(self.opening_balance),
            "currency": self.currency,
        }
        if self.description:
            d["description"] = self.description
        if self.credit_limit is not None:
            d["credit_limit"] = format_money(self.credit_limit)
        if self.balance_date is not None:
            d["balance_date"] = format_qif_date(self.balance_date)
        if self.placeholder:
            d["placeholder"] = "true"
        return d


if TYPE_CHECKING:
    _is_IAccount: type[IAccount] = QAccount
    _is_IToDict: type[IToDict] = QAccount
    _is_IEquatable: type[IEquatable] = QAccount
