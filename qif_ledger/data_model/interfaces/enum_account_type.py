# qif_ledger/data_model/interfaces/enum_account_type.py
from __future__ import annotations

from enum import Enum


class AccountType(Enum):
    """
    Account kinds a QIF transaction section can declare.

    The value is the code used after ``!Type:`` and in an account block's
    ``T`` line.
    """

    BANK = "Bank"
    CASH = "Cash"
    CREDIT_CARD = "CCard"
    INVESTMENT = "Invst"
    ASSET = "Oth A"
    LIABILITY = "Oth L"

    @property
    def qif_code(self) -> str:
        return self.value

    @property
    def header(self) -> str:
        """The section header line, e.g. ``!Type:Bank``."""
        return f"!Type:{self.value}"

    @classmethod
    def from_qif(cls, text: str) -> "AccountType":
        """
        Convert a QIF type code (or a common alias) to an AccountType.

        Matching ignores case and surrounding whitespace.

        Raises:
            ValueError: if the text names no known account type.
        """
        key = " ".join(text.split()).casefold()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown account type: {text!r}") from None


_ALIASES: dict[str, AccountType] = {
    "bank": AccountType.BANK,
    "checking": AccountType.BANK,
    "savings": AccountType.BANK,
    "cash": AccountType.CASH,
    "ccard": AccountType.CREDIT_CARD,
    "creditcard": AccountType.CREDIT_CARD,
    "credit card": AccountType.CREDIT_CARD,
    "invst": AccountType.INVESTMENT,
    "investment": AccountType.INVESTMENT,
    "port": AccountType.INVESTMENT,
    "401(k)": AccountType.INVESTMENT,
    "403(b)": AccountType.INVESTMENT,
    "mutual": AccountType.INVESTMENT,
    "oth a": AccountType.ASSET,
    "asset": AccountType.ASSET,
    "oth l": AccountType.LIABILITY,
    "liability": AccountType.LIABILITY,
}
