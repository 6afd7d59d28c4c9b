# qif_ledger/data_model/q_wrapper/qif_codes.py
"""
Single-character QIF field tags and section headers.

The reader dispatches on these codes and the writer emits them, so the two
directions cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    code: str
    description: str
    used_in: str
    example: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QifCode):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def line(self, value: str) -> str:
        """The QIF line for ``value`` under this tag."""
        return f"{self.code}{value}"


# region Transaction fields

DATE = QifCode("D", "Date", "Transaction", "D01/15/2024")
AMOUNT = QifCode("T", "Amount", "Transaction", "T-42.50")
AMOUNT_ALT = QifCode("U", "Amount (duplicate of T)", "Transaction", "U-42.50")
PAYEE = QifCode("P", "Payee", "Transaction", "PCorner Market")
CATEGORY = QifCode("L", "Category, class or [transfer account]", "Transaction", "LGroceries/Family")
MEMO = QifCode("M", "Memo", "Transaction", "MWeekly shopping")
CLEARED = QifCode("C", "Cleared status", "Transaction", "C*")
CHECK_NUMBER = QifCode("N", "Check or reference number", "Transaction", "N1042")

# endregion Transaction fields

# region Split fields

SPLIT_CATEGORY = QifCode("S", "Split category or [transfer account]", "Split", "SHousehold")
SPLIT_MEMO = QifCode("E", "Split memo", "Split", "EPaper towels")
SPLIT_AMOUNT = QifCode("$", "Split amount", "Split", "$-12.00")

# endregion Split fields

# Tags with a meaning inside a transaction record
TRANSACTION_FIELD_CODES: frozenset[str] = frozenset(
    c.code
    for c in (
        DATE,
        AMOUNT,
        AMOUNT_ALT,
        PAYEE,
        CATEGORY,
        MEMO,
        CLEARED,
        CHECK_NUMBER,
        SPLIT_CATEGORY,
        SPLIT_MEMO,
        SPLIT_AMOUNT,
    )
)

# region Account fields

ACCOUNT_NAME = QifCode("N", "Account name", "Account", "NChecking")
ACCOUNT_TYPE = QifCode("T", "Account type", "Account", "TBank")
ACCOUNT_DESCRIPTION = QifCode("D", "Description", "Account", "DJoint checking")
ACCOUNT_LIMIT = QifCode("L", "Credit limit", "Account", "L5000.00")
ACCOUNT_BALANCE = QifCode("$", "Opening balance", "Account", "$1250.00")
ACCOUNT_BALANCE_DATE = QifCode("/", "Balance date", "Account", "/01/01/2024")

# endregion Account fields

END_OF_RECORD = "^"
SPLIT_PLACEHOLDER = "--Split--"
CLASS_SEPARATOR = "/"
HEADER_PREFIX = "!"

HEADER_ACCOUNT = "!Account"
HEADER_TYPE_PREFIX = "!Type:"
HEADER_OPTION_AUTOSWITCH = "!Option:AutoSwitch"
HEADER_CLEAR_AUTOSWITCH = "!Clear:AutoSwitch"
