"""
Ledger data model: interfaces, concrete types, the QIF codec and its errors.
"""

from .errors import (
    LedgerError,
    MalformedRecord,
    ParseError,
    SerializationInvariantViolation,
    SplitSumMismatch,
    UnresolvedTransferTarget,
)
from .interfaces import (
    AccountType,
    EnumClearedStatus,
    IAccount,
    IParserEmitter,
    ISplit,
    ITransaction,
)
from .q_wrapper import FinancialData, QAccount, QSplit, QTransaction, account_key
from .qif_parsers_emitters import (
    QifFileParserEmitter,
    QifReader,
    QifWriter,
    export_qif,
    import_qif,
)

__all__ = [
    "AccountType",
    "EnumClearedStatus",
    "FinancialData",
    "IAccount",
    "IParserEmitter",
    "ISplit",
    "ITransaction",
    "LedgerError",
    "MalformedRecord",
    "ParseError",
    "QAccount",
    "QSplit",
    "QTransaction",
    "QifFileParserEmitter",
    "QifReader",
    "QifWriter",
    "SerializationInvariantViolation",
    "SplitSumMismatch",
    "UnresolvedTransferTarget",
    "account_key",
]
