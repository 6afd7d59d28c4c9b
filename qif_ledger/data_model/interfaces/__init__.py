"""
Interfaces and Enums for the ledger data model.
"""

from .enum_account_type import AccountType
from .enum_cleared_status import EnumClearedStatus
from .i_account import IAccount
from .i_comparable import IComparable
from .i_equatable import IEquatable
from .i_parser_emitter import IParserEmitter
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "AccountType",
    "EnumClearedStatus",
    "IAccount",
    "IComparable",
    "IEquatable",
    "IParserEmitter",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]
