from .financial_data import FinancialData
from .q_account import QAccount, account_key
from .q_split import QSplit
from .q_transaction import QTransaction
from .qif_codes import QifCode

__all__ = [
    "FinancialData",
    "QAccount",
    "QSplit",
    "QTransaction",
    "QifCode",
    "account_key",
]
