from .data_session import LedgerSession
from .ledger_merge import merge
from .qif_loader import load_ledger, save_ledger

__all__ = ["LedgerSession", "load_ledger", "merge", "save_ledger"]
