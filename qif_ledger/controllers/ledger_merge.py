# qif_ledger/controllers/ledger_merge.py
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.q_wrapper.q_transaction import NaturalKey

log = logging.getLogger(__name__)


def merge(existing: FinancialData, incoming: FinancialData) -> FinancialData:
    """
    Return a new ledger holding ``existing`` plus what ``incoming`` adds.

    Accounts are matched by key. The existing account wins, except that an
    existing placeholder is replaced by an incoming declared account.

    Transactions are matched on ``(date, amount, payee, account)``. An
    incoming transaction is dropped only while the existing ledger still has
    an unmatched transaction with the same key, so importing the same file
    twice adds nothing while repeated identical purchases inside one file
    are all kept. Neither argument is modified.
    """
    result = FinancialData(accounts=(replace(a) for a in existing.accounts))
    for account in incoming.accounts:
        if not result.has_account(account.key):
            result.add_account(replace(account))
        elif result.get_account(account.key).placeholder and not account.placeholder:
            result.add_account(replace(account))

    result.extend(existing.transactions)

    unmatched: Counter[NaturalKey] = Counter(t.natural_key for t in existing.transactions)
    added = 0
    for txn in incoming.transactions:
        key = txn.natural_key
        if unmatched[key] > 0:
            unmatched[key] -= 1
            continue
        result.add_transaction(txn)
        added += 1

    log.info(
        "Merged %d new transaction(s); skipped %d already present",
        added,
        len(incoming) - added,
    )
    return result
