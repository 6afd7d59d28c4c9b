# qif_ledger/data_model/q_wrapper/financial_data.py
"""
The ledger aggregate.

``FinancialData`` owns the accounts (ordered, keyed by ``QAccount.key``) and
the transactions (ordered list, the source of truth). The per-account index
is derived data and is rebuilt lazily whenever the list changes.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Iterator, Optional

from qif_ledger.utilities.core_util import normalize_name
from qif_ledger.utilities.money import sum_money

from .q_account import QAccount
from .q_transaction import QTransaction

log = logging.getLogger(__name__)


class FinancialData:
    def __init__(
        self,
        accounts: Iterable[QAccount] = (),
        transactions: Iterable[QTransaction] = (),
    ) -> None:
        self._accounts: dict[str, QAccount] = {}
        self._transactions: list[QTransaction] = []
        self._index: Optional[dict[str, list[QTransaction]]] = None
        for account in accounts:
            self.add_account(account)
        self.extend(transactions)

    # region Accounts

    @property
    def accounts(self) -> tuple[QAccount, ...]:
        return tuple(self._accounts.values())

    def add_account(self, account: QAccount) -> QAccount:
        """
        Store ``account`` and return the stored instance.

        Declaring a key that is already present merges the new details into
        the existing account (and clears its placeholder flag when the new
        declaration is a real one). The account keeps its original position.
        """
        existing = self._accounts.get(account.key)
        if existing is None:
            self._accounts[account.key] = account
            return account
        merged = existing.merged_with(account)
        self._accounts[account.key] = merged
        return merged

    def get_account(self, key: str) -> QAccount:
        """
        Raises:
            KeyError: if no account has this key.
        """
        return self._accounts[key]

    def has_account(self, key: str) -> bool:
        return key in self._accounts

    def find_account_by_name(self, name: str) -> Optional[QAccount]:
        wanted = normalize_name(name)
        for account in self._accounts.values():
            if normalize_name(account.name) == wanted:
                return account
        return None

    def rename_account(self, key: str, new_name: str) -> QAccount:
        """Change an account's display name; its key and transactions are untouched."""
        if not new_name.strip():
            raise ValueError("Account name must not be empty")
        account = self.get_account(key)
        account.name = new_name
        log.debug("Renamed account %s to %r", key, new_name)
        return account

    # endregion Accounts

    # region Transactions

    @property
    def transactions(self) -> tuple[QTransaction, ...]:
        return tuple(self._transactions)

    def add_transaction(self, txn: QTransaction) -> None:
        """
        Append a transaction.

        Raises:
            KeyError: if ``txn.account`` (or a transfer target) is not a known account.
            SplitSumMismatch: if the splits do not add up to the amount.
        """
        if txn.account not in self._accounts:
            raise KeyError(f"Unknown account key {txn.account!r} for {txn.describe()}")
        targets = [txn.transfer_account] + [s.transfer_account for s in txn.splits]
        for target in targets:
            if target and target not in self._accounts:
                raise KeyError(
                    f"Unknown transfer account key {target!r} for {txn.describe()}"
                )
        txn.validate()
        self._transactions.append(txn)
        self._index = None

    def extend(self, transactions: Iterable[QTransaction]) -> None:
        for txn in transactions:
            self.add_transaction(txn)

    def rebuild_index(self) -> None:
        index: dict[str, list[QTransaction]] = defaultdict(list)
        for txn in self._transactions:
            index[txn.account].append(txn)
        self._index = dict(index)

    def transactions_for(self, key: str) -> tuple[QTransaction, ...]:
        if self._index is None:
            self.rebuild_index()
        assert self._index is not None
        return tuple(self._index.get(key, ()))

    # endregion Transactions

    # region Queries

    @property
    def categories(self) -> list[str]:
        """Distinct non-empty categories of transactions and splits, sorted."""
        found: set[str] = set()
        for txn in self._transactions:
            if txn.category:
                found.add(txn.category)
            found.update(s.category for s in txn.splits if s.category)
        return sorted(found)

    @property
    def payees(self) -> list[str]:
        return sorted({t.payee for t in self._transactions if t.payee})

    @property
    def currencies(self) -> set[str]:
        return {a.currency for a in self._accounts.values()}

    def account_balance(self, key: str) -> Decimal:
        """Opening balance plus every transaction booked to the account."""
        account = self.get_account(key)
        return account.opening_balance + sum_money(
            t.amount for t in self.transactions_for(key)
        )

    def date_range(self) -> Optional[tuple[date, date]]:
        if not self._transactions:
            return None
        dates = [t.date for t in self._transactions]
        return min(dates), max(dates)

    # endregion Queries

    @property
    def is_empty(self) -> bool:
        return not self._accounts and not self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[QTransaction]:
        return iter(self._transactions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FinancialData):
            return NotImplemented
        return (
            list(self._accounts.items()) == list(other._accounts.items())
            and self._transactions == other._transactions
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"FinancialData(accounts={len(self._accounts)}, "
            f"transactions={len(self._transactions)})"
        )
