# tests/data_model/q_wrapper/test_financial_data.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from qif_ledger.data_model.errors import SplitSumMismatch
from qif_ledger.data_model.interfaces import AccountType
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.q_wrapper.q_account import QAccount
from qif_ledger.data_model.q_wrapper.q_split import QSplit
from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction


@pytest.fixture
def checking() -> QAccount:
    return QAccount(name="Checking", opening_balance=Decimal("1000.00"))


def _txn(account: QAccount, day: int, amount: str, **kwargs) -> QTransaction:
    return QTransaction(account=account.key, date=date(2024, 1, day), amount=Decimal(amount), **kwargs)


def test_add_transaction_requires_known_account(checking):
    # Arrange
    data = FinancialData()

    # Act / Assert
    with pytest.raises(KeyError):
        data.add_transaction(_txn(checking, 1, "-5"))


def test_add_transaction_rejects_unbalanced_splits(checking):
    # Arrange
    data = FinancialData(accounts=[checking])
    bad = _txn(checking, 1, "-10", splits=(QSplit("A", Decimal("-4")), QSplit("B", Decimal("-5"))))

    # Act / Assert
    with pytest.raises(SplitSumMismatch):
        data.add_transaction(bad)
    assert len(data) == 0, "A rejected transaction must not be stored."


def test_add_transaction_rejects_unknown_transfer_target(checking):
    data = FinancialData(accounts=[checking])
    with pytest.raises(KeyError):
        data.add_transaction(_txn(checking, 1, "-10", transfer_account="missing"))


def test_redeclaring_an_account_merges_and_keeps_position(checking):
    # Arrange
    data = FinancialData(accounts=[QAccount(name="Visa", placeholder=True), checking])

    # Act
    stored = data.add_account(QAccount(name="Visa", type=AccountType.CREDIT_CARD))

    # Assert
    assert stored.placeholder is False
    assert stored.type is AccountType.CREDIT_CARD
    assert [a.name for a in data.accounts] == ["Visa", "Checking"]


def test_find_and_rename_account(checking):
    # Arrange
    data = FinancialData(accounts=[checking])
    data.add_transaction(_txn(checking, 1, "-5"))

    # Act
    found = data.find_account_by_name("CHECKING")
    renamed = data.rename_account(checking.key, "Main Checking")

    # Assert
    assert found is not None and found.key == checking.key
    assert renamed.key == checking.key, "Renaming must not change the key."
    assert data.get_account(checking.key).name == "Main Checking"
    assert len(data.transactions_for(checking.key)) == 1
    assert data.find_account_by_name("nothing") is None


def test_index_follows_new_transactions(checking):
    # Arrange
    data = FinancialData(accounts=[checking])
    data.add_transaction(_txn(checking, 1, "-5"))
    assert len(data.transactions_for(checking.key)) == 1

    # Act
    data.add_transaction(_txn(checking, 2, "-6"))

    # Assert
    assert len(data.transactions_for(checking.key)) == 2, "Index must be rebuilt after a change."
    assert data.transactions_for("unknown") == ()


def test_queries(checking):
    # Arrange
    data = FinancialData(accounts=[checking])
    data.extend(
        [
            _txn(checking, 3, "-25.00", payee="Cafe", category="Dining"),
            _txn(checking, 1, "2000.00", payee="Employer", category="Salary"),
            _txn(
                checking,
                9,
                "-100.00",
                payee="Store",
                splits=(QSplit("Groceries", Decimal("-70")), QSplit("Dining", Decimal("-30"))),
            ),
        ]
    )

    # Act / Assert
    assert data.categories == ["Dining", "Groceries", "Salary"]
    assert data.payees == ["Cafe", "Employer", "Store"]
    assert data.account_balance(checking.key) == Decimal("2875.00")
    assert data.date_range() == (date(2024, 1, 1), date(2024, 1, 9))
    assert FinancialData().date_range() is None


def test_structural_equality(checking):
    # Arrange
    a = FinancialData(accounts=[checking], transactions=[_txn(checking, 1, "-5")])
    b = FinancialData(accounts=[QAccount(name="Checking", opening_balance=Decimal("1000"))])
    b.add_transaction(_txn(checking, 1, "-5.00"))

    # Act / Assert
    assert a == b
    b.add_transaction(_txn(checking, 2, "-1"))
    assert a != b
    assert FinancialData().is_empty is True
    assert a.is_empty is False
