# tests/data_model/q_wrapper/test_q_transaction.py
from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from qif_ledger.data_model.errors import SplitSumMismatch
from qif_ledger.data_model.interfaces import EnumClearedStatus, ITransaction
from qif_ledger.data_model.q_wrapper.q_split import QSplit
from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction


def _txn(**kwargs) -> QTransaction:
    fields = dict(account="acct", date=date(2024, 1, 15), amount=Decimal("-42.50"), payee="Corner Market")
    fields.update(kwargs)
    return QTransaction(**fields)


def test_transaction_is_immutable_and_hashable():
    # Arrange
    t1 = _txn(category="Groceries")
    t2 = _txn(category="Groceries")

    # Act / Assert
    assert t1 == t2
    assert len({t1, t2}) == 1, "Equal transactions must hash alike."
    with pytest.raises(FrozenInstanceError):
        t1.payee = "Other"  # type: ignore[misc]


def test_natural_key_is_date_amount_payee_account():
    # Arrange
    t = _txn(memo="ignored", category="ignored too")

    # Act
    key = t.natural_key

    # Assert
    assert key == (date(2024, 1, 15), Decimal("-42.50"), "Corner Market", "acct")


def test_splits_balance_and_validate():
    # Arrange
    balanced = _txn(
        amount=Decimal("-100"),
        splits=(QSplit("Groceries", Decimal("-60")), QSplit("Household", Decimal("-40"))),
    )
    unbalanced = _txn(
        amount=Decimal("-100"),
        splits=(QSplit("Groceries", Decimal("-60")), QSplit("Household", Decimal("-30"))),
    )

    # Act / Assert
    assert balanced.splits_balance() is True
    balanced.validate()
    assert unbalanced.splits_balance() is False
    with pytest.raises(SplitSumMismatch) as ei:
        unbalanced.validate()
    assert ei.value.expected == Decimal("-100")
    assert ei.value.actual == Decimal("-90")


def test_transaction_without_splits_always_balances():
    assert _txn().splits_balance() is True
    assert _txn().splits_exist() is False


def test_ordering_by_date_then_payee():
    # Arrange
    late = _txn(date=date(2024, 2, 1))
    early_b = _txn(payee="B")
    early_a = _txn(payee="A")

    # Act
    result = sorted([late, early_b, early_a])

    # Assert
    assert result == [early_a, early_b, late]


def test_to_dict_and_protocol_conformance():
    # Arrange
    t = _txn(
        category="Groceries",
        cleared=EnumClearedStatus.RECONCILED,
        passthrough=(("X", "custom"),),
    )

    # Act
    d = t.to_dict()

    # Assert
    assert isinstance(t, ITransaction)
    assert d["date"] == "2024-01-15"
    assert d["amount"] == "-42.50"
    assert d["cleared"] == "X"
    assert d["passthrough"] == ["Xcustom"]
    assert "memo" not in d, "Empty fields are omitted."
