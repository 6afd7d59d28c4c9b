# tests/data_model/qif_parsers_emitters/test_qif_writer_output.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from qif_ledger.analysis.monthly_report import monthly_report
from qif_ledger.data_model.errors import SerializationInvariantViolation
from qif_ledger.data_model.interfaces import AccountType
from qif_ledger.data_model.q_wrapper import qif_codes as codes
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.q_wrapper.q_account import QAccount
from qif_ledger.data_model.q_wrapper.q_split import QSplit
from qif_ledger.data_model.q_wrapper.q_transaction import QTransaction
from qif_ledger.data_model.qif_parsers_emitters.qif_reader import _TRANSACTION_FIELDS, QifReader
from qif_ledger.data_model.qif_parsers_emitters.qif_writer import QifWriter


def _round_trip(data: FinancialData) -> FinancialData:
    return QifReader().read(QifWriter().write(data))


def test_round_trip_preserves_ledger(ledger):
    # Act
    again = _round_trip(ledger)

    # Assert
    assert again == ledger, "read(write(x)) must equal x for reader-produced ledgers."
    assert again.transactions[3].passthrough == (("X", "Unknown field"),)


def test_writing_is_stable(ledger):
    # Arrange
    first = QifWriter().write(ledger)

    # Act
    second = QifWriter().write(QifReader().read(first))

    # Assert
    assert first == second


def test_empty_ledger_writes_empty_text():
    assert QifWriter().write(FinancialData()) == ""


def test_single_grocery_purchase_survives_and_reports():
    # Arrange
    text = "!Type:Bank\nD01/15/2024\nT-42.50\nLGroceries\n^\n"
    data = QifReader().read(text)

    # Act
    again = _round_trip(data)
    report = monthly_report(again, 2024, 1)

    # Assert
    assert again == data
    assert report.total_expense == Decimal("42.50")
    assert report.total_income == Decimal("0")
    assert report.net_income == Decimal("-42.50")


def test_record_layout():
    # Arrange
    checking = QAccount(name="Checking")
    savings = QAccount(name="Savings", opening_balance=Decimal("10"))
    data = FinancialData(accounts=[checking, savings])
    data.add_transaction(
        QTransaction(
            account=checking.key,
            date=date(2024, 3, 7),
            amount=Decimal("-100.5"),
            payee="Store",
            memo="Weekly",
            check_number="12",
            splits=(
                QSplit("Groceries", Decimal("-80.5"), memo="food", tag="Home"),
                QSplit("", Decimal("-20"), transfer_account=savings.key),
            ),
        )
    )

    # Act
    lines = QifWriter().write(data).splitlines()

    # Assert
    assert lines[:4] == ["!Option:AutoSwitch", "!Account", "NChecking", "TBank"]
    assert "$10.00" in lines, "Opening balance is written in the account list."
    record = lines[lines.index("!Type:Bank") + 1 :]
    assert record == [
        "D03/07/2024",
        "T-100.50",
        "N12",
        "PStore",
        "MWeekly",
        "SGroceries/Home",
        "Efood",
        "$-80.50",
        "S[Savings]",
        "$-20.00",
        "^",
    ]


def test_one_type_line_per_account_run():
    # Arrange
    cash = QAccount(name="Wallet", type=AccountType.CASH)
    data = FinancialData(accounts=[cash])
    for day in (1, 2, 3):
        data.add_transaction(QTransaction(account=cash.key, date=date(2024, 1, day), amount=Decimal("-1")))

    # Act
    text = QifWriter().write(data)

    # Assert
    assert text.count("!Type:Cash") == 1
    assert text.count("\n^\n") == 1 + 1 + 3, "Account list entry, run header and three records."


def test_same_type_accounts_each_get_a_type_line():
    # Arrange
    checking = QAccount(name="Checking")
    savings = QAccount(name="Savings")
    data = FinancialData(accounts=[checking, savings])
    data.add_transaction(QTransaction(account=checking.key, date=date(2024, 1, 1), amount=Decimal("-1")))
    data.add_transaction(QTransaction(account=savings.key, date=date(2024, 1, 2), amount=Decimal("-2")))

    # Act
    text = QifWriter().write(data)

    # Assert
    assert text.count("!Type:Bank") == 2, "Each account run carries its own type line."
    assert QifReader().read(text) == data


class _StubLedger:
    """Minimal ledger shape that can hold transactions FinancialData would reject."""

    def __init__(self, accounts, transactions):
        self.accounts = tuple(accounts)
        self.transactions = tuple(transactions)

    def has_account(self, key):
        return any(a.key == key for a in self.accounts)

    def get_account(self, key):
        return next(a for a in self.accounts if a.key == key)

    def __len__(self):
        return len(self.transactions)


def test_unbalanced_splits_fail_fast():
    # Arrange
    acct = QAccount(name="Checking")
    bad = QTransaction(
        account=acct.key,
        date=date(2024, 1, 1),
        amount=Decimal("-10"),
        splits=(QSplit("A", Decimal("-4")),),
    )

    # Act / Assert
    with pytest.raises(SerializationInvariantViolation):
        QifWriter().write(_StubLedger([acct], [bad]))  # type: ignore[arg-type]


def test_unknown_account_fails_fast():
    bad = QTransaction(account="nope", date=date(2024, 1, 1), amount=Decimal("-10"))
    with pytest.raises(SerializationInvariantViolation):
        QifWriter().write(_StubLedger([], [bad]))  # type: ignore[arg-type]


def test_line_break_in_value_fails_fast():
    # Arrange
    acct = QAccount(name="Checking")
    data = FinancialData(accounts=[acct])
    data.add_transaction(QTransaction(account=acct.key, date=date(2024, 1, 1), amount=Decimal("1"), payee="a\nb"))

    # Act / Assert
    with pytest.raises(SerializationInvariantViolation):
        QifWriter().write(data)


@pytest.mark.parametrize("tag", ["!", "^", "D", "T", "L", "S", "$", " ", "XY", ""])
def test_reserved_passthrough_tag_fails_fast(tag):
    # Arrange
    acct = QAccount(name="Checking")
    data = FinancialData(accounts=[acct])
    data.add_transaction(
        QTransaction(account=acct.key, date=date(2024, 1, 1), amount=Decimal("1"), passthrough=((tag, ""),))
    )

    # Act / Assert
    with pytest.raises(SerializationInvariantViolation):
        QifWriter().write(data)


def test_reserved_tags_cover_every_dispatched_field():
    # Arrange / Act / Assert
    assert set(_TRANSACTION_FIELDS) == codes.TRANSACTION_FIELD_CODES, "Reader and writer must agree on field tags."


def test_amount_wider_than_decimal_context_round_trips():
    # Arrange
    data = QifReader().read("!Type:Bank\nD01/01/2024\nT1000000000000000000000000000\n^\n")

    # Act
    text = QifWriter().write(data)

    # Assert
    assert "T1000000000000000000000000000.00\n" in text
    assert QifReader().read(text) == data
