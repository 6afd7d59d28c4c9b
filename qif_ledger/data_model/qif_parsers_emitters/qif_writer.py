# qif_ledger/data_model/qif_parsers_emitters/qif_writer.py
from __future__ import annotations

import logging
from itertools import groupby
from operator import attrgetter

from qif_ledger.utilities.converters_scalar import format_qif_date
from qif_ledger.utilities.money import format_money

from ..errors import SerializationInvariantViolation
from ..interfaces import EnumClearedStatus
from ..q_wrapper import qif_codes as codes
from ..q_wrapper.financial_data import FinancialData
from ..q_wrapper.q_account import QAccount
from ..q_wrapper.q_split import QSplit
from ..q_wrapper.q_transaction import QTransaction

log = logging.getLogger(__name__)

_RESERVED_TAGS = codes.TRANSACTION_FIELD_CODES | {codes.HEADER_PREFIX, codes.END_OF_RECORD}


class QifWriter:
    """
    Serialize a ``FinancialData`` ledger to QIF text.

    Output layout:
      - an account list (``!Option:AutoSwitch`` ... ``!Clear:AutoSwitch``)
        declaring every account, so accounts without transactions survive;
      - for each run of consecutive transactions in the same account, an
        ``!Account`` block selecting it, one ``!Type:`` line and the records.
        Type lines follow account runs, not runs of the same account type:
        two Bank accounts in a row each get their own ``!Type:Bank`` line.

    Dates are written as MM/DD/YYYY and amounts in plain decimal notation.
    """

    def write(self, data: FinancialData) -> str:
        """
        Raises:
            SerializationInvariantViolation: if a transaction's splits do not
                add up to its amount, it references an unknown account, a
                value would break the line structure, or a passthrough tag
                is reserved.
        """
        for index, txn in enumerate(data.transactions):
            self._check(data, index, txn)

        lines: list[str] = []
        if data.accounts:
            lines.append(codes.HEADER_OPTION_AUTOSWITCH)
            lines.append(codes.HEADER_ACCOUNT)
            for account in data.accounts:
                lines.extend(self._account_lines(account))
                lines.append(codes.END_OF_RECORD)
            lines.append(codes.HEADER_CLEAR_AUTOSWITCH)

        for key, run in groupby(data.transactions, key=attrgetter("account")):
            account = data.get_account(key)
            lines.append(codes.HEADER_ACCOUNT)
            lines.append(codes.ACCOUNT_NAME.line(account.name))
            lines.append(codes.ACCOUNT_TYPE.line(account.type.qif_code))
            lines.append(codes.END_OF_RECORD)
            lines.append(account.type.header)
            for txn in run:
                lines.extend(self._transaction_lines(data, txn))
                lines.append(codes.END_OF_RECORD)

        log.debug(
            "Wrote %d account(s), %d transaction(s)", len(data.accounts), len(data)
        )
        return "\n".join(lines) + "\n" if lines else ""

    # region Validation

    def _check(self, data: FinancialData, index: int, txn: QTransaction) -> None:
        def fail(reason: str) -> SerializationInvariantViolation:
            return SerializationInvariantViolation(
                f"transaction {index} ({txn.describe()}): {reason}"
            )

        if not txn.splits_balance():
            raise fail(
                f"splits sum to {format_money(txn.split_total())}, "
                f"expected {format_money(txn.amount)}"
            )
        if not data.has_account(txn.account):
            raise fail(f"unknown account key {txn.account!r}")
        for target in [txn.transfer_account, *(s.transfer_account for s in txn.splits)]:
            if target and not data.has_account(target):
                raise fail(f"unknown transfer account key {target!r}")
        texts = [txn.payee, txn.category, txn.tag, txn.memo, txn.check_number]
        texts += [value for _, value in txn.passthrough]
        for split in txn.splits:
            texts += [split.category, split.tag, split.memo]
        if any("\n" in t or "\r" in t for t in texts):
            raise fail("a field value contains a line break")
        for tag, _ in txn.passthrough:
            if len(tag) != 1 or tag.isspace():
                raise fail(f"passthrough tag {tag!r} must be one visible character")
            if tag in _RESERVED_TAGS:
                raise fail(f"passthrough tag {tag!r} would be read back as a QIF field")

    # endregion Validation

    # region Emission

    @staticmethod
    def _account_lines(account: QAccount) -> list[str]:
        lines = [
            codes.ACCOUNT_NAME.line(account.name),
            codes.ACCOUNT_TYPE.line(account.type.qif_code),
        ]
        if account.description:
            lines.append(codes.ACCOUNT_DESCRIPTION.line(account.description))
        if account.credit_limit is not None:
            lines.append(codes.ACCOUNT_LIMIT.line(format_money(account.credit_limit)))
        if account.opening_balance != 0:
            lines.append(codes.ACCOUNT_BALANCE.line(format_money(account.opening_balance)))
        if account.balance_date is not None:
            lines.append(
                codes.ACCOUNT_BALANCE_DATE.line(format_qif_date(account.balance_date))
            )
        return lines

    @staticmethod
    def _category_text(data: FinancialData, category: str, tag: str, transfer: str) -> str:
        text = f"[{data.get_account(transfer).name}]" if transfer else category
        if tag:
            text += codes.CLASS_SEPARATOR + tag
        return text

    def _transaction_lines(self, data: FinancialData, txn: QTransaction) -> list[str]:
        lines = [
            codes.DATE.line(format_qif_date(txn.date)),
            codes.AMOUNT.line(format_money(txn.amount)),
        ]
        if txn.cleared is not EnumClearedStatus.NOT_CLEARED:
            lines.append(codes.CLEARED.line(txn.cleared.value))
        if txn.check_number:
            lines.append(codes.CHECK_NUMBER.line(txn.check_number))
        if txn.payee:
            lines.append(codes.PAYEE.line(txn.payee))
        if txn.memo:
            lines.append(codes.MEMO.line(txn.memo))
        category = self._category_text(data, txn.category, txn.tag, txn.transfer_account)
        if category:
            lines.append(codes.CATEGORY.line(category))
        lines.extend(f"{tag}{value}" for tag, value in txn.passthrough)
        for split in txn.splits:
            lines.extend(self._split_lines(data, split))
        return lines

    def _split_lines(self, data: FinancialData, split: QSplit) -> list[str]:
        lines = [
            codes.SPLIT_CATEGORY.line(
                self._category_text(
                    data, split.category, split.tag, split.transfer_account
                )
            )
        ]
        if split.memo:
            lines.append(codes.SPLIT_MEMO.line(split.memo))
        lines.append(codes.SPLIT_AMOUNT.line(format_money(split.amount)))
        return lines

    # endregion Emission
