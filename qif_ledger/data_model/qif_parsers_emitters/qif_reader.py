# qif_ledger/data_model/qif_parsers_emitters/qif_reader.py
"""
Single-pass QIF reader.

The reader walks the text line by line, keeping everything it needs in an
explicit ``_ParserState``: the current section, the current account type, the
selected account and the lines of the record being collected. Field lines
are dispatched on their leading character; anything the ledger has no field
for is kept on the transaction as passthrough.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum, auto
from typing import Optional

from qif_ledger.utilities.converters_scalar import to_qif_date
from qif_ledger.utilities.core_util import is_null_or_whitespace, normalize_name
from qif_ledger.utilities.money import sum_money, to_money

from ..errors import MalformedRecord, SplitSumMismatch, UnresolvedTransferTarget
from ..interfaces import AccountType, EnumClearedStatus
from ..q_wrapper import qif_codes as codes
from ..q_wrapper.financial_data import FinancialData
from ..q_wrapper.q_account import QAccount
from ..q_wrapper.q_split import QSplit
from ..q_wrapper.q_transaction import QTransaction

log = logging.getLogger(__name__)

# (line_number, trimmed line)
_Line = tuple[int, str]


class _Section(Enum):
    NONE = auto()
    ACCOUNT = auto()
    TRANSACTION = auto()
    SKIP = auto()


@dataclass
class _ParserState:
    section: _Section = _Section.NONE
    header: str = ""
    account_type: Optional[AccountType] = None
    account_key: Optional[str] = None
    in_account_list: bool = False
    # Declared without a T line; typed by the next !Type header
    untyped_account_key: Optional[str] = None
    record: list[_Line] = field(default_factory=list)
    record_index: int = 0
    skipped: int = 0


@dataclass
class _Reference:
    """Where a transfer target was first mentioned, for strict-mode errors."""

    name: str
    record_index: int
    line_number: int
    line: str


@dataclass
class _PendingSplit:
    category: str
    line_number: int
    line: str
    memo: str = ""
    amount: Optional[Decimal] = None


class _RecordBuilder:
    """Collects the fields of one transaction record."""

    def __init__(self, reader: "_ReadPass", record_index: int) -> None:
        self.reader = reader
        self.record_index = record_index
        self.date: Optional[date] = None
        self.amount: Optional[Decimal] = None
        self.amount_alt: Optional[Decimal] = None
        self.amount_line: Optional[_Line] = None
        self.payee = ""
        self.category = ""
        self.tag = ""
        self.transfer_account = ""
        self.memo = ""
        self.cleared = EnumClearedStatus.NOT_CLEARED
        self.check_number = ""
        self.splits: list[QSplit] = []
        self.pending: Optional[_PendingSplit] = None
        self.passthrough: list[tuple[str, str]] = []

    def malformed(self, reason: str, line_number: int, line: str) -> MalformedRecord:
        return MalformedRecord(
            reason, record_index=self.record_index, line_number=line_number, line=line
        )

    # region Field handlers

    def on_date(self, value: str, line_number: int, line: str) -> None:
        try:
            self.date = to_qif_date(value)
        except ValueError as e:
            raise self.malformed(f"unparseable date ({e})", line_number, line) from e

    def _money(self, value: str, line_number: int, line: str) -> Decimal:
        try:
            return to_money(value)
        except ValueError as e:
            raise self.malformed(f"unparseable amount ({e})", line_number, line) from e

    def on_amount(self, value: str, line_number: int, line: str) -> None:
        self.amount = self._money(value, line_number, line)
        self.amount_line = (line_number, line)

    def on_amount_alt(self, value: str, line_number: int, line: str) -> None:
        self.amount_alt = self._money(value, line_number, line)
        if self.amount_line is None:
            self.amount_line = (line_number, line)

    def on_payee(self, value: str, line_number: int, line: str) -> None:
        self.payee = value

    def on_category(self, value: str, line_number: int, line: str) -> None:
        category, tag, transfer = self.reader.parse_category(
            value, self.record_index, line_number, line
        )
        self.category, self.tag, self.transfer_account = category, tag, transfer

    def on_memo(self, value: str, line_number: int, line: str) -> None:
        self.memo = value

    def on_cleared(self, value: str, line_number: int, line: str) -> None:
        try:
            self.cleared = EnumClearedStatus.from_char(value)
        except ValueError:
            log.warning(
                "Record %d, line %d: unknown cleared flag %r kept as passthrough",
                self.record_index,
                line_number,
                value,
            )
            self.passthrough.append((codes.CLEARED.code, value))

    def on_check_number(self, value: str, line_number: int, line: str) -> None:
        self.check_number = value

    def on_split_category(self, value: str, line_number: int, line: str) -> None:
        self.close_split()
        self.pending = _PendingSplit(category=value, line_number=line_number, line=line)

    def on_split_memo(self, value: str, line_number: int, line: str) -> None:
        if self.pending is None:
            self.passthrough.append((codes.SPLIT_MEMO.code, value))
            return
        self.pending.memo = value

    def on_split_amount(self, value: str, line_number: int, line: str) -> None:
        if self.pending is None or self.pending.amount is not None:
            self.passthrough.append((codes.SPLIT_AMOUNT.code, value))
            return
        self.pending.amount = self._money(value, line_number, line)

    # endregion Field handlers

    def close_split(self) -> None:
        pending = self.pending
        if pending is None:
            return
        self.pending = None
        if pending.amount is None:
            raise self.malformed("split has no amount", pending.line_number, pending.line)
        category, tag, transfer = self.reader.parse_category(
            pending.category, self.record_index, pending.line_number, pending.line
        )
        self.splits.append(
            QSplit(
                category=category,
                amount=pending.amount,
                memo=pending.memo,
                tag=tag,
                transfer_account=transfer,
            )
        )

    def build(self, account_key: str, first: _Line) -> QTransaction:
        self.close_split()
        if self.date is None:
            raise self.malformed("record has no date", *first)
        amount = self.amount if self.amount is not None else self.amount_alt
        if amount is None:
            raise self.malformed("record has no amount", *first)
        if self.splits:
            total = sum_money(s.amount for s in self.splits)
            if total != amount:
                line_number, line = self.amount_line or first
                raise SplitSumMismatch(
                    amount,
                    total,
                    record_index=self.record_index,
                    line_number=line_number,
                    line=line,
                )
        return QTransaction(
            account=account_key,
            date=self.date,
            amount=amount,
            payee=self.payee,
            category=self.category,
            tag=self.tag,
            memo=self.memo,
            cleared=self.cleared,
            check_number=self.check_number,
            splits=tuple(self.splits),
            transfer_account=self.transfer_account,
            passthrough=tuple(self.passthrough),
        )


_FieldHandler = Callable[[_RecordBuilder, str, int, str], None]

_TRANSACTION_FIELDS: dict[str, _FieldHandler] = {
    codes.DATE.code: _RecordBuilder.on_date,
    codes.AMOUNT.code: _RecordBuilder.on_amount,
    codes.AMOUNT_ALT.code: _RecordBuilder.on_amount_alt,
    codes.PAYEE.code: _RecordBuilder.on_payee,
    codes.CATEGORY.code: _RecordBuilder.on_category,
    codes.MEMO.code: _RecordBuilder.on_memo,
    codes.CLEARED.code: _RecordBuilder.on_cleared,
    codes.CHECK_NUMBER.code: _RecordBuilder.on_check_number,
    codes.SPLIT_CATEGORY.code: _RecordBuilder.on_split_category,
    codes.SPLIT_MEMO.code: _RecordBuilder.on_split_memo,
    codes.SPLIT_AMOUNT.code: _RecordBuilder.on_split_amount,
}

_ACCOUNT_FIELDS: dict[str, str] = {
    codes.ACCOUNT_NAME.code: "name",
    codes.ACCOUNT_TYPE.code: "type",
    codes.ACCOUNT_DESCRIPTION.code: "description",
    codes.ACCOUNT_LIMIT.code: "credit_limit",
    codes.ACCOUNT_BALANCE.code: "opening_balance",
    codes.ACCOUNT_BALANCE_DATE.code: "balance_date",
}


class _ReadPass:
    """State for one call to ``QifReader.read``."""

    def __init__(self, strict_transfers: bool) -> None:
        self.strict_transfers = strict_transfers
        self.data = FinancialData()
        self.state = _ParserState()
        # normalized name -> account key, filled as accounts appear
        self.names: dict[str, str] = {}
        self.references: dict[str, _Reference] = {}

    def run(self, text: str) -> FinancialData:
        for line_number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            if line.startswith(codes.HEADER_PREFIX):
                self._on_header(line_number, line)
            elif line == codes.END_OF_RECORD:
                self._finish_record()
            else:
                if self.state.section is _Section.NONE:
                    raise MalformedRecord(
                        "field line before any section header",
                        record_index=self.state.record_index,
                        line_number=line_number,
                        line=line,
                    )
                self.state.record.append((line_number, line))
        # A last record without its closing ^ is still a record
        self._finish_record()
        self._check_transfers()
        log.debug(
            "Read %d account(s), %d transaction(s); skipped %d list record(s)",
            len(self.data.accounts),
            len(self.data),
            self.state.skipped,
        )
        return self.data

    # region Headers

    def _on_header(self, line_number: int, line: str) -> None:
        state = self.state
        if state.record:
            raise MalformedRecord(
                "record not terminated before the next header",
                record_index=state.record_index,
                line_number=line_number,
                line=line,
            )
        lowered = line.casefold()
        state.header = line
        if lowered == codes.HEADER_OPTION_AUTOSWITCH.casefold():
            state.in_account_list = True
            state.section = _Section.ACCOUNT
        elif lowered == codes.HEADER_CLEAR_AUTOSWITCH.casefold():
            state.in_account_list = False
            state.section = _Section.NONE
        elif lowered == codes.HEADER_ACCOUNT.casefold():
            state.section = _Section.ACCOUNT
        elif lowered.startswith(codes.HEADER_TYPE_PREFIX.casefold()):
            self._on_type_header(line[len(codes.HEADER_TYPE_PREFIX) :])
        else:
            log.info("Skipping unsupported section %r (line %d)", line, line_number)
            state.section = _Section.SKIP

    def _on_type_header(self, code: str) -> None:
        state = self.state
        try:
            account_type = AccountType.from_qif(code)
        except ValueError:
            log.info("Skipping list section !Type:%s", code)
            state.section = _Section.SKIP
            return
        state.section = _Section.TRANSACTION
        state.account_type = account_type
        if state.untyped_account_key is not None:
            self.data.get_account(state.untyped_account_key).type = account_type
            state.untyped_account_key = None
        elif state.account_key is not None:
            selected = self.data.get_account(state.account_key)
            if selected.type is not account_type:
                log.warning(
                    "Account %r is %s but the section header says %s",
                    selected.name,
                    selected.type.qif_code,
                    account_type.qif_code,
                )

    # endregion Headers

    # region Records

    def _finish_record(self) -> None:
        state = self.state
        lines, state.record = state.record, []
        if not lines:
            return
        index = state.record_index
        state.record_index += 1
        if state.section is _Section.ACCOUNT:
            self._read_account(lines, index)
        elif state.section is _Section.TRANSACTION:
            self._read_transaction(lines, index)
        else:
            state.skipped += 1
            log.debug("Skipped record %d in section %r", index, state.header)

    def _read_account(self, lines: list[_Line], record_index: int) -> None:
        values: dict[str, object] = {}
        for line_number, line in lines:
            tag, value = line[0], line[1:].strip()
            attr = _ACCOUNT_FIELDS.get(tag)
            if attr is None:
                log.debug("Ignoring account field %r (line %d)", line, line_number)
                continue
            try:
                values[attr] = self._account_value(attr, value)
            except ValueError as e:
                raise MalformedRecord(
                    f"bad account {attr} ({e})",
                    record_index=record_index,
                    line_number=line_number,
                    line=line,
                ) from e
        name = values.get("name")
        if not isinstance(name, str) or is_null_or_whitespace(name):
            first_number, first_line = lines[0]
            raise MalformedRecord(
                "account block has no name",
                record_index=record_index,
                line_number=first_number,
                line=first_line,
            )
        key = self.names.get(normalize_name(name))
        was_typed = key is not None and not self.data.get_account(key).placeholder
        account = self.data.add_account(QAccount(**values))  # type: ignore[arg-type]
        self.names[normalize_name(name)] = account.key

        if self.state.in_account_list:
            return
        self.state.account_key = account.key
        self.state.untyped_account_key = (
            account.key if "type" not in values and not was_typed else None
        )

    @staticmethod
    def _account_value(attr: str, value: str) -> object:
        if attr == "type":
            return AccountType.from_qif(value)
        if attr in ("credit_limit", "opening_balance"):
            return to_money(value)
        if attr == "balance_date":
            return to_qif_date(value)
        return value

    def _read_transaction(self, lines: list[_Line], record_index: int) -> None:
        builder = _RecordBuilder(self, record_index)
        for line_number, line in lines:
            tag, value = line[0], line[1:].strip()
            handler = _TRANSACTION_FIELDS.get(tag)
            if handler is None:
                builder.passthrough.append((tag, value))
                continue
            handler(builder, value, line_number, line)
        txn = builder.build(self._current_account_key(), lines[0])
        self.data.add_transaction(txn)

    def _current_account_key(self) -> str:
        state = self.state
        if state.account_key is not None:
            return state.account_key
        assert state.account_type is not None
        name = f"{state.account_type.qif_code} Account"
        key = self.names.get(normalize_name(name))
        if key is None:
            account = self.data.add_account(QAccount(name=name, type=state.account_type))
            key = self.names[normalize_name(name)] = account.key
        return key

    # endregion Records

    # region Categories and transfers

    def parse_category(
        self, value: str, record_index: int, line_number: int, line: str
    ) -> tuple[str, str, str]:
        """Split an L/S value into ``(category, tag, transfer_account_key)``."""
        if value.startswith("[") and "]" in value:
            close = value.index("]")
            name = value[1:close].strip()
            rest = value[close + 1 :]
            tag = rest[1:] if rest.startswith(codes.CLASS_SEPARATOR) else ""
            key = self._resolve_transfer(name, record_index, line_number, line)
            return "", tag.strip(), key
        category, _, tag = value.partition(codes.CLASS_SEPARATOR)
        category = category.strip()
        if category == codes.SPLIT_PLACEHOLDER:
            category = ""
        return category, tag.strip(), ""

    def _resolve_transfer(
        self, name: str, record_index: int, line_number: int, line: str
    ) -> str:
        if not name:
            raise MalformedRecord(
                "empty transfer account name",
                record_index=record_index,
                line_number=line_number,
                line=line,
            )
        normalized = normalize_name(name)
        key = self.names.get(normalized)
        if key is not None:
            return key
        account = self.data.add_account(QAccount(name=name, placeholder=True))
        self.names[normalized] = account.key
        self.references[account.key] = _Reference(name, record_index, line_number, line)
        log.debug("Created placeholder account %r for a transfer", name)
        return account.key

    def _check_transfers(self) -> None:
        if not self.strict_transfers:
            return
        for key, ref in self.references.items():
            if self.data.get_account(key).placeholder:
                raise UnresolvedTransferTarget(
                    f"transfer to undeclared account {ref.name!r}",
                    record_index=ref.record_index,
                    line_number=ref.line_number,
                    line=ref.line,
                )

    # endregion Categories and transfers


class QifReader:
    """
    Parse QIF text into a ``FinancialData`` ledger.

    Args:
        strict_transfers: When True, a transfer to an account that the text
            never declares raises ``UnresolvedTransferTarget`` instead of
            leaving a placeholder account in the ledger.
    """

    def __init__(self, strict_transfers: bool = False) -> None:
        self.strict_transfers = strict_transfers

    def read(self, text: str) -> FinancialData:
        """
        Raises:
            MalformedRecord: missing or unparseable date/amount, a split
                without an amount, or a broken record boundary.
            SplitSumMismatch: split amounts do not add up to the record amount.
            UnresolvedTransferTarget: strict mode only.
        """
        return _ReadPass(self.strict_transfers).run(text)
