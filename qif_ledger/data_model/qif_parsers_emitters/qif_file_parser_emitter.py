from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..interfaces import IParserEmitter
from ..q_wrapper.financial_data import FinancialData
from .qif_reader import QifReader
from .qif_writer import QifWriter

log = logging.getLogger(__name__)


class QifFileParserEmitter(IParserEmitter[FinancialData]):
    """Parse QIF text into a FinancialData ledger and emit it back to text."""

    def __init__(
        self,
        reader: QifReader | None = None,
        writer: QifWriter | None = None,
    ) -> None:
        self.reader = reader or QifReader()
        self.writer = writer or QifWriter()

    # --- required by IParserEmitter ---

    def parse(self, unparsed_string: str) -> FinancialData:
        return self.reader.read(unparsed_string)

    def emit(self, item: FinancialData) -> str:
        return self.writer.write(item)


def import_qif(text: str, *, strict_transfers: bool = False) -> FinancialData:
    """Parse QIF text into a new ledger. Raises ``ParseError`` subclasses."""
    return QifReader(strict_transfers=strict_transfers).read(text)


def export_qif(data: FinancialData) -> str:
    """Serialize a ledger to QIF text."""
    return QifWriter().write(data)


if TYPE_CHECKING:
    _is_parser_emitter: type[IParserEmitter[FinancialData]] = QifFileParserEmitter
