# qif_ledger/controllers/qif_loader.py
from __future__ import annotations

import logging
from pathlib import Path

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.qif_parsers_emitters.qif_file_parser_emitter import (
    QifFileParserEmitter,
)
from qif_ledger.data_model.qif_parsers_emitters.qif_reader import QifReader
from qif_ledger.utilities.core_util import open_for_read, open_for_write

log = logging.getLogger(__name__)


def load_ledger(
    path: Path, encoding: str = "utf-8", *, strict_transfers: bool = False
) -> FinancialData:
    """
    Read a QIF file into a ledger.

    Undecodable bytes are replaced rather than failing the whole import;
    parse errors propagate with record and line context.
    """
    path = Path(path)
    with open_for_read(path=path, binary=False, encoding=encoding, errors="replace", newline="") as f:
        text = f.read()
    parser = QifFileParserEmitter(reader=QifReader(strict_transfers=strict_transfers))
    data = parser.parse(text)
    log.info(
        "Loaded %s: %d account(s), %d transaction(s)",
        path,
        len(data.accounts),
        len(data),
    )
    return data


def save_ledger(data: FinancialData, path: Path, encoding: str = "utf-8") -> Path:
    """Write a ledger as QIF. The text is produced before the file is opened."""
    path = Path(path)
    text = QifFileParserEmitter().emit(data)
    with open_for_write(path, encoding=encoding, newline="") as f:
        f.write(text)
    log.info("Wrote %d transaction(s) to %s", len(data), path)
    return path
