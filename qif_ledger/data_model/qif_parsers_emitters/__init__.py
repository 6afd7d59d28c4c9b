from .qif_file_parser_emitter import QifFileParserEmitter, export_qif, import_qif
from .qif_reader import QifReader
from .qif_writer import QifWriter

__all__ = [
    "QifFileParserEmitter",
    "QifReader",
    "QifWriter",
    "export_qif",
    "import_qif",
]
