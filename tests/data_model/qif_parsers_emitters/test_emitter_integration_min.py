# tests/data_model/qif_parsers_emitters/test_emitter_integration_min.py
import importlib

from qif_ledger.data_model.interfaces import IParserEmitter
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.qif_parsers_emitters import (
    QifFileParserEmitter,
    export_qif,
    import_qif,
)

MODEL_MOD = "qif_ledger.data_model.q_wrapper.financial_data"
CODEC_PKG = "qif_ledger.data_model.qif_parsers_emitters"


def test_model_module_does_not_import_codec():
    """The ledger model must not depend on the codec modules."""
    model = importlib.import_module(MODEL_MOD)
    from_codec = [
        name
        for name, value in vars(model).items()
        if (getattr(value, "__module__", None) or "").startswith(CODEC_PKG)
    ]
    assert from_codec == [], "Model module should not pull names from the codec."


def test_parser_emitter_satisfies_protocol_and_round_trips(sample_text):
    # Arrange
    pe = QifFileParserEmitter()

    # Act
    data = pe.parse(sample_text)
    again = pe.parse(pe.emit(data))

    # Assert
    assert isinstance(pe, IParserEmitter)
    assert isinstance(data, FinancialData)
    assert again == data


def test_fake_emitter_is_structurally_compatible():
    class FakeEmitter:
        def parse(self, unparsed_string: str) -> FinancialData:
            return FinancialData()

        def emit(self, item: FinancialData) -> str:
            return "SENTINEL-QIF"

    assert isinstance(FakeEmitter(), IParserEmitter)


def test_module_level_helpers_match_facade(sample_text):
    data = import_qif(sample_text)
    assert export_qif(data) == QifFileParserEmitter().emit(data)
