# tests/data_model/interfaces/test_interface_enums.py
import pytest

from qif_ledger.data_model.interfaces import AccountType, EnumClearedStatus


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Bank", AccountType.BANK),
        ("cash", AccountType.CASH),
        ("CCard", AccountType.CREDIT_CARD),
        ("Invst", AccountType.INVESTMENT),
        ("Port", AccountType.INVESTMENT),
        ("401(k)", AccountType.INVESTMENT),
        ("Oth A", AccountType.ASSET),
        (" oth  l ", AccountType.LIABILITY),
    ],
)
def test_account_type_from_qif(text, expected):
    assert AccountType.from_qif(text) is expected


def test_account_type_unknown_and_header():
    with pytest.raises(ValueError):
        AccountType.from_qif("Cat")
    assert AccountType.LIABILITY.header == "!Type:Oth L"


@pytest.mark.parametrize(
    "char,expected",
    [
        ("", EnumClearedStatus.NOT_CLEARED),
        ("*", EnumClearedStatus.CLEARED),
        ("c", EnumClearedStatus.CLEARED),
        ("X", EnumClearedStatus.RECONCILED),
        ("R", EnumClearedStatus.RECONCILED),
    ],
)
def test_cleared_status_from_char(char, expected):
    assert EnumClearedStatus.from_char(char) is expected


def test_cleared_status_rejects_unknown_and_is_hashable():
    with pytest.raises(ValueError):
        EnumClearedStatus.from_char("?")
    assert EnumClearedStatus.RECONCILED.is_cleared is True
    assert EnumClearedStatus.NOT_CLEARED.is_cleared is False
    assert len({s for s in EnumClearedStatus}) == 3
