# tests/utilities/test_converters_scalar.py
from __future__ import annotations

from datetime import date, datetime

import pytest

from qif_ledger.utilities.converters_scalar import format_qif_date, to_qif_date


@pytest.mark.parametrize(
    "raw,expect_iso",
    [
        ("12/31'24", "2024-12-31"),
        ("1/ 5'24", "2024-01-05"),
        ("12/31/2024", "2024-12-31"),
        ("1/5/24", "2024-01-05"),
        ("12-31-2024", "2024-12-31"),
        ("2024-12-31", "2024-12-31"),
        ("2024/12/31", "2024-12-31"),
        ("20241231", "2024-12-31"),
        ("31/12/2024", "2024-12-31"),
    ],
)
def test_to_qif_date_formats(raw, expect_iso):
    assert to_qif_date(raw).isoformat() == expect_iso


def test_to_qif_date_passes_dates_through():
    assert to_qif_date(date(2024, 1, 2)) == date(2024, 1, 2)
    assert to_qif_date(datetime(2024, 1, 2, 13, 0)) == date(2024, 1, 2)


@pytest.mark.parametrize("raw", ["", "   ", "yesterday", "13/13/2024"])
def test_to_qif_date_rejects(raw):
    with pytest.raises(ValueError):
        to_qif_date(raw)


def test_format_qif_date_is_zero_padded():
    assert format_qif_date(date(2024, 1, 5)) == "01/05/2024"
