# tests/analysis/test_report_frames.py
from __future__ import annotations

from decimal import Decimal

from qif_ledger.analysis.anomaly_detector import detect_anomalies
from qif_ledger.analysis.category_analysis import category_analysis
from qif_ledger.analysis.monthly_report import monthly_report
from qif_ledger.analysis.report_frames import (
    CATEGORY_COLUMNS,
    anomaly_frame,
    category_frame,
    ledger_frame,
    monthly_frame,
    trend_frame,
)
from qif_ledger.analysis.trend_analysis import trend_analysis


def test_category_frame_keeps_decimals(ledger):
    # Act
    df = category_frame(category_analysis(ledger))

    # Assert
    assert list(df.columns) == CATEGORY_COLUMNS
    assert df["total_amount"].dtype == object
    first = df["total_amount"].iloc[0]
    assert isinstance(first, Decimal) and first == Decimal("2500.00")


def test_monthly_and_trend_frames(ledger):
    # Act
    monthly = monthly_frame(monthly_report(ledger, 2024, 1))
    trend = trend_frame(trend_analysis(ledger))

    # Assert
    assert monthly.loc[0, "period"] == "2024-01"
    assert monthly.loc[0, "net_income"] == Decimal("2100.00")
    assert list(trend["period"]) == ["2024-01", "2024-02"]


def test_anomaly_frame_empty_has_columns(ledger):
    df = anomaly_frame(detect_anomalies(ledger, 3))
    assert df.empty
    assert "z_score" in df.columns


def test_ledger_frame_shows_names(ledger):
    # Act
    df = ledger_frame(ledger)

    # Assert
    assert len(df) == 6
    assert df.loc[0, "account"] == "Checking"
    assert df.loc[2, "category"] == "[Visa]"
    assert df.loc[3, "splits"] == 2
