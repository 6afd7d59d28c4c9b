"""
Read-only analysis over a ``FinancialData`` ledger.
"""

from .anomaly_detector import detect_anomalies
from .category_analysis import category_analysis
from .monthly_report import monthly_report
from .report_models import (
    AnomalyFlag,
    CategoryBreakdown,
    MonthlyReport,
    Period,
    PeriodGranularity,
    TrendDirection,
    TrendPoint,
)
from .trend_analysis import classify_trend, moving_average, trend_analysis

__all__ = [
    "AnomalyFlag",
    "CategoryBreakdown",
    "MonthlyReport",
    "Period",
    "PeriodGranularity",
    "TrendDirection",
    "TrendPoint",
    "category_analysis",
    "classify_trend",
    "detect_anomalies",
    "monthly_report",
    "moving_average",
    "trend_analysis",
]
