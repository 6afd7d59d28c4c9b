"""
qif_ledger: read and write QIF files and report on the resulting ledger.
"""

from .analysis import (
    AnomalyFlag,
    CategoryBreakdown,
    MonthlyReport,
    Period,
    PeriodGranularity,
    TrendDirection,
    TrendPoint,
    category_analysis,
    classify_trend,
    detect_anomalies,
    monthly_report,
    moving_average,
    trend_analysis,
)
from .controllers import LedgerSession, load_ledger, merge, save_ledger
from .data_model import (
    AccountType,
    EnumClearedStatus,
    FinancialData,
    LedgerError,
    MalformedRecord,
    ParseError,
    QAccount,
    QifReader,
    QifWriter,
    QSplit,
    QTransaction,
    SerializationInvariantViolation,
    SplitSumMismatch,
    UnresolvedTransferTarget,
    export_qif,
    import_qif,
)
from .utilities import Settings, configure_logging

__all__ = [
    "AccountType",
    "AnomalyFlag",
    "CategoryBreakdown",
    "EnumClearedStatus",
    "FinancialData",
    "LedgerError",
    "LedgerSession",
    "MalformedRecord",
    "MonthlyReport",
    "ParseError",
    "Period",
    "PeriodGranularity",
    "QAccount",
    "QSplit",
    "QTransaction",
    "QifReader",
    "QifWriter",
    "SerializationInvariantViolation",
    "Settings",
    "SplitSumMismatch",
    "TrendDirection",
    "TrendPoint",
    "UnresolvedTransferTarget",
    "category_analysis",
    "classify_trend",
    "configure_logging",
    "detect_anomalies",
    "export_qif",
    "import_qif",
    "load_ledger",
    "merge",
    "monthly_report",
    "moving_average",
    "save_ledger",
    "trend_analysis",
]
