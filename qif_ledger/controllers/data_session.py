# qif_ledger/controllers/data_session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Optional

from qif_ledger.analysis.anomaly_detector import detect_anomalies
from qif_ledger.analysis.category_analysis import category_analysis
from qif_ledger.analysis.monthly_report import monthly_report
from qif_ledger.analysis.report_models import (
    AnomalyFlag,
    CategoryBreakdown,
    MonthlyReport,
    PeriodGranularity,
    TrendPoint,
)
from qif_ledger.analysis.trend_analysis import trend_analysis
from qif_ledger.controllers.ledger_merge import merge
from qif_ledger.controllers.qif_loader import load_ledger, save_ledger
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.qif_parsers_emitters.qif_reader import QifReader
from qif_ledger.utilities.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class LedgerSession:
    """
    Keeps one ledger in memory across several imports.

    Responsibilities:
    • Merge each imported file (or text) into the current ledger.
    • Remember which paths have been imported.
    • Run the reports with the thresholds from ``settings``.
    """

    settings: Settings = field(default_factory=Settings)
    ledger: FinancialData = field(default_factory=FinancialData)
    imported: list[Path] = field(default_factory=list)

    def import_file(self, path: Path) -> FinancialData:
        path = Path(path)
        log.info("Importing QIF: %s", path)
        incoming = load_ledger(path, encoding=self.settings.encoding)
        self.ledger = merge(self.ledger, incoming)
        self.imported.append(path)
        log.debug("Ledger now holds %d transaction(s)", len(self.ledger))
        return self.ledger

    def import_text(self, text: str) -> FinancialData:
        self.ledger = merge(self.ledger, QifReader().read(text))
        return self.ledger

    def save(self, path: Path) -> Path:
        return save_ledger(self.ledger, path, encoding=self.settings.encoding)

    # region Reports

    def monthly(self, year: int, month: int) -> MonthlyReport:
        return monthly_report(self.ledger, year, month)

    def categories(self) -> list[CategoryBreakdown]:
        return category_analysis(self.ledger)

    def trend(self, granularity: Optional[PeriodGranularity] = None) -> list[TrendPoint]:
        return trend_analysis(self.ledger, granularity or self.settings.trend_granularity)

    def anomalies(
        self,
        threshold_multiple: Optional[Decimal] = None,
        min_samples: Optional[int] = None,
    ) -> frozenset[AnomalyFlag]:
        return detect_anomalies(
            self.ledger,
            self.settings.anomaly_threshold if threshold_multiple is None else threshold_multiple,
            min_samples=self.settings.anomaly_min_samples if min_samples is None else min_samples,
        )

    # endregion Reports
