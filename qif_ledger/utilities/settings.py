"""Runtime settings for the ledger collaborators (CLI, import session)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping, Optional

from qif_ledger.utilities.periods import PeriodGranularity

log = logging.getLogger(__name__)

ENV_PREFIX = "QIF_LEDGER_"


@dataclass(frozen=True)
class Settings:
    """
    Defaults the collaborators hand to the core.

    Attributes:
        encoding: Text encoding of QIF files.
        anomaly_threshold: Standard-deviation multiple passed to ``detect_anomalies``.
        anomaly_min_samples: Smallest category sample size that can be flagged.
        trend_granularity: Period size for ``trend_analysis``.
        log_level: Console log level.
        log_file: Optional rotating log file.
    """

    encoding: str = "utf-8"
    anomaly_threshold: Decimal = Decimal("3")
    anomaly_min_samples: int = 3
    trend_granularity: PeriodGranularity = PeriodGranularity.MONTH
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``QIF_LEDGER_*`` environment variables.

        Raises:
            ValueError: if a variable holds a value of the wrong shape.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> Optional[str]:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or not raw.strip():
                return None
            return raw.strip()

        threshold = defaults.anomaly_threshold
        raw_threshold = _get("ANOMALY_THRESHOLD")
        if raw_threshold is not None:
            try:
                threshold = Decimal(raw_threshold)
            except InvalidOperation:
                raise ValueError(
                    f"{ENV_PREFIX}ANOMALY_THRESHOLD must be a number, got {raw_threshold!r}"
                ) from None

        min_samples = defaults.anomaly_min_samples
        raw_min = _get("ANOMALY_MIN_SAMPLES")
        if raw_min is not None:
            try:
                min_samples = int(raw_min)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}ANOMALY_MIN_SAMPLES must be an integer, got {raw_min!r}"
                ) from None

        granularity = defaults.trend_granularity
        raw_granularity = _get("TREND_GRANULARITY")
        if raw_granularity is not None:
            granularity = PeriodGranularity.from_text(raw_granularity)

        raw_log_file = _get("LOG_FILE")
        settings = cls(
            encoding=_get("ENCODING") or defaults.encoding,
            anomaly_threshold=threshold,
            anomaly_min_samples=min_samples,
            trend_granularity=granularity,
            log_level=(_get("LOG_LEVEL") or defaults.log_level).upper(),
            log_file=Path(raw_log_file).expanduser() if raw_log_file else None,
        )
        log.debug("Settings loaded from environment: %s", settings)
        return settings


__all__ = ["Settings", "ENV_PREFIX"]
