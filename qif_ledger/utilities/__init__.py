from .config_logging import LOGGING, configure_logging
from .converters_scalar import format_qif_date, to_qif_date
from .core_util import (
    is_null_or_whitespace,
    normalize_name,
    open_for_read,
    open_for_write,
)
from .money import format_money, percent_of, sum_money, to_money
from .periods import Period, PeriodGranularity, iter_periods, same_month
from .settings import Settings

__all__ = [
    "LOGGING",
    "configure_logging",
    "format_qif_date",
    "to_qif_date",
    "is_null_or_whitespace",
    "normalize_name",
    "open_for_read",
    "open_for_write",
    "format_money",
    "percent_of",
    "sum_money",
    "to_money",
    "Period",
    "PeriodGranularity",
    "iter_periods",
    "same_month",
    "Settings",
]
