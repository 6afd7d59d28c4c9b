# qif_ledger/cli.py
"""Command line entry point: ``qif-ledger``."""

from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from qif_ledger.analysis import (
    PeriodGranularity,
    category_analysis,
    classify_trend,
    detect_anomalies,
    monthly_report,
    trend_analysis,
)
from qif_ledger.analysis.report_frames import (
    anomaly_frame,
    category_frame,
    monthly_frame,
    trend_frame,
)
from qif_ledger.controllers.qif_loader import load_ledger, save_ledger
from qif_ledger.data_model.errors import LedgerError
from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.utilities.config_logging import configure_logging
from qif_ledger.utilities.settings import Settings

log = logging.getLogger(__name__)


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-ledger",
        description="Convert QIF (Quicken Interchange Format) files and report on them.",
    )
    ap.add_argument("--encoding", default=settings.encoding,
                    help=f"Text encoding of QIF files (default: {settings.encoding}). Try cp1252 for old exports.")
    ap.add_argument("--log-level", default=settings.log_level, help="Console log level")
    ap.add_argument("--log-file", type=Path, default=settings.log_file, help="Also log to this rotating file")
    ap.add_argument("--strict-transfers", action="store_true",
                    help="Fail when a transfer names an account the file never declares")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Read a QIF file and write it back in canonical form")
    p.add_argument("input", type=Path, help="Path to input .qif file")
    p.add_argument("output", type=Path, help="Path to output .qif file")

    p = sub.add_parser("monthly", help="Income and expense for one month")
    p.add_argument("input", type=Path)
    p.add_argument("--year", type=int, required=True)
    p.add_argument("--month", type=int, required=True)

    p = sub.add_parser("categories", help="Totals and shares per category")
    p.add_argument("input", type=Path)

    p = sub.add_parser("trend", help="Income and expense per period")
    p.add_argument("input", type=Path)
    p.add_argument("--granularity", choices=[g.value for g in PeriodGranularity],
                   default=settings.trend_granularity.value)

    p = sub.add_parser("anomalies", help="Unusually large or small amounts per category")
    p.add_argument("input", type=Path)
    p.add_argument("--threshold", type=_decimal, default=settings.anomaly_threshold,
                   help=f"Standard deviations from the mean (default: {settings.anomaly_threshold})")
    p.add_argument("--min-samples", type=int, default=settings.anomaly_min_samples,
                   help="Categories with fewer allocations are not examined")
    return ap


def _print_frame(df: pd.DataFrame) -> None:
    if df.empty:
        print("(no rows)")
    else:
        print(df.to_string(index=False))


def _run(args: argparse.Namespace, data: FinancialData) -> None:
    if args.command == "convert":
        save_ledger(data, args.output, encoding=args.encoding)
    elif args.command == "monthly":
        report = monthly_report(data, args.year, args.month)
        _print_frame(monthly_frame(report))
        print()
        _print_frame(category_frame(report.category_breakdown))
    elif args.command == "categories":
        _print_frame(category_frame(category_analysis(data)))
    elif args.command == "trend":
        points = trend_analysis(data, PeriodGranularity.from_text(args.granularity))
        _print_frame(trend_frame(points))
        print(f"\nTrend: {classify_trend(points).value}")
    elif args.command == "anomalies":
        flags = detect_anomalies(data, args.threshold, min_samples=args.min_samples)
        _print_frame(anomaly_frame(flags))
    else:
        raise SystemExit(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if not args.input.exists():
        raise SystemExit(f"Input QIF not found: {args.input}")
    if not args.input.is_file():
        raise SystemExit(f"Input path is not a file: {args.input}")

    try:
        data = load_ledger(args.input, encoding=args.encoding, strict_transfers=args.strict_transfers)
        _run(args, data)
    except LedgerError as e:
        log.error("%s: %s", args.input, e)
        raise SystemExit(f"{args.input}: {e}") from e
    except ValueError as e:
        raise SystemExit(str(e)) from e
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
