#!/usr/bin/env python3
"""
benchledger CLI -- normalize raw benchmark results into a ledger and a report.

Usage:
  benchledger RAW_RESULTS_DIR

Outputs go under ``<cwd>/<work_dir>`` (``tfhe`` unless configured in
``.benchledger/config.yaml``). Exit status is 0 on success and 1 on any
malformed input or I/O failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from benchledger.config import LOG_FILE, Settings, load_settings, logs_dir
from benchledger.console import configure, console
from benchledger.errors import BenchLedgerError
from benchledger.pipeline import run_pipeline
from benchledger.report import ResultCollection

logger = logging.getLogger("benchledger")


def _setup_logging(project_dir: Path, settings: Settings) -> logging.Handler:
    """Configure file logging to .benchledger/logs/benchledger.log."""
    log_dir = logs_dir(project_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_dir / LOG_FILE, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(settings.logging_level)
    root.addHandler(handler)
    return handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchledger",
        description="Parse raw benchmark results into a flat ledger and a JSON report",
    )
    parser.add_argument("raw_results_dir", help="Directory of raw results JSON files")
    return parser


def _print_summary(collection: ResultCollection) -> None:
    counts = Counter(record.label for record in collection)
    if counts:
        console.table(
            ["Parameter set", "Records"],
            [[label, str(n)] for label, n in sorted(counts.items())],
            title="Records by parameter set",
        )


def cmd_parse(raw_results_dir: Path, project_dir: Path, settings: Settings) -> None:
    """Run the pipeline and report the outcome."""
    collection = ResultCollection()
    summary = run_pipeline(raw_results_dir, settings, project_dir, collection=collection)

    console.success(f"Parsed {summary.records_written} results from {summary.files_read} files")
    if summary.skipped:
        console.warning(f"Skipped {summary.skipped} malformed inputs (see log)")
    console.kv(
        {
            "Files": str(summary.files_read),
            "Records": str(summary.records_written),
            "Skipped": str(summary.skipped),
            "Ledger": str(summary.ledger_path),
            "Report": str(summary.report_path),
        },
        title="Summary",
    )
    _print_summary(collection)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the `benchledger` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure(backend="auto")

    project_dir = Path.cwd()
    try:
        settings = load_settings(project_dir)
    except BenchLedgerError as exc:
        console.error(str(exc))
        sys.exit(1)

    handler = _setup_logging(project_dir, settings)
    try:
        cmd_parse(Path(args.raw_results_dir), project_dir, settings)
    except BenchLedgerError as exc:
        logger.exception("Run aborted")
        console.error(str(exc))
        sys.exit(1)
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()


if __name__ == "__main__":
    main()
