"""Run the full raw-results -> ledger + report pipeline.

Strict mode (the default) aborts on the first malformed entry. With
``skip_malformed`` enabled, malformed files and entries are logged and
skipped; I/O failures abort in both modes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from benchledger.decoder import decode_metric_name
from benchledger.domain.models import NormalizedRecord, Operator, RunSummary
from benchledger.errors import InputMalformedError, PipelineIOError
from benchledger.ledger import LedgerWriter
from benchledger.registry import DEFAULT_REGISTRY, ParameterRegistry
from benchledger.report import ReportSink, ResultCollection
from benchledger.units import ms_to_ns
from benchledger.walker import list_raw_result_files, load_raw_results

if TYPE_CHECKING:
    from pathlib import Path

    from benchledger.config import Settings

logger = logging.getLogger("benchledger.pipeline")

OPERATOR = Operator.ATOMIC


def normalize_entry(
    full_name: str,
    value: float,
    settings: Settings,
    registry: ParameterRegistry = DEFAULT_REGISTRY,
) -> NormalizedRecord:
    """Decode one raw entry and convert its timing."""
    decoded = decode_metric_name(full_name, registry, settings.separator)
    value_ns = ms_to_ns(value, settings.rounding)
    return NormalizedRecord(
        full_name=full_name,
        benchmark_name=decoded.benchmark,
        parameter_set=decoded.parameter_set,
        label=decoded.parameter_set.label,
        operator=OPERATOR,
        value_ns=value_ns,
    )


def _malformed(path: Path, exc: InputMalformedError, settings: Settings) -> None:
    """Skip or re-raise *exc* with the offending file named."""
    if not settings.skip_malformed:
        msg = str(exc) if str(exc).startswith(str(path)) else f"{path}: {exc}"
        raise type(exc)(msg) from exc
    logger.warning("Skipping malformed input in %s: %s", path, exc)


def run_pipeline(
    raw_results_dir: Path,
    settings: Settings,
    project_root: Path,
    registry: ParameterRegistry = DEFAULT_REGISTRY,
    collection: ResultCollection | None = None,
) -> RunSummary:
    """Process every file in *raw_results_dir* and write the ledger and report.

    Output paths are resolved from *settings* relative to *project_root*.
    """
    output_dir = settings.output_dir(project_root)
    if not output_dir.is_dir():
        msg = f"work directory {output_dir} does not exist"
        raise PipelineIOError(msg)

    ledger_path = settings.ledger_path(project_root)
    report_path = settings.report_path(project_root)
    sink = ReportSink(collection if collection is not None else ResultCollection())

    files_read = 0
    skipped = 0
    logger.info("Parsing raw results from %s", raw_results_dir)

    with LedgerWriter(ledger_path) as ledger:
        for path in list_raw_result_files(raw_results_dir):
            try:
                results = load_raw_results(path)
            except InputMalformedError as exc:
                _malformed(path, exc, settings)
                skipped += 1
                continue
            files_read += 1

            for full_name, value in results.items():
                try:
                    record = normalize_entry(full_name, value, settings, registry)
                except InputMalformedError as exc:
                    _malformed(path, exc, settings)
                    skipped += 1
                    continue
                logger.debug("%s -> %d ns", full_name, record.value_ns)
                ledger.write(record)
                sink.add(record)

        records_written = ledger.lines_written

    sink.finalize(report_path)
    if settings.parameter_files:
        sink.write_parameter_files(settings.parameters_path(project_root))

    logger.info(
        "Run complete: %d files, %d records, %d skipped",
        files_read,
        records_written,
        skipped,
    )
    return RunSummary(
        files_read=files_read,
        records_written=records_written,
        skipped=skipped,
        ledger_path=ledger_path,
        report_path=report_path,
    )
