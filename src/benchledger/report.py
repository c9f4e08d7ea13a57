"""Report sink -- collects normalized records and serializes them as JSON.

The Result Collection is an explicit value owned by the pipeline; the sink
only appends to it and writes it out once at the end of a run.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from benchledger.domain.models import Operator
from benchledger.errors import ReportWriteError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from benchledger.domain.models import NormalizedRecord

logger = logging.getLogger("benchledger.report")

PARAMETERS_FILE = "parameters.json"


class _EnumEncoder(json.JSONEncoder):
    """JSON encoder that serializes Enum values as their .value strings."""

    def default(self, o: object) -> str:
        """Serialize enum members to their value string."""
        if isinstance(o, Operator):
            return str(o.value)
        result: str = super().default(o)
        return result


class ResultCollection:
    """Append-only list of records for a single run. Duplicates are kept."""

    def __init__(self) -> None:
        self._records: list[NormalizedRecord] = []

    def append(self, record: NormalizedRecord) -> None:
        self._records.append(record)

    def __iter__(self) -> Iterator[NormalizedRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def record_to_dict(record: NormalizedRecord) -> dict[str, object]:
    """Convert a record to its report entry."""
    return {
        "name": record.full_name,
        "parameter_set_id": record.parameter_set.name,
        "parameter_set_label": record.label,
        "benchmark_name": record.benchmark_name,
        "operator": record.operator,
        "extra": record.extra,
        "tags": list(record.tags),
    }


def _parameters_to_dict(record: NormalizedRecord) -> dict[str, object]:
    params = record.parameter_set
    return {
        "display_name": record.benchmark_name,
        "crypto_parameters_alias": record.label,
        "crypto_parameters": {
            "message_modulus": params.message_modulus,
            "carry_modulus": params.carry_modulus,
        },
        "message_modulus": params.message_modulus,
        "carry_modulus": params.carry_modulus,
        "bit_size": record.extra,
        "decomposition_basis": list(record.tags),
        "operator_type": record.operator,
    }


def _dump(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, cls=_EnumEncoder) + "\n"


class ReportSink:
    """Accumulates records into a ResultCollection and writes the report.

    ``finalize`` is meant to be called once per run.
    """

    def __init__(self, collection: ResultCollection) -> None:
        self._collection = collection

    @property
    def collection(self) -> ResultCollection:
        return self._collection

    def add(self, record: NormalizedRecord) -> None:
        self._collection.append(record)

    def finalize(self, path: Path) -> Path:
        """Write every collected record to *path* as a JSON list."""
        content = _dump([record_to_dict(r) for r in self._collection])
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            msg = f"cannot write report {path}: {exc}"
            raise ReportWriteError(msg) from exc
        logger.info("Report with %d records written to %s", len(self._collection), path)
        return path

    def write_parameter_files(self, directory: Path) -> list[Path]:
        """Write ``<directory>/<full-name>/parameters.json`` for each record.

        A name seen twice overwrites the earlier file with the later record.
        """
        written: list[Path] = []
        for record in self._collection:
            name = record.full_name
            if "/" in name or "\\" in name or name in (".", ".."):
                msg = f"cannot use metric name '{name}' as a directory name"
                raise ReportWriteError(msg)
            target = directory / name / PARAMETERS_FILE
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(_dump(_parameters_to_dict(record)), encoding="utf-8")
            except OSError as exc:
                msg = f"cannot write parameters file {target}: {exc}"
                raise ReportWriteError(msg) from exc
            written.append(target)
        logger.info("Wrote %d parameter files under %s", len(written), directory)
        return written
