"""Enumerate and parse the raw result files of one input directory.

Every direct entry of the directory is a raw results file: a JSON object
mapping encoded metric names to timings in milliseconds.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from benchledger.errors import MalformedRawResultsError, RawResultsReadError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("benchledger.walker")


def list_raw_result_files(directory: Path) -> list[Path]:
    """Return every direct entry of *directory*, sorted by name."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        msg = f"cannot read results directory {directory}: {exc}"
        raise RawResultsReadError(msg) from exc
    logger.info("Found %d raw result files in %s", len(entries), directory)
    return entries


def load_raw_results(path: Path) -> dict[str, float]:
    """Read and validate one raw results file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot open raw results file {path}: {exc}"
        raise RawResultsReadError(msg) from exc

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON: {exc}"
        raise MalformedRawResultsError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{path}: expected a JSON object, got {type(data).__name__}"
        raise MalformedRawResultsError(msg)

    for name, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"{path}: value for '{name}' is not a number: {value!r}"
            raise MalformedRawResultsError(msg)
    return data

