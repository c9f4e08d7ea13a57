"""Flat ``name,nanoseconds`` ledger export.

The ledger is a per-run export: it is truncated when opened and only
appended to afterwards.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from benchledger.errors import LedgerWriteError

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from benchledger.domain.models import NormalizedRecord

logger = logging.getLogger("benchledger.ledger")


def format_ledger_line(record: NormalizedRecord) -> str:
    """Project a record onto its ledger line, newline included."""
    return f"{record.full_name},{record.value_ns}\n"


class LedgerWriter:
    """Sequential writer for the ledger file.

    Usage::

        with LedgerWriter(path) as ledger:
            ledger.write(record)
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._file: IO[str] | None = None
        self.lines_written = 0

    @property
    def path(self) -> Path:
        return self._path

    def open(self) -> None:
        """Create or truncate the ledger file."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._path.open("w", encoding="utf-8", newline="\n")
        except OSError as exc:
            msg = f"cannot create ledger file {self._path}: {exc}"
            raise LedgerWriteError(msg) from exc
        self.lines_written = 0
        logger.info("Ledger opened at %s", self._path)

    def write(self, record: NormalizedRecord) -> None:
        """Append one record to the ledger."""
        if self._file is None:
            msg = f"ledger {self._path} is not open"
            raise LedgerWriteError(msg)
        try:
            self._file.write(format_ledger_line(record))
            self._file.flush()
        except OSError as exc:
            msg = f"cannot write {record.full_name} result into {self._path}: {exc}"
            raise LedgerWriteError(msg) from exc
        self.lines_written += 1

    def close(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as exc:
            msg = f"cannot close ledger file {self._path}: {exc}"
            raise LedgerWriteError(msg) from exc
        finally:
            self._file = None
        logger.info("Ledger closed with %d lines", self.lines_written)

    def __enter__(self) -> LedgerWriter:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
