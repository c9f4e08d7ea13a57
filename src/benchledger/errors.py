"""Exception taxonomy for benchledger.

Two families matter to callers:

- ``InputMalformedError``: the raw data and the decoding contract disagree
  (bad JSON, missing separator, unknown parameter set, bad timing).
- ``PipelineIOError``: the filesystem refused a read or a write.

Both are fatal for a run unless the pipeline is configured to skip
malformed entries, in which case only ``InputMalformedError`` is skipped.
"""

from __future__ import annotations


class BenchLedgerError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class ConfigError(BenchLedgerError):
    """Raised when .benchledger/config.yaml cannot be read or is invalid."""


# ---------------------------------------------------------------------------
# Input-Malformed
# ---------------------------------------------------------------------------


class InputMalformedError(BenchLedgerError, ValueError):
    """Raised when raw input does not match the expected encoding."""


class MalformedMetricNameError(InputMalformedError):
    """Raised when an encoded metric name cannot be split."""


class UnknownParameterSetError(InputMalformedError, LookupError):
    """Raised when a parameter-set name is not in the registry."""


class InvalidTimingError(InputMalformedError):
    """Raised when a timing is negative, non-finite or not a number."""


class MalformedRawResultsError(InputMalformedError):
    """Raised when a raw results file is not a JSON object of name -> number."""


# ---------------------------------------------------------------------------
# I/O-Failure
# ---------------------------------------------------------------------------


class PipelineIOError(BenchLedgerError, OSError):
    """Raised when reading inputs or writing outputs fails."""


class RawResultsReadError(PipelineIOError):
    """Raised when the raw results directory or one of its files is unreadable."""


class LedgerWriteError(PipelineIOError):
    """Raised when the ledger file cannot be created or written."""


class ReportWriteError(PipelineIOError):
    """Raised when the report cannot be serialized to disk."""
