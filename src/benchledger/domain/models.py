"""Core data types for benchledger.

All types are frozen dataclasses or enums.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Operator(Enum):
    """Operator classification attached to every report record."""

    ATOMIC = "atomic"


class Rounding(Enum):
    """Policy for converting fractional milliseconds to whole nanoseconds."""

    NEAREST = "nearest"
    TRUNCATE = "truncate"


@dataclass(frozen=True)
class ParameterSet:
    """A named, immutable parameter configuration a benchmark ran under."""

    name: str
    label: str
    message_modulus: int
    carry_modulus: int


@dataclass(frozen=True)
class DecodedName:
    """An encoded metric name split into its two parts."""

    benchmark: str
    parameter_set_name: str
    parameter_set: ParameterSet

    def encode(self, separator: str) -> str:
        """Rebuild the encoded metric name this value was decoded from."""
        return f"{self.benchmark}{separator}{self.parameter_set_name}"


@dataclass(frozen=True)
class NormalizedRecord:
    """One fully resolved timing measurement."""

    full_name: str
    benchmark_name: str
    parameter_set: ParameterSet
    label: str
    operator: Operator
    value_ns: int
    extra: int = 0
    tags: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RunSummary:
    """What a completed pipeline run produced."""

    files_read: int
    records_written: int
    skipped: int
    ledger_path: Path
    report_path: Path
