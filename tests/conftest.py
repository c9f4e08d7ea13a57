"""Shared pytest fixtures for benchledger tests.

Provides:
- A project directory with the default ``tfhe`` work directory
- A helper for writing raw results files
- A factory for NormalizedRecord with sensible defaults
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from benchledger.config import Settings
from benchledger.domain.models import NormalizedRecord, Operator
from benchledger.registry import PARAM_MESSAGE_2_CARRY_2_COMPACT_PK

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A project root containing the default work directory."""
    (tmp_path / "tfhe").mkdir()
    return tmp_path


@pytest.fixture()
def raw_dir(tmp_path: Path) -> Path:
    """An empty raw results directory."""
    path = tmp_path / "raw"
    path.mkdir()
    return path


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def write_raw() -> Callable[..., Path]:
    """Write a raw results file; *data* is dumped as JSON unless it is a str."""

    def _write(directory: Path, filename: str, data: Any) -> Path:
        path = directory / filename
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def make_record() -> Callable[..., NormalizedRecord]:
    """Factory for NormalizedRecord with sensible defaults."""

    def _factory(
        full_name: str = "add_mean_param_message_2_carry_2_compact_pk",
        *,
        benchmark_name: str = "add",
        value_ns: int = 2_500_000,
    ) -> NormalizedRecord:
        params = PARAM_MESSAGE_2_CARRY_2_COMPACT_PK
        return NormalizedRecord(
            full_name=full_name,
            benchmark_name=benchmark_name,
            parameter_set=params,
            label=params.label,
            operator=Operator.ATOMIC,
            value_ns=value_ns,
        )

    return _factory
