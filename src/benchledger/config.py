"""Path constants and configuration loading.

Configuration is optional and lives in ``.benchledger/config.yaml`` under the
directory the tool is invoked from::

    separator: "_mean_"
    rounding: nearest        # or: truncate
    work_dir: tfhe
    ledger_file: wasm_pk_gen.csv
    report_file: wasm_pk_gen.report.json
    parameter_files: false
    parameters_dir: benchmarks_parameters
    skip_malformed: false
    log_level: INFO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from benchledger.decoder import SEPARATOR
from benchledger.domain.models import Rounding
from benchledger.errors import ConfigError

# .benchledger/ directory structure
CONFIG_DIR = ".benchledger"
CONFIG_FILE = "config.yaml"
LOGS_DIR = "logs"
LOG_FILE = "benchledger.log"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_dir(project_root: Path) -> Path:
    """Return the .benchledger directory path for a project."""
    return project_root / CONFIG_DIR


def config_file(project_root: Path) -> Path:
    """Return the config.yaml path."""
    return config_dir(project_root) / CONFIG_FILE


def logs_dir(project_root: Path) -> Path:
    """Return the logs directory path."""
    return config_dir(project_root) / LOGS_DIR


@dataclass(frozen=True)
class Settings:
    """Resolved run settings. Every field has a working default."""

    separator: str = SEPARATOR
    rounding: Rounding = Rounding.NEAREST
    work_dir: str = "tfhe"
    ledger_file: str = "wasm_pk_gen.csv"
    report_file: str = "wasm_pk_gen.report.json"
    parameter_files: bool = False
    parameters_dir: str = "benchmarks_parameters"
    skip_malformed: bool = False
    log_level: str = "INFO"

    def output_dir(self, project_root: Path) -> Path:
        return project_root / self.work_dir

    def ledger_path(self, project_root: Path) -> Path:
        return self.output_dir(project_root) / self.ledger_file

    def report_path(self, project_root: Path) -> Path:
        return self.output_dir(project_root) / self.report_file

    def parameters_path(self, project_root: Path) -> Path:
        return self.output_dir(project_root) / self.parameters_dir

    @property
    def logging_level(self) -> int:
        level: int = getattr(logging, self.log_level)
        return level


_STR_KEYS = ("separator", "work_dir", "ledger_file", "report_file", "parameters_dir", "log_level")
_BOOL_KEYS = ("parameter_files", "skip_malformed")


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build Settings from a parsed config mapping, validating every key."""
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        msg = f"Unknown config keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    values: dict[str, Any] = {}
    for key in _STR_KEYS:
        if key in data:
            if not isinstance(data[key], str) or not data[key]:
                msg = f"Config key '{key}' must be a non-empty string"
                raise ConfigError(msg)
            values[key] = data[key]
    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                msg = f"Config key '{key}' must be true or false"
                raise ConfigError(msg)
            values[key] = data[key]

    if "rounding" in data:
        try:
            values["rounding"] = Rounding(data["rounding"])
        except ValueError:
            choices = ", ".join(r.value for r in Rounding)
            msg = f"Config key 'rounding' must be one of: {choices}"
            raise ConfigError(msg) from None

    if "log_level" in values:
        level = values["log_level"].upper()
        if level not in _LOG_LEVELS:
            msg = f"Config key 'log_level' must be one of: {', '.join(_LOG_LEVELS)}"
            raise ConfigError(msg)
        values["log_level"] = level

    return Settings(**values)


def load_settings(project_root: Path) -> Settings:
    """Load settings from .benchledger/config.yaml, or defaults if absent."""
    cf = config_file(project_root)
    if not cf.exists():
        return Settings()
    try:
        data = yaml.safe_load(cf.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read config {cf}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Config {cf} must be a mapping"
        raise ConfigError(msg)
    return settings_from_dict(data)
