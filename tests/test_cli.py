"""Tests for the benchledger command line entry point."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from benchledger.cli import build_parser, main

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

NAME = "add_mean_param_message_2_carry_2_compact_pk"


@pytest.fixture()
def in_project(project: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the CLI from inside the project root."""
    monkeypatch.chdir(project)
    return project


class TestParser:
    def test_single_positional(self) -> None:
        args = build_parser().parse_args(["raw"])
        assert args.raw_results_dir == "raw"

    def test_missing_argument_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args([])
        assert excinfo.value.code == 2

    def test_no_options_beyond_the_directory(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--version"])
        assert excinfo.value.code == 2


class TestMain:
    def test_success(
        self,
        in_project: Path,
        raw_dir: Path,
        write_raw: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_raw(raw_dir, "run.json", {NAME: 2.5})

        main([str(raw_dir)])

        ledger = in_project / "tfhe" / "wasm_pk_gen.csv"
        assert ledger.read_text(encoding="utf-8") == f"{NAME},2500000\n"
        report = json.loads(
            (in_project / "tfhe" / "wasm_pk_gen.report.json").read_text(encoding="utf-8")
        )
        assert report[0]["benchmark_name"] == "add"
        out = capsys.readouterr().out
        assert "Parsed 1 results from 1 files" in out
        assert "PARAM_MESSAGE_2_CARRY_2_COMPACT_PK" in out

    def test_relative_input_dir(
        self, in_project: Path, raw_dir: Path, write_raw: Callable[..., Path]
    ) -> None:
        write_raw(raw_dir, "run.json", {NAME: 1.0})
        main(["raw"])
        assert (in_project / "tfhe" / "wasm_pk_gen.csv").read_text(encoding="utf-8") == (
            f"{NAME},1000000\n"
        )

    def test_writes_log_file(
        self, in_project: Path, raw_dir: Path, write_raw: Callable[..., Path]
    ) -> None:
        write_raw(raw_dir, "run.json", {NAME: 1.0})
        main([str(raw_dir)])
        log = in_project / ".benchledger" / "logs" / "benchledger.log"
        assert "Run complete" in log.read_text(encoding="utf-8")

    def test_handler_removed_after_run(self, in_project: Path, raw_dir: Path) -> None:
        before = list(logging.getLogger().handlers)
        main([str(raw_dir)])
        assert logging.getLogger().handlers == before

    def test_malformed_input_exits_nonzero(
        self,
        in_project: Path,
        raw_dir: Path,
        write_raw: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_raw(raw_dir, "bad.json", {"no_separator_here": 1.0})

        with pytest.raises(SystemExit) as excinfo:
            main([str(raw_dir)])

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "bad.json" in err
        assert "no_separator_here" in err

    def test_missing_work_dir_exits_nonzero(
        self, tmp_path: Path, raw_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main([str(raw_dir)])
        assert excinfo.value.code == 1

    def test_invalid_config_exits_nonzero(
        self,
        in_project: Path,
        raw_dir: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = in_project / ".benchledger" / "config.yaml"
        config.parent.mkdir()
        config.write_text("rounding: sideways\n", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main([str(raw_dir)])

        assert excinfo.value.code == 1
        assert "rounding" in capsys.readouterr().err

    def test_config_skip_malformed(
        self,
        in_project: Path,
        raw_dir: Path,
        write_raw: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = in_project / ".benchledger" / "config.yaml"
        config.parent.mkdir()
        config.write_text("skip_malformed: true\n", encoding="utf-8")
        write_raw(raw_dir, "run.json", {NAME: 1.0, "junk": 2.0})

        main([str(raw_dir)])

        assert "Skipped 1 malformed inputs" in capsys.readouterr().out

    def test_huge_integer_timing_exits_nonzero(
        self,
        in_project: Path,
        raw_dir: Path,
        write_raw: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_raw(raw_dir, "huge.json", '{"%s": 1%s}' % (NAME, "0" * 400))

        with pytest.raises(SystemExit) as excinfo:
            main([str(raw_dir)])

        assert excinfo.value.code == 1
        assert "huge.json" in capsys.readouterr().err
