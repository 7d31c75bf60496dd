from __future__ import annotations

"""
Unit tests for CLI Argument Parsing and the CLI entrypoint.

Verifies:
1. Mapping of CLI flags to settings keys.
2. Level CSV parsing.
3. Exit codes and config dump.
"""

import json
from pathlib import Path

from tierlog.domain.constants import MAX_LOG_FILE_SIZE_MIN
from tierlog.interface.cli.app import main
from tierlog.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_simple_flags_mapping() -> None:
    args = parse_args(["--no-stdout", "--no-file", "--max-size", "1024", "--rotate-num", "3"])
    overrides = args_to_overrides(args)

    assert overrides["log_to_stdout"] is False
    assert overrides["log_to_file"] is False
    assert overrides["max_log_file_size"] == 1024
    assert overrides["log_rotate_num"] == 3


def test_cli_levels_csv_parsing() -> None:
    overrides = args_to_overrides(parse_args(["--levels", "info, error,critical"]))

    assert overrides["info_enable"] is True
    assert overrides["error_enable"] is True
    assert overrides["fatal_enable"] is True
    assert overrides["debug_enable"] is False
    assert overrides["trace_enable"] is False


def test_cli_defaults_leave_levels_untouched() -> None:
    overrides = args_to_overrides(parse_args([]))
    assert "info_enable" not in overrides
    assert overrides["logs_path"] is None


def test_main_rejects_small_size(tmp_path: Path, capsys) -> None:
    code = main(["--logs-path", str(tmp_path), "--max-size", "10", "--no-stdout"])

    assert code == 2
    assert "max_log_file_size" in capsys.readouterr().err


def test_main_dump_config(tmp_path: Path, capsys) -> None:
    code = main([
        "--logs-path", str(tmp_path),
        "--max-size", str(MAX_LOG_FILE_SIZE_MIN),
        "--rotate-num", "2",
        "--levels", "info",
        "--no-stdout",
        "--dump-config",
    ])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["retention"]["window_size"] == 2
    assert data["levels"]["info"]["enabled"] is True
    assert data["levels"]["debug"]["enabled"] is False


def test_main_emits_samples_to_level_files(tmp_path: Path) -> None:
    code = main([
        "--logs-path", str(tmp_path),
        "--levels", "info,error",
        "--no-stdout",
        "--prefix", "demo",
        "--emit", "2",
    ])

    assert code == 0
    info_files = list(tmp_path.glob("demo-*-info.log"))
    assert len(info_files) == 1
    lines = info_files[0].read_text(encoding="utf-8").splitlines()
    assert sum(1 for line in lines if "sample info record" in line) == 2
    assert all("[INFO]" in line for line in lines if line.startswith("["))
    assert not list(tmp_path.glob("demo-*-debug.log"))
