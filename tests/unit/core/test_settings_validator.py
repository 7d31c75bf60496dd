from __future__ import annotations

"""
Unit tests for the Log Settings Validator.

Verifies:
1. Type coercion (String to Bool/Int).
2. Default value injection.
3. Strict mode validation.
"""

import pytest

from tierlog.core.validator import validate_log_settings
from tierlog.domain.constants import MAX_LOG_FILE_SIZE_MIN


def test_validate_none_returns_defaults() -> None:
    """Passing None should return the full default settings."""
    settings, warnings = validate_log_settings(None)

    assert settings["info_enable"] is True
    assert settings["trace_enable"] is False
    assert settings["max_log_file_size"] == MAX_LOG_FILE_SIZE_MIN
    assert settings["log_rotate_num"] == 0
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    settings, warnings = validate_log_settings({})

    assert settings["file_prefix"] == "server"
    assert settings["log_to_file"] is True
    assert warnings == []


def test_validate_converts_strings() -> None:
    raw = {
        "debug_enable": "no",
        "trace_enable": "yes",
        "log_to_stdout": "1",
        "max_log_file_size": " 1073741824 ",
        "log_rotate_num": 3.0,
    }
    settings, warnings = validate_log_settings(raw)

    assert settings["debug_enable"] is False
    assert settings["trace_enable"] is True
    assert settings["log_to_stdout"] is True
    assert settings["max_log_file_size"] == 1073741824
    assert settings["log_rotate_num"] == 3
    assert len(warnings) == 5


def test_invalid_values_fall_back() -> None:
    settings, warnings = validate_log_settings({"log_rotate_num": "many", "logs_path": 12})

    assert settings["log_rotate_num"] == 0
    assert settings["logs_path"].endswith("logs")
    assert len(warnings) == 2


def test_logs_path_is_expanded(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    settings, _ = validate_log_settings({"logs_path": "~/server-logs"})
    assert settings["logs_path"] == str(tmp_path / "server-logs")


def test_booleans_are_not_integers() -> None:
    settings, warnings = validate_log_settings({"log_rotate_num": True})
    assert settings["log_rotate_num"] == 0
    assert warnings


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_log_settings({"info_enable": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_log_settings([], strict=True)
