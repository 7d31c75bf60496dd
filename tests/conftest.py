from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Cleanup of the handlers the engine installs on the root logger.
3. Shared fixtures for level flags and settings dictionaries.
"""

import logging
import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from tierlog.domain.levels import SeverityLevel  # noqa: E402
from tierlog.infra.logging import reset_level_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_root_logging():
    """Remove engine handlers before and after each test."""
    root = logging.getLogger()
    previous_level = root.level
    reset_level_logging(root)
    yield
    reset_level_logging(root)
    root.setLevel(previous_level)


@pytest.fixture
def all_levels_enabled() -> Dict[SeverityLevel, bool]:
    return {
        SeverityLevel.TRACE: True,
        SeverityLevel.DEBUG: True,
        SeverityLevel.INFO: True,
        SeverityLevel.WARNING: True,
        SeverityLevel.ERROR: True,
        SeverityLevel.FATAL: True,
    }


@pytest.fixture
def mock_settings_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete settings dictionary for testing.

    Returns:
        Dict[str, Any]: A sample settings dictionary.
    """
    return {
        "trace_enable": False,
        "debug_enable": False,
        "info_enable": True,
        "warning_enable": True,
        "error_enable": True,
        "fatal_enable": True,
        "logs_path": str(tmp_path / "logs"),
        "max_log_file_size": 512 * 1024 * 1024,
        "log_rotate_num": 2,
        "log_to_stdout": False,
        "log_to_file": True,
        "file_prefix": "server",
    }
