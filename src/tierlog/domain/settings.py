from __future__ import annotations

"""
Log Settings Domain.

Dict-based settings consumed by the initializer. Mirrors the keys of the
server's `logs` configuration section so settings loaded from any source
can be fed straight into `init_log_from_settings`.
"""

import os
from typing import Any, Dict, List

from tierlog.domain.constants import DEFAULT_FILE_PREFIX, MAX_LOG_FILE_SIZE_MIN
from tierlog.domain.levels import CONFIGURABLE_LEVELS, SeverityLevel

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOGS_SUBDIR = "logs"
DEFAULT_LOG_ROTATE_NUM = 0


def level_flag_key(level: SeverityLevel) -> str:
    """Settings key holding the enable flag of a level."""
    return f"{level.value}_enable"


LEVEL_FLAG_KEYS: List[str] = [level_flag_key(lvl) for lvl in CONFIGURABLE_LEVELS]


def get_default_log_settings() -> Dict[str, Any]:
    """
    Generate the default log settings.

    Returns:
        Dict[str, Any]: Default settings values.
    """
    settings: Dict[str, Any] = {key: True for key in LEVEL_FLAG_KEYS}
    settings[level_flag_key(SeverityLevel.TRACE)] = False
    settings.update({
        "logs_path": os.path.join(os.getcwd(), DEFAULT_LOGS_SUBDIR),
        "max_log_file_size": MAX_LOG_FILE_SIZE_MIN,
        "log_rotate_num": DEFAULT_LOG_ROTATE_NUM,
        "log_to_stdout": False,
        "log_to_file": True,
        "file_prefix": DEFAULT_FILE_PREFIX,
    })
    return settings


def level_flags_from_settings(settings: Dict[str, Any]) -> Dict[SeverityLevel, bool]:
    """Extract the per-level enable flags from a settings dictionary."""
    return {lvl: bool(settings.get(level_flag_key(lvl), False)) for lvl in CONFIGURABLE_LEVELS}
