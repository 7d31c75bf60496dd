from __future__ import annotations

from .core import (
    configure_level_logging,
    get_logger,
    get_pre_rollout_callback,
    is_configured,
    reset_level_logging,
    resolve_file_path,
)
from .handlers import LevelFileHandler

__all__ = [
    "LevelFileHandler",
    "configure_level_logging",
    "get_logger",
    "get_pre_rollout_callback",
    "is_configured",
    "reset_level_logging",
    "resolve_file_path",
]
