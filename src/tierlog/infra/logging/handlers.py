from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the per-level file handler driven by the pre-rollout callback,
the level filters that route records to their level's file, and the
tagging mechanism that lets the engine tell its own handlers apart from
external or library-injected ones.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Callable, FrozenSet, Optional

from tierlog.domain.levels import SeverityLevel

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_tierlog_handler"

PreRolloutCallback = Callable[[str, int, SeverityLevel], object]


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by this engine.

    Args:
        handler: The logging handler instance to tag.
    """
    try:
        setattr(handler, _HANDLER_TAG_ATTR, True)
    except Exception:
        pass


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this engine.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# FILTERS
# ==============================================================================

class EnabledLevelsFilter(logging.Filter):
    """Drop records whose severity level is disabled."""

    def __init__(self, disabled: FrozenSet[int]) -> None:
        super().__init__()
        self.disabled = disabled

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno not in self.disabled


class SeverityFilter(logging.Filter):
    """
    Accept only the records that belong to one severity level.

    GLOBAL accepts every record whose number is not one of the named levels.
    """

    def __init__(self, level: SeverityLevel) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return SeverityLevel.coerce(record.levelno) is self.level


# ==============================================================================
# PER-LEVEL FILE HANDLER
# ==============================================================================

class LevelFileHandler(RotatingFileHandler):
    """
    Size-bounded file handler of a single severity level.

    The size check runs before every write. When the next record would
    reach `max_bytes`, the stream is closed, the pre-rollout callback
    receives `(path, size, level)` and the active file is reopened, so the
    callback alone decides where the previous content goes.
    """

    def __init__(
            self,
            filename: str,
            level: SeverityLevel,
            max_bytes: int,
            pre_rollout: Optional[PreRolloutCallback] = None,
            encoding: str = "utf-8",
    ) -> None:
        super().__init__(
            filename,
            mode="a",
            maxBytes=int(max_bytes),
            backupCount=0,
            encoding=encoding,
            delay=True,
        )
        self.severity = level
        self.pre_rollout = pre_rollout

    def doRollover(self) -> None:
        size = 0
        if self.stream:
            size = self.stream.tell()
            self.stream.close()
            self.stream = None  # type: ignore[assignment]
        elif os.path.exists(self.baseFilename):
            size = os.path.getsize(self.baseFilename)

        if self.pre_rollout is not None:
            self.pre_rollout(self.baseFilename, size, self.severity)

        self.stream = self._open()


def _create_level_file_handler(
        log_file: str,
        level: SeverityLevel,
        formatter: logging.Formatter,
        max_bytes: int,
        pre_rollout: Optional[PreRolloutCallback],
) -> Optional[LevelFileHandler]:
    """
    Initialize a LevelFileHandler with robust error handling.

    Args:
        log_file: Target path of the active file.
        level: Severity level routed to this file.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        pre_rollout: Callback run before each rollover.

    Returns:
        Optional[LevelFileHandler]: Configured handler or None if I/O fails.
    """
    try:
        _ensure_parent_dir(log_file)
        fh = LevelFileHandler(log_file, level, max_bytes, pre_rollout)
        fh.setFormatter(formatter)
        fh.addFilter(SeverityFilter(level))
        _tag_handler(fh)
        return fh
    except Exception as e:
        sys.stderr.write(f"WARNING: Log file unavailable at '{log_file}': {e}\n")
        return None


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy of a target file.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
