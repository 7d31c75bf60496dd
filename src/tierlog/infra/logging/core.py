from __future__ import annotations

"""
Logging Engine Orchestrator.

Applies a LogLevelConfiguration to the standard logging package: one
size-bounded file handler per enabled level, an optional stdout stream,
and the pre-rollout callback shared by every file handler.

Configuration is idempotent. Every call removes the handlers a previous
call installed before attaching the new set, so callbacks never accumulate.
Writes and rotations stay synchronous on the emitting thread.
"""

import datetime
import logging
import sys
import threading
from typing import List, Optional

from tierlog.domain.constants import DATETIME_TOKEN, FILE_TIMESTAMP_FORMAT
from tierlog.domain.levels import CONFIGURABLE_LEVELS
from tierlog.domain.log_models import LogLevelConfiguration
from tierlog.infra.logging.handlers import (
    EnabledLevelsFilter,
    PreRolloutCallback,
    _create_level_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_tierlog_configured"
_PRE_ROLLOUT_ATTR: str = "_tierlog_pre_rollout"

_CONFIGURE_LOCK = threading.Lock()


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_level_logging(
        cfg: LogLevelConfiguration,
        pre_rollout: Optional[PreRolloutCallback] = None,
        *,
        logger: Optional[logging.Logger] = None,
        now: Optional[datetime.datetime] = None,
) -> logging.Logger:
    """
    Install the handlers described by `cfg` on the target logger.

    All handlers are built before the previous ones are detached, and the
    swap happens under a lock, so emitters observe either the old or the
    new configuration.

    Args:
        cfg: Validated multi-level configuration.
        pre_rollout: Callback receiving (path, size, level) before rotation.
        logger: Target logger, defaults to the root logger.
        now: Timestamp used to resolve the %datetime token.

    Returns:
        logging.Logger: The configured logger.
    """
    target = logger if logger is not None else logging.getLogger()
    stamp = (now or datetime.datetime.now()).strftime(FILE_TIMESTAMP_FORMAT)

    formatter = logging.Formatter(cfg.log_format, datefmt=cfg.date_format)
    gate = EnabledLevelsFilter(frozenset(
        lvl.levelno for lvl in CONFIGURABLE_LEVELS if not cfg.is_enabled(lvl)
    ))

    handlers_list: List[logging.Handler] = []

    if cfg.log_to_stdout:
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(formatter)
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_to_file:
        for level, level_cfg in cfg.levels.items():
            if not level_cfg.writes_file:
                continue
            fh = _create_level_file_handler(
                resolve_file_path(level_cfg.file_path_template, stamp),
                level,
                formatter,
                level_cfg.max_file_size_bytes,
                pre_rollout,
            )
            if fh:
                handlers_list.append(fh)

    for h in handlers_list:
        h.addFilter(gate)

    with _CONFIGURE_LOCK:
        _remove_our_handlers(target)
        target.setLevel(_lowest_enabled_level(cfg))
        for h in handlers_list:
            target.addHandler(h)
        setattr(target, _PRE_ROLLOUT_ATTR, pre_rollout)
        setattr(target, _CONFIGURED_FLAG_ATTR, True)

    return target


def reset_level_logging(logger: Optional[logging.Logger] = None) -> None:
    """Detach every handler installed by this engine and forget the callback."""
    target = logger if logger is not None else logging.getLogger()
    with _CONFIGURE_LOCK:
        _remove_our_handlers(target)
        setattr(target, _PRE_ROLLOUT_ATTR, None)
        setattr(target, _CONFIGURED_FLAG_ATTR, False)


def get_pre_rollout_callback(logger: Optional[logging.Logger] = None) -> Optional[PreRolloutCallback]:
    """Return the callback currently registered on the target logger."""
    target = logger if logger is not None else logging.getLogger()
    return getattr(target, _PRE_ROLLOUT_ATTR, None)


def is_configured(logger: Optional[logging.Logger] = None) -> bool:
    target = logger if logger is not None else logging.getLogger()
    return bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def resolve_file_path(template: str, stamp: str) -> str:
    """Substitute the %datetime token of an active file template."""
    return template.replace(DATETIME_TOKEN, stamp)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _lowest_enabled_level(cfg: LogLevelConfiguration) -> int:
    levels = [lvl.levelno for lvl in CONFIGURABLE_LEVELS if cfg.is_enabled(lvl)]
    if not levels:
        return logging.CRITICAL
    return min(levels)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            try:
                h.close()
            except Exception:
                pass
