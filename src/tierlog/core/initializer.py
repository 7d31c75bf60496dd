from __future__ import annotations

"""
Log Initializer.

Validates the logging bounds, builds the per-level configuration and
applies it to the logging engine with a RolloutHandler registered as the
pre-rollout callback.

Validation always completes before anything is applied: a failed call
leaves the previous configuration (and callback) in place.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from tierlog.core.rotation.counter import LevelRotationCounter
from tierlog.core.rotation.rollout import RolloutHandler
from tierlog.domain.constants import (
    DEFAULT_FILE_PREFIX,
    LOG_FILE_TEMPLATE,
    LOG_ROTATE_NUM_MAX,
    LOG_ROTATE_NUM_MIN,
    MAX_LOG_FILE_SIZE_MAX,
    MAX_LOG_FILE_SIZE_MIN,
)
from tierlog.domain.levels import CONFIGURABLE_LEVELS, SeverityLevel
from tierlog.domain.log_models import (
    InitResult,
    LevelFileConfig,
    LogLevelConfiguration,
    RetentionConfig,
    create_error_result,
    create_success_result,
)
from tierlog.domain.settings import level_flags_from_settings
from tierlog.infra.fs import with_trailing_separator
from tierlog.infra.logging import configure_level_logging

logger = logging.getLogger(__name__)


class ConfigValidationError(ValueError):
    """A size or retention bound is out of range."""


# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def _check_range(name: str, value: int, low: int, high: int) -> None:
    if value < low or value > high:
        raise ConfigValidationError(f"{name} must be in range [{low}, {high}], now is {value}")


def validate_max_file_size(max_file_size_bytes: int) -> int:
    _check_range("max_log_file_size", max_file_size_bytes, MAX_LOG_FILE_SIZE_MIN, MAX_LOG_FILE_SIZE_MAX)
    return max_file_size_bytes


def validate_retention_window(retention_window: int) -> RetentionConfig:
    """Translate the configured window into a RetentionConfig (0 disables deletion)."""
    if retention_window == 0:
        return RetentionConfig.disabled()
    _check_range("log_rotate_num", retention_window, LOG_ROTATE_NUM_MIN, LOG_ROTATE_NUM_MAX)
    return RetentionConfig.window(retention_window)


def build_level_configuration(
        level_flags: Mapping[Any, bool],
        logs_directory: str,
        max_file_size_bytes: int,
        retention: RetentionConfig,
        log_to_stdout: bool,
        log_to_file: bool,
        file_prefix: str = DEFAULT_FILE_PREFIX,
) -> LogLevelConfiguration:
    """
    Build the per-level configuration. GLOBAL is always enabled; other
    levels follow their flag, a missing flag meaning disabled. Flag keys
    may be levels, level names or logging numbers.
    """
    base_dir = with_trailing_separator(logs_directory or ".")
    requested = {SeverityLevel.coerce(key): bool(value) for key, value in level_flags.items()}
    flags: Dict[SeverityLevel, bool] = {SeverityLevel.GLOBAL: True}
    for level in CONFIGURABLE_LEVELS:
        flags[level] = requested.get(level, False)

    levels: Dict[SeverityLevel, LevelFileConfig] = {}
    for level, enabled in flags.items():
        template = ""
        if enabled and log_to_file:
            template = base_dir + LOG_FILE_TEMPLATE.format(prefix=file_prefix, level=level.file_tag)
        levels[level] = LevelFileConfig(
            enabled=enabled,
            file_path_template=template,
            max_file_size_bytes=max_file_size_bytes,
        )

    return LogLevelConfiguration(
        levels=levels,
        retention=retention,
        log_to_stdout=log_to_stdout,
        log_to_file=log_to_file,
    )


# -----------------------------------------------------------------------------
# SUBSYSTEM
# -----------------------------------------------------------------------------

class LogSubsystem:
    """
    Owner of the process-wide rotation state.

    The counter survives re-initialization: sequence numbers are never
    reset during the lifetime of the subsystem.
    """

    def __init__(
            self,
            counter: Optional[LevelRotationCounter] = None,
            target_logger: Optional[logging.Logger] = None,
    ) -> None:
        self.counter = counter if counter is not None else LevelRotationCounter()
        self.target_logger = target_logger
        self.config: Optional[LogLevelConfiguration] = None
        self.rollout_handler: Optional[RolloutHandler] = None

    def init_log(
            self,
            level_flags: Mapping[Any, bool],
            logs_directory: str,
            max_file_size_bytes: int,
            retention_window: int,
            log_to_stdout: bool,
            log_to_file: bool,
            *,
            file_prefix: str = DEFAULT_FILE_PREFIX,
    ) -> InitResult:
        """
        Validate the bounds and apply the multi-level configuration.

        Args:
            level_flags: Enable flag per severity level.
            logs_directory: Directory of the active and rotated files.
            max_file_size_bytes: Rotation threshold shared by every level.
            retention_window: Backups kept per level, 0 keeps all of them.
            log_to_stdout: Mirror records on standard output.
            log_to_file: Write per-level files.
            file_prefix: Leading token of every active file name.

        Returns:
            InitResult: Success with the applied configuration, or failure
                        carrying a human-readable message.
        """
        try:
            validate_max_file_size(max_file_size_bytes)
            retention = validate_retention_window(retention_window)
        except ConfigValidationError as e:
            logger.error(f"Logging initialization rejected: {e}")
            return create_error_result(str(e))

        cfg = build_level_configuration(
            level_flags,
            logs_directory,
            max_file_size_bytes,
            retention,
            log_to_stdout,
            log_to_file,
            file_prefix=file_prefix,
        )
        handler = RolloutHandler(self.counter, retention)
        configure_level_logging(cfg, handler, logger=self.target_logger)

        self.config = cfg
        self.rollout_handler = handler
        return create_success_result(cfg)

    def init_log_from_settings(self, settings: Dict[str, Any]) -> InitResult:
        """Initialize from a settings dict normalized by validate_log_settings."""
        return self.init_log(
            level_flags_from_settings(settings),
            settings["logs_path"],
            settings["max_log_file_size"],
            settings["log_rotate_num"],
            settings["log_to_stdout"],
            settings["log_to_file"],
            file_prefix=settings.get("file_prefix") or DEFAULT_FILE_PREFIX,
        )


# -----------------------------------------------------------------------------
# PROCESS-WIDE DEFAULT
# -----------------------------------------------------------------------------

_DEFAULT_SUBSYSTEM = LogSubsystem()


def get_default_subsystem() -> LogSubsystem:
    return _DEFAULT_SUBSYSTEM


def init_log(
        level_flags: Mapping[Any, bool],
        logs_directory: str,
        max_file_size_bytes: int,
        retention_window: int,
        log_to_stdout: bool,
        log_to_file: bool,
        *,
        file_prefix: str = DEFAULT_FILE_PREFIX,
) -> InitResult:
    """Initialize the process-wide logging subsystem. See LogSubsystem.init_log."""
    return _DEFAULT_SUBSYSTEM.init_log(
        level_flags,
        logs_directory,
        max_file_size_bytes,
        retention_window,
        log_to_stdout,
        log_to_file,
        file_prefix=file_prefix,
    )


def init_log_from_settings(settings: Dict[str, Any]) -> InitResult:
    return _DEFAULT_SUBSYSTEM.init_log_from_settings(settings)
