from __future__ import annotations

"""
Logging Configuration Models.

Defines the immutable structures produced by the initializer and consumed
by the logging engine: the per-level file configuration, the global
retention settings, and the result object returned to callers.
"""

import types
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from tierlog.domain.constants import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT
from tierlog.domain.levels import SeverityLevel

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class RetentionConfig:
    """
    Global retention settings applied uniformly to every level.

    Attributes:
        enabled: When False, rotated files accumulate indefinitely.
        window_size: Number of rotated files kept per level.
    """
    enabled: bool = False
    window_size: int = 1

    @classmethod
    def disabled(cls) -> "RetentionConfig":
        return cls(enabled=False, window_size=1)

    @classmethod
    def window(cls, size: int) -> "RetentionConfig":
        if size < 1:
            raise ValueError(f"Retention window must be >= 1, got {size}.")
        return cls(enabled=True, window_size=int(size))


@dataclass(frozen=True)
class LevelFileConfig:
    """
    File settings of one severity level.

    Attributes:
        enabled: Whether records of this level are emitted at all.
        file_path_template: Active file path, may contain the %datetime token.
                            Empty when file output is off for this level.
        max_file_size_bytes: Size that triggers a rotation.
    """
    enabled: bool
    file_path_template: str = ""
    max_file_size_bytes: int = 0

    @property
    def writes_file(self) -> bool:
        return self.enabled and bool(self.file_path_template)


@dataclass(frozen=True)
class LogLevelConfiguration:
    """
    Complete, validated configuration of the multi-level logging subsystem.

    Built once by the initializer and never mutated afterwards.
    """
    levels: Mapping[SeverityLevel, LevelFileConfig]
    retention: RetentionConfig = field(default_factory=RetentionConfig.disabled)
    log_to_stdout: bool = True
    log_to_file: bool = True
    log_format: str = DEFAULT_LOG_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "levels", types.MappingProxyType(dict(self.levels)))

    def level(self, level: SeverityLevel) -> LevelFileConfig:
        """Return a level's entry, falling back to the GLOBAL one."""
        found = self.levels.get(level)
        if found is None:
            found = self.levels.get(SeverityLevel.GLOBAL, LevelFileConfig(enabled=False))
        return found

    def is_enabled(self, level: SeverityLevel) -> bool:
        return self.level(level).enabled

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation used by reports and the CLI dump."""
        return {
            "levels": {
                lvl.value: {
                    "enabled": cfg.enabled,
                    "file_path_template": cfg.file_path_template,
                    "max_file_size_bytes": cfg.max_file_size_bytes,
                }
                for lvl, cfg in self.levels.items()
            },
            "retention": {
                "enabled": self.retention.enabled,
                "window_size": self.retention.window_size,
            },
            "log_to_stdout": self.log_to_stdout,
            "log_to_file": self.log_to_file,
            "log_format": self.log_format,
            "date_format": self.date_format,
        }


@dataclass(frozen=True)
class InitResult:
    """
    Outcome of a logging initialization.

    Attributes:
        ok: Flag indicating success or failure.
        error: Human-readable reason in case of failure.
        config: The applied configuration on success.
    """
    ok: bool
    error: str = ""
    config: Optional[LogLevelConfiguration] = None


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str) -> InitResult:
    """Create a failed initialization result."""
    return InitResult(ok=False, error=error, config=None)


def create_success_result(config: LogLevelConfiguration) -> InitResult:
    """Create a successful initialization result carrying the applied config."""
    return InitResult(ok=True, error="", config=config)
