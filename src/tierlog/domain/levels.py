from __future__ import annotations

"""
Severity Level Domain.

Defines the closed set of severity levels that partition every piece of
rotation state (counters, active files, retained backups) and their mapping
onto the numeric levels of the standard logging package.
"""

import enum
import logging
from typing import Any, Dict, Optional

# Numeric value registered with the logging package for TRACE records
TRACE_LEVEL_NUM: int = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


class SeverityLevel(enum.Enum):
    """Logging verbosity tiers with independent rotation state."""

    GLOBAL = "global"
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def file_tag(self) -> str:
        """Token used inside active log file names."""
        return self.value

    @property
    def levelno(self) -> Optional[int]:
        """Numeric logging level, None for GLOBAL."""
        return _LEVEL_NUMBERS.get(self)

    @classmethod
    def coerce(cls, value: Any) -> "SeverityLevel":
        """
        Resolve an arbitrary level designator to a SeverityLevel.

        Accepts enum members, numeric logging levels and level names.
        Anything unknown falls back to GLOBAL.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.GLOBAL
        if isinstance(value, int):
            return _NUMBER_TO_LEVEL.get(value, cls.GLOBAL)
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "critical":
                return cls.FATAL
            if key == "warn":
                return cls.WARNING
            for member in cls:
                if member.value == key:
                    return member
        return cls.GLOBAL


# Levels that carry their own numeric value (everything except GLOBAL)
_LEVEL_NUMBERS: Dict[SeverityLevel, int] = {
    SeverityLevel.TRACE: TRACE_LEVEL_NUM,
    SeverityLevel.DEBUG: logging.DEBUG,
    SeverityLevel.INFO: logging.INFO,
    SeverityLevel.WARNING: logging.WARNING,
    SeverityLevel.ERROR: logging.ERROR,
    SeverityLevel.FATAL: logging.CRITICAL,
}

_NUMBER_TO_LEVEL: Dict[int, SeverityLevel] = {v: k for k, v in _LEVEL_NUMBERS.items()}

# Order used when iterating configurable levels (GLOBAL is always on)
CONFIGURABLE_LEVELS = (
    SeverityLevel.TRACE,
    SeverityLevel.DEBUG,
    SeverityLevel.INFO,
    SeverityLevel.WARNING,
    SeverityLevel.ERROR,
    SeverityLevel.FATAL,
)
