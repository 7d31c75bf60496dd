from __future__ import annotations

from tierlog.core.initializer import LogSubsystem, init_log, init_log_from_settings
from tierlog.core.rotation.counter import LevelRotationCounter
from tierlog.core.rotation.rollout import RolloutHandler
from tierlog.core.rotation.sanitizer import escape_filename
from tierlog.domain.levels import SeverityLevel

__version__ = "0.1.0"

__all__ = [
    "LevelRotationCounter",
    "LogSubsystem",
    "RolloutHandler",
    "SeverityLevel",
    "escape_filename",
    "init_log",
    "init_log_from_settings",
]
