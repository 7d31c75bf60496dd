from __future__ import annotations

"""
Retention Policy.

Sliding-window deletion of rotated files, keyed independently per level:
after rotation number N of a level, the backup with index N - window is
removed, so deletion always lags rotation by exactly `window` rotations.
"""

from typing import Optional

from tierlog.domain.levels import SeverityLevel
from tierlog.domain.log_models import RetentionConfig

__all__ = ["RetentionConfig", "RetentionPolicy", "rotated_file_name"]


def rotated_file_name(rotated_base: str, index: int) -> str:
    """Name of backup number `index` of a sanitized active file path."""
    return f"{rotated_base}.{index}"


class RetentionPolicy:
    """Decides which backup (if any) has fallen out of the retention window."""

    def __init__(self, config: RetentionConfig) -> None:
        self.config = config

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def index_to_delete(self, current_sequence: int) -> Optional[int]:
        """Backup index to delete after rotation `current_sequence`, or None."""
        index = current_sequence - self.config.window_size
        if index > 0:
            return index
        return None

    def file_to_delete(
            self,
            level: SeverityLevel,
            rotated_base: str,
            current_sequence: int,
    ) -> Optional[str]:
        """
        Resolve the path of the backup that must be removed now.

        Args:
            level: Level whose file was just rotated. Only used for keying;
                   the caller passes that level's own sequence and base path.
            rotated_base: Sanitized active file path of the level.
            current_sequence: Sequence number of the rotation just performed.

        Returns:
            Optional[str]: Path to delete, or None while the window is not full
                           or retention is disabled.
        """
        if not self.config.enabled:
            return None
        index = self.index_to_delete(current_sequence)
        if index is None:
            return None
        return rotated_file_name(rotated_base, index)
