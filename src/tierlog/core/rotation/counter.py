from __future__ import annotations

"""
Per-level rotation sequence numbers.

The counter is the only contended state of the rotation core: the logging
engine may rotate different levels from different threads at once, but
never the same level twice concurrently.
"""

import threading
from typing import Dict

from tierlog.domain.levels import SeverityLevel


class LevelRotationCounter:
    """Monotonic sequence number per severity level, starting at 0."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: Dict[SeverityLevel, int] = {lvl: 0 for lvl in SeverityLevel}

    def next_sequence(self, level: SeverityLevel) -> int:
        """Increment the level's counter and return the new value (first call: 1)."""
        level = SeverityLevel.coerce(level)
        with self._lock:
            self._values[level] += 1
            return self._values[level]

    def rewind(self, level: SeverityLevel, sequence: int) -> bool:
        """
        Give back a sequence number whose rotation did not happen.

        Only the most recently issued number can be returned; anything else
        is left untouched.

        Returns:
            bool: True if the counter was decremented.
        """
        level = SeverityLevel.coerce(level)
        with self._lock:
            if self._values[level] != sequence or sequence <= 0:
                return False
            self._values[level] = sequence - 1
            return True

    def current(self, level: SeverityLevel) -> int:
        level = SeverityLevel.coerce(level)
        with self._lock:
            return self._values[level]

    def snapshot(self) -> Dict[SeverityLevel, int]:
        with self._lock:
            return dict(self._values)
