from __future__ import annotations

"""
Rollout Handler.

Callback invoked by the logging engine when a level's active file reaches
its size bound. Renames the active file to the next numbered backup of its
level and enforces the retention window.

Rotation must never break the host: every failure is reported as a single
line on stderr and swallowed. The active file then keeps growing until a
later rotation succeeds.
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Optional

from tierlog.core.rotation.counter import LevelRotationCounter
from tierlog.core.rotation.retention import RetentionConfig, RetentionPolicy, rotated_file_name
from tierlog.core.rotation.sanitizer import escape_filename
from tierlog.domain.levels import SeverityLevel


@dataclass(frozen=True)
class RotationOutcome:
    """
    Result of one rotation event.

    Attributes:
        level: Level the event was attributed to (after fallback).
        source_path: File the engine asked to rotate.
        rotated_path: Backup name, empty if no sequence was reserved.
        sequence: Sequence number consumed, 0 when the rotation failed.
        deleted_path: Backup removed by retention, if any.
        error: Description of the failure, empty on success.
    """
    level: SeverityLevel
    source_path: str
    rotated_path: str = ""
    sequence: int = 0
    deleted_path: Optional[str] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


class RolloutHandler:
    """Pre-rollout callback with injectable counter and retention settings."""

    def __init__(
            self,
            counter: Optional[LevelRotationCounter] = None,
            retention: Optional[RetentionConfig] = None,
    ) -> None:
        self.counter = counter if counter is not None else LevelRotationCounter()
        self.policy = RetentionPolicy(retention or RetentionConfig.disabled())

    def __call__(self, file_path: str, size: int, level: Any) -> RotationOutcome:
        severity = SeverityLevel.coerce(level)
        try:
            outcome = self._rotate(str(file_path), severity)
        except Exception as e:
            outcome = RotationOutcome(level=severity, source_path=str(file_path), error=str(e))
        if not outcome.ok:
            _report_failure(outcome, size)
        return outcome

    # -------------------------------------------------------------------------
    # ROTATION STEPS
    # -------------------------------------------------------------------------

    def _rotate(self, file_path: str, level: SeverityLevel) -> RotationOutcome:
        directory, base = os.path.split(file_path)
        sanitized_path = f"{directory or '.'}/{escape_filename(base)}"

        seq = self.counter.next_sequence(level)
        rotated_path = rotated_file_name(sanitized_path, seq)

        # The engine wrote the unescaped name; only the destination is escaped
        rename_error = _rename(file_path, rotated_path)
        if rename_error is not None:
            self.counter.rewind(level, seq)
            return RotationOutcome(
                level=level,
                source_path=file_path,
                rotated_path=rotated_path,
                error=f"rename to '{rotated_path}' failed: {rename_error}",
            )

        deleted: Optional[str] = None
        if self.policy.enabled:
            target = self.policy.file_to_delete(level, sanitized_path, seq)
            if target is not None and _remove(target):
                deleted = target

        return RotationOutcome(
            level=level,
            source_path=file_path,
            rotated_path=rotated_path,
            sequence=seq,
            deleted_path=deleted,
        )


# -----------------------------------------------------------------------------
# FILESYSTEM PRIMITIVES
# -----------------------------------------------------------------------------

def _rename(src: str, dst: str) -> Optional[OSError]:
    """Rename src to dst, returning the error instead of raising it."""
    try:
        os.replace(src, dst)
    except OSError as e:
        return e
    return None


def _remove(path: str) -> bool:
    """
    Delete a backup. Missing files and permission problems are expected
    under manual cleanup and are not errors.

    Returns:
        bool: True if the file was removed by this call.
    """
    try:
        os.remove(path)
    except OSError:
        return False
    return True


def _report_failure(outcome: RotationOutcome, size: int) -> None:
    try:
        sys.stderr.write(
            f"ERROR: Log rotation failed for '{outcome.source_path}' "
            f"(level={outcome.level.value}, size={size}): {outcome.error}\n"
        )
    except Exception:
        pass
