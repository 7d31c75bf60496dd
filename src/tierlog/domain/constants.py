from __future__ import annotations

"""
Domain Constants.

Centralizes the validated bounds, naming templates and formats shared by
the initializer, the logging engine and the CLI.
"""

from typing import Final

# -----------------------------------------------------------------------------
# VALIDATION BOUNDS
# -----------------------------------------------------------------------------

MAX_LOG_FILE_SIZE_MIN: Final[int] = 512 * 1024 * 1024  # 512 MB
MAX_LOG_FILE_SIZE_MAX: Final[int] = 4 * 1024 * 1024 * 1024  # 4 GB

# A retention window of 0 disables deletion and is accepted before this check
LOG_ROTATE_NUM_MIN: Final[int] = 1
LOG_ROTATE_NUM_MAX: Final[int] = 1024

# -----------------------------------------------------------------------------
# FILE NAMING
# -----------------------------------------------------------------------------

DEFAULT_FILE_PREFIX: Final[str] = "server"
DATETIME_TOKEN: Final[str] = "%datetime"
FILE_TIMESTAMP_FORMAT: Final[str] = "%y-%m-%d-%H:%M"
LOG_FILE_TEMPLATE: Final[str] = "{prefix}-" + DATETIME_TOKEN + "-{level}.log"

# -----------------------------------------------------------------------------
# RECORD FORMATTING
# -----------------------------------------------------------------------------

DEFAULT_LOG_FORMAT: Final[str] = "[%(asctime)s.%(msecs)03d][%(levelname)s]%(message)s"
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
