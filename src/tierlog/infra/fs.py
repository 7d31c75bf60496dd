from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path helpers used when deriving active log file locations from the
configured logs directory.
"""

import os
from typing import Optional


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def with_trailing_separator(directory: str) -> str:
    """Return `directory` guaranteed to end with a path separator."""
    if directory.endswith("/") or directory.endswith(os.sep):
        return directory
    return directory + os.sep
