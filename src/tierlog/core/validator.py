from __future__ import annotations

"""
Log Settings Validation Service.

Normalizes the settings dictionary handed to the initializer, converting
untrusted inputs (CLI strings, loosely typed config values) into strictly
typed parameters and filling missing keys with defaults. Numeric ranges
are not checked here; the initializer owns those bounds.
"""

import logging
from typing import Any, Dict, List, Tuple

from tierlog.domain.settings import LEVEL_FLAG_KEYS, get_default_log_settings
from tierlog.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_log_settings(
        settings: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a log settings dictionary.

    Args:
        settings: Raw settings data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized settings and a list
                                          of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_log_settings()

    # 1. Base Type Validation
    if not isinstance(settings, dict):
        msg = f"Invalid settings type: expected dict, received {type(settings).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(settings)

    # 2. Schema Definition
    string_fields = ["logs_path", "file_prefix"]
    bool_fields = LEVEL_FLAG_KEYS + ["log_to_stdout", "log_to_file"]
    int_fields = ["max_log_file_size", "log_rotate_num"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in int_fields:
        merged[field] = _as_int(merged.get(field), defaults[field], field, warnings, strict)

    # 4. Domain-Specific Normalization (Paths)
    merged["logs_path"] = normalize_path(merged["logs_path"], defaults["logs_path"])

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings and integral floats into ints."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, float) and value.is_integer():
            warnings.append(f"Field '{field}' converted from float {value} to int.")
            return int(value)
        if isinstance(value, str):
            try:
                parsed = int(value.strip())
            except ValueError:
                pass
            else:
                warnings.append(f"Field '{field}' converted from '{value}' to int.")
                return parsed

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
