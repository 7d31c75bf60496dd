from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into log settings overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from tierlog.domain.levels import CONFIGURABLE_LEVELS, SeverityLevel
from tierlog.domain.settings import level_flag_key

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tierlog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tierlog",
        description="Per-level log files with size-based rotation and retention.",
    )

    # --- Location and Naming ---
    p.add_argument(
        "--logs-path",
        dest="logs_path",
        default=None,
        help="Directory holding active and rotated log files.",
    )
    p.add_argument(
        "--prefix",
        dest="file_prefix",
        default=None,
        help="Leading token of every log file name.",
    )

    # --- Rotation Bounds ---
    p.add_argument(
        "--max-size",
        dest="max_log_file_size",
        type=int,
        default=None,
        help="Size in bytes that triggers a rotation.",
    )
    p.add_argument(
        "--rotate-num",
        dest="log_rotate_num",
        type=int,
        default=None,
        help="Rotated files kept per level (0 keeps all).",
    )

    # --- Level Selection ---
    p.add_argument(
        "--levels",
        dest="levels",
        default=None,
        help="Comma-separated levels to enable (trace,debug,info,warning,error,fatal).",
    )

    # --- Sinks ---
    p.add_argument("--no-stdout", action="store_true", help="Do not mirror records on stdout.")
    p.add_argument("--no-file", action="store_true", help="Do not write log files.")

    # --- Diagnostic Tools ---
    p.add_argument(
        "--emit",
        dest="emit",
        type=int,
        default=0,
        help="Write N sample records per enabled level after initialization.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the applied configuration as JSON and exit.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a settings dictionary subset.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Settings overrides; None values mean "not given".
    """
    overrides: Dict[str, Any] = {
        "logs_path": args.logs_path,
        "file_prefix": args.file_prefix,
        "max_log_file_size": args.max_log_file_size,
        "log_rotate_num": args.log_rotate_num,
    }

    if args.no_stdout:
        overrides["log_to_stdout"] = False
    if args.no_file:
        overrides["log_to_file"] = False

    selected = _split_csv(args.levels)
    if selected is not None:
        chosen = {SeverityLevel.coerce(name) for name in selected}
        for level in CONFIGURABLE_LEVELS:
            overrides[level_flag_key(level)] = level in chosen

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    return [x.strip() for x in value.split(",") if x.strip()]
