from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Resolves the settings hierarchy (defaults and CLI overrides), initializes
the multi-level logging subsystem and optionally writes sample records to
check which level files receive them.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from tierlog.core.initializer import init_log_from_settings
from tierlog.core.report import log_configuration
from tierlog.core.validator import validate_log_settings
from tierlog.domain.levels import CONFIGURABLE_LEVELS
from tierlog.domain.settings import get_default_log_settings
from tierlog.infra.logging import get_logger
from tierlog.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 2 for rejected settings).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Settings resolution
    overrides = cli_args.args_to_overrides(args)
    raw = _merge_settings(get_default_log_settings(), overrides)
    settings, warnings = validate_log_settings(raw, strict=False)
    for w in warnings:
        print(f"WARNING: {w}", file=sys.stderr)

    # 2. Subsystem initialization
    result = init_log_from_settings(settings)
    if not result.ok or result.config is None:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 2

    if args.dump_config:
        print(json.dumps(result.config.to_dict(), ensure_ascii=False, indent=2))
        return 0

    log_configuration(result.config, logger)

    # 3. Optional sample traffic
    if args.emit > 0:
        _emit_samples(args.emit)

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_settings(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into the base settings."""
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out


def _emit_samples(count: int) -> None:
    sample_logger = get_logger("tierlog.sample")
    for level in CONFIGURABLE_LEVELS:
        for i in range(count):
            sample_logger.log(level.levelno, f"sample {level.value} record {i + 1}/{count}")


if __name__ == "__main__":
    sys.exit(main())
