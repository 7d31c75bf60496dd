from __future__ import annotations

"""
Configuration report: dumps the applied logging configuration to a log.
"""

import json
import logging
from typing import Optional

from tierlog.domain.log_models import LogLevelConfiguration

_BANNER_WIDTH = 15


def describe_configuration(cfg: LogLevelConfiguration) -> str:
    return json.dumps(cfg.to_dict(), ensure_ascii=False, indent=3)


def log_configuration(cfg: LogLevelConfiguration, logger: Optional[logging.Logger] = None) -> None:
    """Emit the configuration at INFO under a 'Config in memory' banner."""
    target = logger if logger is not None else logging.getLogger(__name__)
    banner = "*" * _BANNER_WIDTH
    target.info(f"\n\n{banner}Config in memory{banner}\n\n{describe_configuration(cfg)}")
