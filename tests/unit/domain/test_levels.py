from __future__ import annotations

"""
Unit tests for the Severity Level domain and configuration models.
"""

import json
import logging

import pytest

from tierlog.core.report import describe_configuration, log_configuration
from tierlog.domain.levels import TRACE_LEVEL_NUM, SeverityLevel
from tierlog.domain.log_models import LevelFileConfig, LogLevelConfiguration, RetentionConfig


@pytest.mark.parametrize("value, expected", [
    (logging.DEBUG, SeverityLevel.DEBUG),
    (logging.INFO, SeverityLevel.INFO),
    (logging.WARNING, SeverityLevel.WARNING),
    (logging.ERROR, SeverityLevel.ERROR),
    (logging.CRITICAL, SeverityLevel.FATAL),
    (TRACE_LEVEL_NUM, SeverityLevel.TRACE),
    (25, SeverityLevel.GLOBAL),
    ("warn", SeverityLevel.WARNING),
    ("CRITICAL", SeverityLevel.FATAL),
    (" Info ", SeverityLevel.INFO),
    ("verbose", SeverityLevel.GLOBAL),
    (None, SeverityLevel.GLOBAL),
    (SeverityLevel.ERROR, SeverityLevel.ERROR),
])
def test_coerce(value, expected) -> None:
    assert SeverityLevel.coerce(value) is expected


def test_trace_level_name_is_registered() -> None:
    assert logging.getLevelName(TRACE_LEVEL_NUM) == "TRACE"
    assert SeverityLevel.GLOBAL.levelno is None


def test_missing_level_falls_back_to_global_entry() -> None:
    cfg = LogLevelConfiguration(levels={SeverityLevel.GLOBAL: LevelFileConfig(True, "/x/g.log", 10)})
    assert cfg.level(SeverityLevel.INFO).file_path_template == "/x/g.log"


def test_configuration_report(caplog) -> None:
    cfg = LogLevelConfiguration(
        levels={SeverityLevel.INFO: LevelFileConfig(True, "/x/i.log", 10)},
        retention=RetentionConfig.window(4),
    )
    data = json.loads(describe_configuration(cfg))
    assert data["retention"] == {"enabled": True, "window_size": 4}
    assert data["levels"]["info"]["file_path_template"] == "/x/i.log"

    with caplog.at_level(logging.INFO, logger="tierlog.report.test"):
        log_configuration(cfg, logging.getLogger("tierlog.report.test"))
    assert "***************Config in memory***************" in caplog.text
