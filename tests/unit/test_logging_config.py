"""Tests for structlog-backed logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from ckd_appeals.core.config import ObservabilityConfig
from ckd_appeals.hooks import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_level_applied(self) -> None:
        setup_logging(ObservabilityConfig(log_level="warning"))
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("ckd_appeals").level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        setup_logging(ObservabilityConfig(log_level="chatty"))
        assert logging.getLogger().level == logging.INFO

    def test_json_lines_when_not_a_tty(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(ObservabilityConfig(log_level="INFO"))
        logging.getLogger("ckd_appeals.test").info("Decision %s", "APPROVE", extra={"source": "fallback-rules"})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Decision APPROVE"
        assert event["level"] == "info"
        assert event["logger"] == "ckd_appeals.test"
        assert event["source"] == "fallback-rules"
