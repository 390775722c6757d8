"""Tests for aegis.core.logging."""

from __future__ import annotations

import json
import logging

from aegis.core.config import LoggingConfig
from aegis.core.logging import JSONFormatter, configure_logging


def _aegis_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() == "aegis"]


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        logger = configure_logging(LoggingConfig(level="DEBUG"))
        assert logger.name == "aegis"
        assert logger.level == logging.DEBUG

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging()
        logger = configure_logging(LoggingConfig(format="json"))
        handlers = _aegis_handlers(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JSONFormatter)

    def test_leaves_foreign_handlers(self) -> None:
        logger = logging.getLogger("aegis")
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        try:
            configure_logging()
            assert foreign in logger.handlers
        finally:
            logger.removeHandler(foreign)


class TestJSONFormatter:
    def test_fields(self) -> None:
        record = logging.LogRecord(
            "aegis.policy.finder", logging.WARNING, __file__, 1, "Policy not found: %s",
            ("x.Policy",), None,
        )
        payload = json.loads(JSONFormatter().format(record))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "aegis.policy.finder"
        assert payload["message"] == "Policy not found: x.Policy"
        assert "timestamp" in payload
