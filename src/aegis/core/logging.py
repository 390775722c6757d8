"""Logging setup for the aegis CLI and host applications."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

from aegis.core.config import LoggingConfig

_HANDLER_NAME = "aegis"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """
    Attach a stderr handler to the ``aegis`` logger.

    Calling this again replaces the handler installed by a previous call,
    leaving handlers added by the host application alone.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("aegis")
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if config.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
