"""Logging setup - JSON or plain text, driven by ObservabilityConfig.

Extra fields passed through ``extra={...}`` (source, destination,
error, ...) are surfaced by the JSON formatter.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, val in record.__dict__.items():
            if key not in _RESERVED and val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Install a root handler according to *config*.

    Calling it again replaces the handler installed by the previous call.

    Returns:
        The installed handler.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler()
    handler.set_name("zipdistance")
    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "zipdistance":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    return handler
