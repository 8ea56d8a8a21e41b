"""
Logging for the todo store.

Store events are written as one JSON object per line on stderr; stdout
carries the MCP stdio transport and must stay clean.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL = resolve_log_level(os.environ.get("TODO_LOG_LEVEL", "INFO"))


class StructuredLogger:
    """Logger whose records carry keyword fields alongside the message."""

    def __init__(self, name: str, level: int = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(LOG_LEVEL if level is None else level)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
            self.logger.addHandler(handler)
            self.logger.propagate = False

    def _emit(self, level: int, message: str, exc_info: bool = False, **fields):
        if not self.logger.isEnabledFor(level):
            return

        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.logger.name,
            "message": message,
            **fields,
        }
        self.logger.log(level, json.dumps(record, default=str), exc_info=exc_info)

    def info(self, message: str, **fields):
        self._emit(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self._emit(logging.WARNING, message, **fields)

    def exception(self, message: str, **fields):
        """Log at ERROR with the traceback of the exception being handled."""
        self._emit(logging.ERROR, message, exc_info=True, **fields)


def get_logger(service_name: str) -> StructuredLogger:
    return StructuredLogger(service_name)
