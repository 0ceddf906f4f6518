"""
Structured logging for the Task Tracker.

Mutations are written as one JSON object per line so the audit trail can be
grepped or shipped to a log collector without extra parsing.
"""

import logging
import sys
from datetime import datetime, timezone
import json

from tasktracker.config import LOG_LEVEL


class StructuredLogger:
    """Logger that emits JSON payloads on top of the standard logging module."""

    def __init__(self, name: str, level: int = logging.INFO):
        """
        Initialize structured logger.

        Args:
            name: Logger name, reported as ``service`` in every payload
            level: Logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Prevent adding handlers multiple times
        if not self.logger.handlers:
            self._setup_handlers()

    def _setup_handlers(self):
        """Set up the stdout handler."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        self.logger.addHandler(console_handler)

    def _payload(self, level: int, event: str, **fields) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "event": event,
            "service": self.logger.name,
        }
        log_data.update(fields)
        return json.dumps(log_data, default=str)

    def _log_structured(self, level: int, event: str, **fields):
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._payload(level, event, **fields))

    def info(self, event: str, **fields):
        self._log_structured(logging.INFO, event, **fields)

    def exception(self, event: str, **fields):
        """Log at ERROR level with the active traceback attached."""
        if self.logger.isEnabledFor(logging.ERROR):
            self.logger.exception(self._payload(logging.ERROR, event, exception=True, **fields))


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger at the configured ``LOG_LEVEL``.

    Args:
        name: Logger name

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name, level=getattr(logging, LOG_LEVEL, logging.INFO))
