# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging: one JSON line per record on stdout.
Request context passed through ``extra=`` lands as top-level keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from team_scheduler.core.config import settings

CONTEXT_FIELDS: tuple[str, ...] = (
    "request_id", "method", "path", "status_code", "duration_ms", "user_id",
)


class JSONFormatter(logging.Formatter):
    """Emit every log record as a single JSON line for machine parsing."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
            log_data["stack"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that writes JSON lines at the configured level."""
    logger = logging.getLogger(name or settings.SERVICE_NAME)
    if not logger.handlers:
        logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger
