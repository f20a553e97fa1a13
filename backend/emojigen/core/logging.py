"""JSON structured logging configuration."""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Optional

# Keys passed via ``extra=`` that are copied into the JSON entry.
EXTRA_FIELDS = (
    "component",
    "error_type",
    "caller_id",
    "status_code",
    "style",
    "category",
    "window",
    "window_size",
    "elapsed_ms",
    "processing_type",
    "data_categories",
    "legal_basis",
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON with required fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["error_type"] = record.exc_info[0].__name__
            log_entry["error_detail"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(
    service_name: str = "emojigen", stream: Optional[IO[str]] = None
) -> logging.Logger:
    """Configure and return a JSON structured logger writing to stdout by default."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    return logger
