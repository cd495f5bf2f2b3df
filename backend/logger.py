"""Structured logging configuration for the Text Preprocessor."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
HANDLER_NAME = "text_preprocessor"


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            log_data.update(record.extra)

        return json.dumps(log_data)


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """
    Set up logging on the root logger.

    Replaces a handler installed by a previous call so repeated calls (CLI
    runs, app reloads) never duplicate output. Handlers added by anything
    else are left alone.

    Args:
        log_level: Name of the logging level (DEBUG, INFO, ...)
        log_format: "json" for JSONFormatter, anything else for plain text
    """
    handler = logging.StreamHandler()
    handler.name = HANDLER_NAME
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    for existing in list(root_logger.handlers):
        if existing.name == HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
