"""Structured logging configuration for securebank."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
) -> None:
    """Configure logging for securebank.

    Records go to stderr so they never interleave with the menus the
    interaction loop writes to stdout.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("securebank").setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Fields attached with :func:`log_fields` become top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        fields = getattr(record, "fields", None)
        if fields:
            log_data.update(fields)

        return json.dumps(log_data, default=str)


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` mapping for a log call.

    Example: ``logger.info("Deposit", extra=log_fields(account_number="123"))``.
    Never pass a PIN.
    """
    return {"fields": fields}


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
