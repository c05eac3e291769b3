"""Structured logging setup.

Log records are emitted as JSON lines (or plain text in development) and
carry the id of the request being served, so every line written while
handling a request can be correlated with the ``X-Request-ID`` header.
"""

import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAMESPACE = "image_bookmarks"

# Context variable for request ID
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter adding service metadata and the request id."""

    def __init__(
        self,
        service_name: str = LOGGER_NAMESPACE,
        environment: str = "development",
        **kwargs: Any,
    ) -> None:
        self.service_name = service_name
        self.environment = environment
        super().__init__(**kwargs)

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = self.service_name
        log_record["environment"] = self.environment

        request_id = request_id_var.get()
        if request_id:
            log_record["request_id"] = request_id


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    *,
    service_name: str = LOGGER_NAMESPACE,
    environment: str = "development",
) -> logging.Logger:
    """Configure the application logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: "json" for structured output, "text" for human-readable.
        service_name: Value of the ``service`` field in JSON output.
        environment: Value of the ``environment`` field in JSON output.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers so repeated app creation does not duplicate output
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if log_format == "json":
        formatter = ServiceJsonFormatter(
            service_name=service_name,
            environment=environment,
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package namespace.

    Example:
        logger = get_logger("store.redis")  # -> image_bookmarks.store.redis
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
