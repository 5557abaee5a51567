"""
Logging configuration with JSON or plain text output.

Provides an audit trail for changes of the active currency.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from spent.core.config import settings


def setup_logging() -> None:
    """
    Configure application-wide logging.

    Sets up structured JSON logging or text logging for console use.
    Respects SPENT_LOG_LEVEL and SPENT_LOG_FORMAT from settings.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    # In development, show SQL queries
    if settings.is_development and settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    root_logger.debug(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "log_format": settings.log_format,
            "environment": settings.app_env,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


class AuditLogger:
    """
    Specialized logger for changes of user-facing settings.
    """

    def __init__(self, logger_name: str = "audit") -> None:
        self.logger = logging.getLogger(logger_name)

    def log_currency_changed(
        self,
        previous_code: str,
        code: str,
        persisted: bool,
        **kwargs: Any,
    ) -> None:
        """Log a change of the active currency."""
        self.logger.info(
            "Currency changed",
            extra={
                "event": "currency_changed",
                "previous_code": previous_code,
                "code": code,
                "persisted": persisted,
                **kwargs,
            },
        )

    def log_error(self, event: str, error: Exception, **kwargs: Any) -> None:
        """Log error with context."""
        self.logger.error(
            f"Error in {event}",
            extra={
                "event": event,
                "error_type": type(error).__name__,
                "error_message": str(error),
                **kwargs,
            },
            exc_info=error,
        )


# Global audit logger instance
audit_logger = AuditLogger()
