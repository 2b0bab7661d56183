"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog.
It provides structured logging with JSON formatting for production and
human-readable console output for development.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging", "get_logger", "mask_email"]


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configures the application's logging system.

    Sets up structlog with ISO timestamps, the log level, and either a JSON
    renderer (``json_logs=True``) or the development console renderer. The
    standard library root logger is pointed at stdout with the same level so
    uvicorn, SQLAlchemy and grpc records end up in the same stream.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def mask_email(email: str | None) -> str:
    """Mask an email address for logs.

    Keeps at most the first three characters of the local part; the domain is
    never logged.
    """
    if not email:
        return "***"
    local_part = email.split("@", 1)[0]
    return local_part[:3] + "***"
