"""
Logger setup for schemalog.

This module creates standard library loggers whose handler writes one
schema record per log call, and an adapter for binding fields to a
logger.
"""

import logging
import sys
from typing import IO, Any, Dict, Optional, Union

from schemalog.config.base import LoggingSettings
from schemalog.logging.entry import ERROR_KEY
from schemalog.logging.formatters import new_formatter
from schemalog.schemas.standard import Standard


def setup_logger(
    name: str,
    standard: Union[Standard, str] = Standard.APP_LOGS_V1,
    level: Optional[str] = None,
    stream: Optional[IO[str]] = None,
    settings: Optional[LoggingSettings] = None,
) -> logging.Logger:
    """
    Create and configure a logger emitting one log standard.

    Args:
        name: Logger name (usually __name__)
        standard: Log standard written by the logger
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the settings' level, then INFO
        stream: Output stream, stdout by default
        settings: Optional settings for the formatter

    Returns:
        Configured logger instance

    Raises:
        FormatterNotFoundError: If the standard is unknown
    """
    formatter = new_formatter(standard, settings)

    if level is None:
        level = settings.LEVEL if settings is not None else "INFO"
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(
    name: str,
    standard: Optional[Union[Standard, str]] = None,
    settings: Optional[LoggingSettings] = None,
) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        standard: Log standard; defaults to the settings' standard, then app.logs.v1
        settings: Optional logging settings

    Returns:
        Configured logger instance
    """
    if standard is None:
        standard = settings.STANDARD if settings is not None else Standard.APP_LOGS_V1

    return setup_logger(name, standard, settings=settings)


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
    standard: Optional[Union[Standard, str]] = None,
    settings: Optional[LoggingSettings] = None,
) -> logging.Logger:
    """
    Use the provided logger or create a new one.

    Args:
        logger: An existing logger instance to use if provided
        name: Logger name for creating a new logger if needed
        standard: Log standard for a new logger
        settings: Optional logging settings for a new logger

    Returns:
        Either the provided logger or a newly created one
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Logger name must be provided when logger is not specified")

    return get_logger(name, standard, settings)


class FieldsAdapter(logging.LoggerAdapter):
    """
    Logger adapter carrying bound fields.

    Bound fields are passed as ``extra`` on every call; fields given to
    a single call override bound ones.

    Example:
        ```python
        log = FieldsAdapter(logger).with_fields(channel="billing")
        log.with_error(exc).error("charge failed", extra={"order": 42})
        ```
    """

    def __init__(self, logger: logging.Logger, fields: Optional[Dict[str, Any]] = None):
        super().__init__(logger, dict(fields or {}))

    def with_fields(self, **fields: Any) -> "FieldsAdapter":
        """Return a new adapter with additional bound fields."""
        return FieldsAdapter(self.logger, {**self.extra, **fields})

    def with_error(self, err: BaseException) -> "FieldsAdapter":
        """Return a new adapter with the error bound as the "error" field."""
        return self.with_fields(**{ERROR_KEY: err})

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs
