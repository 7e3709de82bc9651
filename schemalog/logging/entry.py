"""
In-memory log entries.

A log entry is what a formatter consumes: a level, a timestamp, a
message and a mapping of free-form fields. Entries are usually built
from a ``logging.LogRecord``, where the fields are the attributes added
through ``extra=``.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict

ERROR_KEY = "error"

# Attribute names every LogRecord has; anything else came from ``extra``
_DEFAULT_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


class LogLevel(str, Enum):
    """
    Enum for standard logging levels.

    This provides a type-safe way to specify log levels in code and configuration.
    Levels are written to records in lowercase.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """
        Convert a level name to a LogLevel.

        Args:
            level: Level name in any case; "warn" and "fatal" are accepted

        Returns:
            The matching level, INFO for unknown names
        """
        aliases = {"WARN": cls.WARNING, "FATAL": cls.CRITICAL}
        name = level.upper()
        if name in aliases:
            return aliases[name]
        try:
            return cls(name)
        except ValueError:
            return cls.INFO

    @classmethod
    def from_levelno(cls, levelno: int) -> "LogLevel":
        """
        Convert a numeric logging level to a LogLevel.

        Custom levels map to the closest standard level at or below them;
        anything below DEBUG maps to DEBUG.
        """
        if levelno >= logging.CRITICAL:
            return cls.CRITICAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    def render(self) -> str:
        return self.value.lower()


@dataclass
class LogEntry:
    """
    One log event before formatting.

    Attributes:
        level: Severity of the event
        time: When the event happened
        message: Log message
        fields: Free-form fields; values may be primitives, sequences,
            mappings, exceptions or request objects
    """

    level: LogLevel
    time: datetime
    message: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        """
        Build a log entry from a logging record.

        Args:
            record: The record to convert

        Returns:
            LogEntry whose fields are the record's extra attributes. The
            exception from ``exc_info`` is added as "error" unless an
            "error" field was already given.
        """
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _DEFAULT_RECORD_ATTRS
        }

        if record.exc_info and record.exc_info[1] is not None:
            fields.setdefault(ERROR_KEY, record.exc_info[1])

        return cls(
            level=LogLevel.from_levelno(record.levelno),
            time=datetime.fromtimestamp(record.created).astimezone(),
            message=record.getMessage(),
            fields=fields,
        )
