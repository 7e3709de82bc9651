"""
Schema formatters for log entries.

This module contains one formatter per log standard and the factory that
picks the formatter for a standard. Formatters turn a LogEntry into one
JSON line and plug into the standard logging module as regular
``logging.Formatter`` instances.

Formatters keep no state between calls. Configuration is fixed when the
formatter is created, so one instance can serve several threads.
"""

import logging
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Type, Union

from pydantic_core import PydanticSerializationError

from schemalog.config.base import (
    DEFAULT_MAX_STACK_TRACE,
    TIME_LAYOUT_RFC3339,
    TIME_LAYOUT_RFC3339_NANO,
    LoggingSettings,
)
from schemalog.errors import EncodingError, FormatterNotFoundError
from schemalog.logging.entry import LogEntry
from schemalog.logging.fields import classify_app_fields, classify_http_fields
from schemalog.schemas.records import AppLogsV1Record, BaseRecord, HTTPRequestV1Record
from schemalog.schemas.standard import Standard


class SchemaFormatter(logging.Formatter):
    """
    Base class for formatters producing one log standard.

    Subclasses set ``standard`` and implement build_record.
    """

    standard: ClassVar[Standard]

    def __init__(
        self,
        time_layout: str = TIME_LAYOUT_RFC3339,
        service: str = "",
        environment: str = "",
        max_stack_trace: int = DEFAULT_MAX_STACK_TRACE,
    ):
        """
        Initialize the formatter.

        Args:
            time_layout: "rfc3339" (seconds), "rfc3339nano" (microseconds)
                or a strftime pattern
            service: Service label, omitted from records when empty
            environment: Environment label, omitted from records when empty
            max_stack_trace: Maximum frames kept for error values
        """
        super().__init__()
        if max_stack_trace < 0:
            raise ValueError("max_stack_trace must not be negative")

        self.time_layout = time_layout
        self.service = service
        self.environment = environment
        self.max_stack_trace = max_stack_trace

    def format_timestamp(self, when: datetime) -> str:
        """Format a timestamp according to the time layout."""
        if when.tzinfo is None:
            when = when.astimezone()
        if self.time_layout == TIME_LAYOUT_RFC3339:
            return when.isoformat(timespec="seconds")
        if self.time_layout == TIME_LAYOUT_RFC3339_NANO:
            return when.isoformat(timespec="microseconds")
        return when.strftime(self.time_layout)

    def build_record(self, entry: LogEntry) -> BaseRecord:
        raise NotImplementedError

    def render(self, entry: LogEntry) -> bytes:
        """
        Format a log entry as one JSON line.

        Args:
            entry: The entry to format; it is not modified

        Returns:
            UTF-8 encoded JSON object followed by a single newline

        Raises:
            MissingRequestFieldError: http.request.v1 entry without "request"
            InvalidRequestTypeError: "request" field that is not request-like
            EncodingError: The record holds a value with no JSON representation
        """
        record = self.build_record(entry)
        try:
            output = record.to_json()
        except (PydanticSerializationError, ValueError, TypeError) as exc:
            raise EncodingError(self.standard, reason=str(exc)) from exc

        return output + b"\n"

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a logging record.

        The returned line has no trailing newline; logging handlers add
        their own terminator.
        """
        return self.render(LogEntry.from_record(record)).decode("utf-8").rstrip("\n")


class AppLogsV1Formatter(SchemaFormatter):
    """Formatter for the app.logs.v1 standard."""

    standard: ClassVar[Standard] = Standard.APP_LOGS_V1

    def build_record(self, entry: LogEntry) -> AppLogsV1Record:
        channel, context = classify_app_fields(entry.fields, self.max_stack_trace)

        return AppLogsV1Record(
            service=self.service or None,
            env=self.environment or None,
            channel=channel,
            level=entry.level.render(),
            time=self.format_timestamp(entry.time),
            msg=entry.message,
            ctx=context or None,
        )


class HTTPRequestV1Formatter(SchemaFormatter):
    """Formatter for the http.request.v1 standard."""

    standard: ClassVar[Standard] = Standard.HTTP_REQUEST_V1

    def build_record(self, entry: LogEntry) -> HTTPRequestV1Record:
        request, user, error, extra = classify_http_fields(
            entry.fields, self.max_stack_trace
        )

        return HTTPRequestV1Record(
            service=self.service or None,
            env=self.environment or None,
            level=entry.level.render(),
            time=self.format_timestamp(entry.time),
            ip=request.client_ip,
            method=request.method,
            path=request.path,
            user=user or None,
            headers=request.folded_headers() or None,
            get=request.query_params() or None,
            post=request.form_params() or None,
            extra=extra or None,
            error=error,
        )


FORMATTERS: Dict[Standard, Type[SchemaFormatter]] = {
    Standard.APP_LOGS_V1: AppLogsV1Formatter,
    Standard.HTTP_REQUEST_V1: HTTPRequestV1Formatter,
}


def new_formatter(
    standard: Union[Standard, str],
    settings: Optional[LoggingSettings] = None,
    **overrides: Any,
) -> SchemaFormatter:
    """
    Get the formatter for a log standard.

    Args:
        standard: The log standard, as enum member or string value
        settings: Optional settings providing time layout, labels and
            maximum trace depth
        **overrides: Formatter arguments that take precedence over settings

    Returns:
        A configured formatter

    Raises:
        FormatterNotFoundError: If the standard is unknown

    Example:
        ```python
        formatter = new_formatter(Standard.HTTP_REQUEST_V1, service="api")
        handler.setFormatter(formatter)
        ```
    """
    try:
        formatter_cls = FORMATTERS[Standard(standard)]
    except (KeyError, ValueError):
        raise FormatterNotFoundError(standard) from None

    params: Dict[str, Any] = {}
    if settings is not None:
        params = {
            "time_layout": settings.TIME_LAYOUT,
            "service": settings.SERVICE,
            "environment": settings.ENVIRONMENT,
            "max_stack_trace": settings.MAX_STACK_TRACE,
        }
    params.update({k: v for k, v in overrides.items() if v is not None})

    return formatter_cls(**params)
