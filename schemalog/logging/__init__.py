"""
Logging module for schemalog.

This module provides the schema formatters, the log entry model they
consume and helpers to create loggers that emit schema records.

Limitations:
- Only stream output is set up by setup_logger; transport, storage and
  rotation are left to standard logging handlers.
"""

from schemalog.logging.entry import LogEntry, LogLevel
from schemalog.logging.fields import (
    FieldKind,
    classify_app_fields,
    classify_http_fields,
    classify_value,
)
from schemalog.logging.formatters import (
    AppLogsV1Formatter,
    HTTPRequestV1Formatter,
    SchemaFormatter,
    new_formatter,
)
from schemalog.logging.manager import (
    FieldsAdapter,
    ensure_logger,
    get_logger,
    setup_logger,
)
from schemalog.logging.request import HTTPRequest
from schemalog.logging.stacktrace import make_err_info, stack_trace

__all__ = [
    "LogEntry",
    "LogLevel",
    "HTTPRequest",
    "FieldKind",
    "classify_value",
    "classify_app_fields",
    "classify_http_fields",
    "stack_trace",
    "make_err_info",
    "SchemaFormatter",
    "AppLogsV1Formatter",
    "HTTPRequestV1Formatter",
    "new_formatter",
    "setup_logger",
    "get_logger",
    "ensure_logger",
    "FieldsAdapter",
]
