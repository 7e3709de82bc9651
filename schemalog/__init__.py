"""
schemalog - JSON log record schemas for Python applications.

This package formats structured log entries into two fixed JSON Lines
schemas: app.logs.v1 for application events and http.request.v1 for
HTTP requests. Formatters plug into the standard logging module.

Usage:
    from schemalog import Standard, setup_logger

    logger = setup_logger(__name__, Standard.APP_LOGS_V1)
    logger.info("user signed in", extra={"channel": "auth", "user_id": 42})
"""

__version__ = "0.1.0"

# Public API exports
from schemalog.config import LoggingSettings, get_settings
from schemalog.errors import (
    EncodingError,
    FormatterNotFoundError,
    InvalidRequestTypeError,
    MissingRequestFieldError,
    SchemaLogError,
)
from schemalog.logging import (
    AppLogsV1Formatter,
    FieldsAdapter,
    HTTPRequest,
    HTTPRequestV1Formatter,
    LogEntry,
    LogLevel,
    get_logger,
    new_formatter,
    setup_logger,
)
from schemalog.schemas import ErrorInfo, Standard
