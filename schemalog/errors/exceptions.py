"""
Exception classes for schemalog.

This module provides the exception hierarchy raised by the formatter
factory and by the formatters themselves. Every exception carries a
human-readable message, a stable error code and optional details.
"""

from typing import Any, Dict, Optional


class SchemaLogError(Exception):
    """
    Base exception for all schemalog errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: SCHEMALOG_ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected logging error occurred",
        code: str = "SCHEMALOG_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class FormatterNotFoundError(SchemaLogError):
    """Exception raised when no formatter exists for a log standard."""

    def __init__(
        self,
        standard: Any,
        code: str = "FORMATTER_NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.standard = standard
        details = details or {}
        details["standard"] = str(standard)

        super().__init__(
            message=f"log formatter not found: log standard {str(standard)!r}",
            code=code,
            details=details,
        )


class FormatError(SchemaLogError):
    """Base exception for failures while formatting a single log entry."""

    def __init__(
        self,
        message: str = "Log entry could not be formatted",
        code: str = "FORMAT_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class MissingRequestFieldError(FormatError):
    """Exception raised when an HTTP request log has no "request" field."""

    def __init__(
        self,
        message: str = 'require "request"',
        code: str = "MISSING_REQUEST_FIELD",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class InvalidRequestTypeError(FormatError):
    """Exception raised when the "request" field is not request-like."""

    def __init__(
        self,
        got: str,
        code: str = "INVALID_REQUEST_TYPE",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.got = got
        details = details or {}
        details["got"] = got

        super().__init__(
            message=f'"request" type MUST be HTTPRequest, got {got}',
            code=code,
            details=details,
        )


class EncodingError(FormatError):
    """
    Exception raised when an assembled record cannot be serialized.

    The underlying serializer exception is available as ``__cause__``.
    """

    def __init__(
        self,
        standard: Any,
        reason: str = "",
        code: str = "ENCODING_FAILURE",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.standard = standard
        details = details or {}
        details["standard"] = str(standard)

        message = f"json encode {standard} log"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(message=message, code=code, details=details)
