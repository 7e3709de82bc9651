"""
Error handling module for schemalog.

All errors are ordinary exceptions raised synchronously to the caller.
Formatting errors never produce partial output and are never retried.

Limitations:
- Error messages are English only.
"""

from schemalog.errors.exceptions import (
    EncodingError,
    FormatError,
    FormatterNotFoundError,
    InvalidRequestTypeError,
    MissingRequestFieldError,
    SchemaLogError,
)

__all__ = [
    "SchemaLogError",
    "FormatterNotFoundError",
    "FormatError",
    "MissingRequestFieldError",
    "InvalidRequestTypeError",
    "EncodingError",
]
