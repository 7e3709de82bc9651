"""
Schema definitions for schemalog.

This module exposes the log standards and the pydantic record models
that formatters serialize.
"""

from schemalog.schemas.records import (
    AppLogsV1Record,
    BaseRecord,
    ErrorInfo,
    HTTPRequestV1Record,
)
from schemalog.schemas.standard import Standard

__all__ = [
    "Standard",
    "BaseRecord",
    "ErrorInfo",
    "AppLogsV1Record",
    "HTTPRequestV1Record",
]
