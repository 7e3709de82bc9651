"""
Field classification for log entries.

Each standard recognizes a few field names (channel, request, user,
error) and collects every other field into a free-form mapping. Field
values are classified explicitly into errors, requests and plain values
before they are placed in a record.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from starlette.requests import Request

from schemalog.config.base import DEFAULT_MAX_STACK_TRACE
from schemalog.errors import InvalidRequestTypeError, MissingRequestFieldError
from schemalog.logging.entry import ERROR_KEY
from schemalog.logging.request import HTTPRequest
from schemalog.logging.stacktrace import make_err_info
from schemalog.schemas.records import ErrorInfo

CHANNEL_KEY = "channel"
REQUEST_KEY = "request"
USER_KEY = "user"


class FieldKind(Enum):
    """Kinds of field values that formatters treat differently."""

    ERROR = "error"
    REQUEST = "request"
    VALUE = "value"


def classify_value(value: Any) -> FieldKind:
    """Classify a field value."""
    if isinstance(value, BaseException):
        return FieldKind.ERROR
    if isinstance(value, (HTTPRequest, Request)):
        return FieldKind.REQUEST
    return FieldKind.VALUE


def _render_value(value: Any, max_stack_trace: int) -> Any:
    if classify_value(value) is FieldKind.ERROR:
        return make_err_info(value, max_stack_trace)
    return value


def classify_app_fields(
    fields: Mapping[str, Any], max_stack_trace: int = DEFAULT_MAX_STACK_TRACE
) -> Tuple[str, Dict[str, Any]]:
    """
    Split fields for the app.logs.v1 standard.

    Args:
        fields: Entry fields; not modified
        max_stack_trace: Maximum frames kept for error values

    Returns:
        Tuple of (channel, context). A non-string channel yields "". The
        channel is never part of the context. Error values in the context
        are replaced by their ErrorInfo.
    """
    channel = ""
    context: Dict[str, Any] = {}
    for key, value in fields.items():
        if key == CHANNEL_KEY:
            channel = value if isinstance(value, str) else ""
            continue
        context[key] = _render_value(value, max_stack_trace)

    return channel, context


def as_http_request(value: Any) -> HTTPRequest:
    """
    Coerce a "request" field value to an HTTPRequest.

    Raises:
        InvalidRequestTypeError: If the value is not request-like
    """
    if isinstance(value, HTTPRequest):
        return value
    if isinstance(value, Request):
        return HTTPRequest.from_starlette(value)
    raise InvalidRequestTypeError(got=type(value).__name__)


def classify_http_fields(
    fields: Mapping[str, Any], max_stack_trace: int = DEFAULT_MAX_STACK_TRACE
) -> Tuple[HTTPRequest, str, Optional[ErrorInfo], Dict[str, Any]]:
    """
    Split fields for the http.request.v1 standard.

    Args:
        fields: Entry fields; not modified
        max_stack_trace: Maximum frames kept for error values

    Returns:
        Tuple of (request, user, error, extra)

    Raises:
        MissingRequestFieldError: If there is no "request" field
        InvalidRequestTypeError: If the "request" field is not request-like
    """
    if REQUEST_KEY not in fields:
        raise MissingRequestFieldError()

    request = as_http_request(fields[REQUEST_KEY])

    user = ""
    error = None
    extra: Dict[str, Any] = {}
    for key, value in fields.items():
        if key == REQUEST_KEY:
            continue
        if key == USER_KEY:
            user = "" if value is None else str(value)
            continue
        if key == ERROR_KEY and classify_value(value) is FieldKind.ERROR:
            error = make_err_info(value, max_stack_trace)
            continue
        extra[key] = _render_value(value, max_stack_trace)

    return request, user, error, extra
