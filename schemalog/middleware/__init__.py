"""
Middleware module for FastAPI applications.

Provides request logging in the http.request.v1 standard.

Limitations:
- Posted forms are only logged when include_form is enabled, since reading
  the form consumes the request body in the middleware.
"""

from .request_logging import (
    RequestLoggingConfig,
    RequestLoggingMiddleware,
    configure_request_logging,
)

__all__ = [
    "RequestLoggingConfig",
    "RequestLoggingMiddleware",
    "configure_request_logging",
]
