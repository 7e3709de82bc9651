"""
Request logging middleware for FastAPI applications.

This module provides middleware that writes one http.request.v1 record
for every handled request.
"""

import logging
import time
from typing import List, Optional

from fastapi import FastAPI, Request, Response
from pydantic import BaseModel, Field
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from schemalog.logging import HTTPRequest, LogLevel, ensure_logger
from schemalog.schemas.standard import Standard

logger = logging.getLogger(__name__)

STATUS_KEY = "status"
LATENCY_KEY = "latency_ms"


class RequestLoggingConfig(BaseModel):
    """Configuration for request logging middleware."""

    exclude_paths: List[str] = Field(
        default=[], description="List of path prefixes that are not logged"
    )
    log_level: str = Field(
        default="info", description="Log level for successful requests"
    )
    include_form: bool = Field(
        default=False,
        description="Whether to read and log posted form fields",
    )
    user_attr: str = Field(
        default="user",
        description="Attribute of request.state holding the user identifier",
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware logging each request in the http.request.v1 standard.

    The record carries the request, the response status and the time
    spent handling the request. When the endpoint raises, the exception
    is logged at error level with status 500 and raised again.
    """

    def __init__(
        self,
        app: ASGIApp,
        request_logger: Optional[logging.Logger] = None,
        exclude_paths: List[str] = None,
        log_level: str = "info",
        include_form: bool = False,
        user_attr: str = "user",
    ):
        """
        Initialize the request logging middleware.

        Args:
            app: The ASGI application
            request_logger: Logger with an http.request.v1 formatter; a
                stdout logger is created when omitted
            exclude_paths: Path prefixes that are not logged
            log_level: Log level for requests that did not raise
            include_form: Whether to read the posted form
            user_attr: Attribute of request.state holding the user
        """
        super().__init__(app)
        self.request_logger = ensure_logger(
            request_logger, "schemalog.requests", Standard.HTTP_REQUEST_V1
        )
        self.exclude_paths = exclude_paths or []
        self.log_level = logging.getLevelName(LogLevel.from_string(log_level).value)
        self.include_form = include_form
        self.user_attr = user_attr

        logger.debug(f"Request logging middleware initialized at level: {log_level}")

    def should_process(self, request: Request) -> bool:
        """
        Determine if the request should be logged.

        Args:
            request: The FastAPI request

        Returns:
            True if the request should be logged, False otherwise
        """
        path = request.url.path
        for exclude_path in self.exclude_paths:
            if path.startswith(exclude_path):
                return False

        return True

    async def snapshot(self, request: Request) -> HTTPRequest:
        """Take a snapshot of the request, reading the form if enabled."""
        form = None
        if self.include_form and request.method in ("POST", "PUT", "PATCH"):
            # Cache the body first so it is replayed to the endpoint.
            await request.body()
            form = await request.form()
        return HTTPRequest.from_starlette(request, form=form)

    def log_request(
        self,
        level: int,
        snapshot: HTTPRequest,
        request: Request,
        status_code: int,
        started: float,
        error: Optional[BaseException] = None,
    ) -> None:
        fields = {
            "request": snapshot,
            STATUS_KEY: status_code,
            LATENCY_KEY: round((time.perf_counter() - started) * 1000, 3),
        }
        user = getattr(request.state, self.user_attr, None)
        if user is not None:
            fields["user"] = user
        if error is not None:
            fields["error"] = error

        self.request_logger.log(level, "", extra=fields)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """
        Process the request and log it.

        Args:
            request: The FastAPI request
            call_next: The next middleware or endpoint handler

        Returns:
            The response from the next handler
        """
        if not self.should_process(request):
            return await call_next(request)

        started = time.perf_counter()
        snapshot = None

        try:
            snapshot = await self.snapshot(request)
            response = await call_next(request)
        except Exception as exc:
            if snapshot is None:
                snapshot = HTTPRequest.from_starlette(request)
            self.log_request(logging.ERROR, snapshot, request, 500, started, error=exc)
            raise

        self.log_request(self.log_level, snapshot, request, response.status_code, started)
        return response


def configure_request_logging(
    app: FastAPI,
    config: Optional[RequestLoggingConfig] = None,
    request_logger: Optional[logging.Logger] = None,
    **kwargs,
) -> None:
    """
    Configure request logging middleware for a FastAPI application.

    Args:
        app: The FastAPI application instance
        config: A RequestLoggingConfig instance with settings
        request_logger: Logger with an http.request.v1 formatter
        **kwargs: Additional settings to override config values

    Example:
        ```python
        from fastapi import FastAPI
        from schemalog.logging import setup_logger
        from schemalog.middleware import configure_request_logging

        app = FastAPI()
        configure_request_logging(
            app,
            request_logger=setup_logger("access", "http.request.v1"),
            exclude_paths=["/health"],
        )
        ```
    """
    if config is None:
        config = RequestLoggingConfig()

    params = config.model_dump()
    params.update({k: v for k, v in kwargs.items() if v is not None})

    app.add_middleware(RequestLoggingMiddleware, request_logger=request_logger, **params)
