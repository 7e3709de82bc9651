"""
Configuration module for schemalog.

This module provides:
- LoggingSettings: settings for formatters and loggers, loaded from the environment.
- get_settings: cached accessor for the settings.

Example environment variables:

LOG_SERVICE="billing"
LOG_ENVIRONMENT="production"
LOG_LEVEL="INFO"
LOG_STANDARD="app.logs.v1"      # Options: app.logs.v1, http.request.v1
LOG_TIME_LAYOUT="rfc3339"       # Options: rfc3339, rfc3339nano, or a strftime pattern
LOG_MAX_STACK_TRACE=10
"""

from .base import (
    DEFAULT_MAX_STACK_TRACE,
    TIME_LAYOUT_RFC3339,
    TIME_LAYOUT_RFC3339_NANO,
    LoggingSettings,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "get_settings",
    "DEFAULT_MAX_STACK_TRACE",
    "TIME_LAYOUT_RFC3339",
    "TIME_LAYOUT_RFC3339_NANO",
]
