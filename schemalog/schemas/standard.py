"""
Log standards supported by schemalog.

A standard names a versioned JSON record shape. Each standard has
exactly one formatter producing it.
"""

from enum import Enum


class Standard(str, Enum):
    """Identifiers of the supported log record schemas."""

    # Application runtime events
    APP_LOGS_V1 = "app.logs.v1"
    # One record per handled HTTP request
    HTTP_REQUEST_V1 = "http.request.v1"

    def __str__(self) -> str:
        return self.value
