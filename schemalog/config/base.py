"""
Base configuration module for schemalog.

This module provides the settings class used to configure formatters
and loggers. Values are loaded from environment variables prefixed
with ``LOG_`` or from a ``.env`` file.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schemalog.schemas.standard import Standard

DEFAULT_MAX_STACK_TRACE = 10

# Time layouts understood besides plain strftime patterns
TIME_LAYOUT_RFC3339 = "rfc3339"
TIME_LAYOUT_RFC3339_NANO = "rfc3339nano"


class LoggingSettings(BaseSettings):
    """
    Settings for schema formatters and loggers.

    Attributes:
        SERVICE: Service label written to every record (omitted when empty)
        ENVIRONMENT: Environment label written to every record (omitted when empty)
        LEVEL: Default level for loggers created by setup_logger
        STANDARD: Default log standard for loggers created by setup_logger
        TIME_LAYOUT: "rfc3339", "rfc3339nano" or a strftime pattern
        MAX_STACK_TRACE: Maximum number of frames kept in an error trace

    Note:
        MAX_STACK_TRACE is read when a formatter is constructed. Changing
        it later does not affect formatters that already exist.
    """

    SERVICE: str = Field(default="", description="Service label")
    ENVIRONMENT: str = Field(default="", description="Environment label")
    LEVEL: str = Field(default="INFO", description="Default logger level")
    STANDARD: Standard = Field(
        default=Standard.APP_LOGS_V1, description="Default log standard"
    )
    TIME_LAYOUT: str = Field(
        default=TIME_LAYOUT_RFC3339,
        description='"rfc3339", "rfc3339nano" or a strftime pattern',
    )
    MAX_STACK_TRACE: int = Field(
        default=DEFAULT_MAX_STACK_TRACE,
        ge=0,
        description="Maximum depth of error stack traces",
    )

    @field_validator("LEVEL", mode="before")
    def validate_level(cls, value):
        """Normalize the level name and reject unknown levels."""
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LEVEL must be a logging level name, got {value!r}")
        return level

    @field_validator("TIME_LAYOUT", mode="before")
    def validate_time_layout(cls, value):
        """Reject an empty time layout."""
        if not value:
            raise ValueError("TIME_LAYOUT must not be empty")
        return value

    model_config = SettingsConfigDict(
        env_prefix="LOG_", env_file=".env", case_sensitive=True, extra="ignore"
    )


@lru_cache()
def get_settings() -> LoggingSettings:
    """
    Get the cached logging settings.

    Returns:
        LoggingSettings loaded from the environment on first call
    """
    return LoggingSettings()
