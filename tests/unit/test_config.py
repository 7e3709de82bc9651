"""
Unit tests for the config module.

These tests cover:
- Default settings
- Environment variable loading with the LOG_ prefix
- Validators for LEVEL, TIME_LAYOUT and MAX_STACK_TRACE
- Cached settings access
"""

import pytest
from pydantic import ValidationError

from schemalog.config import LoggingSettings, get_settings
from schemalog.schemas import Standard


def test_defaults():
    settings = LoggingSettings()
    assert settings.SERVICE == ""
    assert settings.ENVIRONMENT == ""
    assert settings.LEVEL == "INFO"
    assert settings.STANDARD is Standard.APP_LOGS_V1
    assert settings.TIME_LAYOUT == "rfc3339"
    assert settings.MAX_STACK_TRACE == 10


def test_env_override(monkeypatch):
    monkeypatch.setenv("LOG_SERVICE", "billing")
    monkeypatch.setenv("LOG_ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_STANDARD", "http.request.v1")
    monkeypatch.setenv("LOG_MAX_STACK_TRACE", "20")
    settings = LoggingSettings()
    assert settings.SERVICE == "billing"
    assert settings.ENVIRONMENT == "production"
    assert settings.LEVEL == "DEBUG"
    assert settings.STANDARD is Standard.HTTP_REQUEST_V1
    assert settings.MAX_STACK_TRACE == 20


def test_invalid_level():
    with pytest.raises(ValidationError):
        LoggingSettings(LEVEL="NOTALEVEL")


def test_negative_max_stack_trace():
    with pytest.raises(ValidationError):
        LoggingSettings(MAX_STACK_TRACE=-1)


def test_empty_time_layout():
    with pytest.raises(ValidationError):
        LoggingSettings(TIME_LAYOUT="")


def test_unknown_standard():
    with pytest.raises(ValidationError):
        LoggingSettings(STANDARD="undefined")


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("LOG_SERVICE", "first")
    settings = get_settings()
    monkeypatch.setenv("LOG_SERVICE", "second")
    assert get_settings() is settings
    assert get_settings().SERVICE == "first"
