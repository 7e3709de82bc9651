"""
Unit tests for logger setup.

Covers:
- Logger creation (setup_logger, get_logger, ensure_logger)
- Output of loggers for both standards through the logging module
- Field binding with FieldsAdapter
- Edge cases and error handling
"""
import io
import json
import logging

import pytest

from schemalog.config import LoggingSettings
from schemalog.errors import FormatterNotFoundError
from schemalog.logging import (
    FieldsAdapter,
    HTTPRequest,
    HTTPRequestV1Formatter,
    ensure_logger,
    get_logger,
    setup_logger,
)
from schemalog.schemas import Standard


@pytest.fixture
def stream():
    return io.StringIO()


def read_lines(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_setup_logger_app_logs(stream):
    logger = setup_logger("test.app", Standard.APP_LOGS_V1, level="DEBUG", stream=stream)
    logger.debug("test %s log", "app.logs.v1", extra={"channel": "TEST", "foo": "bar"})

    [data] = read_lines(stream)
    assert data["schema"] == "app.logs.v1"
    assert data["level"] == "debug"
    assert data["channel"] == "TEST"
    assert data["msg"] == "test app.logs.v1 log"
    assert data["ctx"] == {"foo": "bar"}


def test_setup_logger_http_request(stream):
    logger = setup_logger("test.http", "http.request.v1", stream=stream)
    request = HTTPRequest(
        method="GET",
        path="/test",
        query_string="foo=bar",
        remote_addr="1.2.3.4:1234",
        headers={"x-test": "1"},
    )
    logger.info("", extra={"request": request, "status": 404, "user": 123})

    [data] = read_lines(stream)
    assert data["schema"] == "http.request.v1"
    assert data["ip"] == "1.2.3.4"
    assert data["user"] == "123"
    assert data["get"] == {"foo": "bar"}
    assert data["extra"] == {"status": 404}


def test_exception_is_logged_as_error(stream):
    logger = setup_logger("test.exc", stream=stream)
    try:
        raise RuntimeError("wow")
    except RuntimeError:
        logger.exception("failed")

    [data] = read_lines(stream)
    assert data["level"] == "error"
    assert data["ctx"]["error"]["msg"] == "wow"
    assert data["ctx"]["error"]["trace"][0].startswith("test_exception_is_logged_as_error ")


def test_setup_logger_level_and_handlers(stream):
    logger = setup_logger("test.handlers", level="WARNING", stream=stream)
    setup_logger("test.handlers", level="WARNING", stream=stream)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1

    logger.info("ignored")
    assert stream.getvalue() == ""


def test_setup_logger_invalid_level():
    logger = setup_logger("test.invalid", level="NOTALEVEL")
    assert logger.level == logging.INFO


def test_setup_logger_unknown_standard():
    with pytest.raises(FormatterNotFoundError):
        setup_logger("test.unknown", "undefined")


def test_setup_logger_uses_settings(stream):
    settings = LoggingSettings(SERVICE="billing", ENVIRONMENT="prod", LEVEL="ERROR")
    logger = setup_logger("test.settings", stream=stream, settings=settings)
    assert logger.level == logging.ERROR

    logger.error("boom")
    [data] = read_lines(stream)
    assert data["service"] == "billing"
    assert data["env"] == "prod"


def test_get_logger_standard_from_settings():
    settings = LoggingSettings(STANDARD="http.request.v1")
    logger = get_logger("test.get", settings=settings)
    assert isinstance(logger.handlers[0].formatter, HTTPRequestV1Formatter)


def test_ensure_logger_returns_existing_logger():
    logger = get_logger("test.ensure")
    assert ensure_logger(logger, "test.ensure") is logger


def test_ensure_logger_creates_new_logger():
    ensured = ensure_logger(None, "test.ensure2")
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure2"


def test_ensure_logger_raises_without_name():
    with pytest.raises(ValueError):
        ensure_logger()


def test_fields_adapter(stream):
    logger = setup_logger("test.adapter", stream=stream)
    log = FieldsAdapter(logger).with_fields(channel="TEST", foo="bar")
    log.with_error(ValueError("wow")).info("first", extra={"foo": "override"})
    log.info("second")

    first, second = read_lines(stream)
    assert first["channel"] == "TEST"
    assert first["ctx"] == {"foo": "override", "error": {"msg": "wow", "trace": []}}
    assert second["ctx"] == {"foo": "bar"}


def test_fields_adapter_is_immutable():
    base = FieldsAdapter(logging.getLogger("test.adapter2"), {"a": 1})
    derived = base.with_fields(b=2)
    assert base.extra == {"a": 1}
    assert derived.extra == {"a": 1, "b": 2}
