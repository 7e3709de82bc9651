from datetime import datetime, timedelta, timezone

import pytest

from schemalog.config import get_settings
from schemalog.logging import HTTPRequest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings are cached and read from LOG_* variables; isolate every test
    for name in (
        "LOG_SERVICE",
        "LOG_ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_STANDARD",
        "LOG_TIME_LAYOUT",
        "LOG_MAX_STACK_TRACE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_time():
    """A timezone-aware timestamp with microseconds."""
    return datetime(2019, 8, 12, 10, 13, 48, 837899, tzinfo=timezone(timedelta(hours=8)))


@pytest.fixture
def http_request():
    """Reusable request snapshot for http.request.v1 tests."""
    return HTTPRequest(
        method="GET",
        path="/test",
        query_string="foo=bar",
        remote_addr="1.2.3.4:1234",
        headers={"x-test": "1"},
    )


def _raised(exc):
    try:
        raise exc
    except BaseException as caught:
        return caught


def _deep_error(depth):
    def recurse(n):
        if n == 0:
            raise ValueError("deep")
        recurse(n - 1)

    try:
        recurse(depth)
    except ValueError as exc:
        return exc


@pytest.fixture
def raised():
    """Raise and catch an exception so that it carries a traceback."""
    return _raised


@pytest.fixture
def deep_error():
    """Build a ValueError raised depth + 1 frames below the catching frame."""
    return _deep_error
