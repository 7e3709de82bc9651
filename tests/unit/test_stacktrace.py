"""
Unit tests for stack trace extraction and error info building.

Covers:
- Exceptions without a traceback yield an empty trace
- Frame rendering and most-recent-first ordering
- Trace depth limit (default and explicit)
"""
import pytest

from schemalog.logging.stacktrace import make_err_info, stack_trace
from schemalog.schemas import ErrorInfo


def test_unraised_error_has_no_trace():
    assert stack_trace(ValueError("e")) == []


def test_raised_error_frame_format(raised):
    err = raised(ValueError("boom"))
    trace = stack_trace(err)
    assert len(trace) == 1
    name, location = trace[0].split(" ", 1)
    assert name == "_raised"
    assert location.rsplit(":", 1)[0].endswith("conftest.py")
    assert location.rsplit(":", 1)[1].isdigit()


def test_trace_is_most_recent_call_first(deep_error):
    trace = stack_trace(deep_error(14))
    assert len(trace) == 16
    assert trace[0].startswith("recurse ")
    assert trace[-1].startswith("_deep_error ")


def test_stack_trace_returns_fresh_list(raised):
    err = raised(ValueError("boom"))
    first = stack_trace(err)
    first.append("tampered")
    assert "tampered" not in stack_trace(err)


def test_make_err_info_without_trace():
    info = make_err_info(ValueError("e"))
    assert isinstance(info, ErrorInfo)
    assert info.msg == "e"
    assert info.trace == []


def test_make_err_info_default_depth(deep_error):
    err = deep_error(14)
    info = make_err_info(err)
    assert info.msg == "deep"
    assert len(info.trace) == 10
    assert info.trace == stack_trace(err)[:10]


@pytest.mark.parametrize("depth", [0, 1, 3])
def test_make_err_info_custom_depth(deep_error, depth):
    err = deep_error(5)
    info = make_err_info(err, max_stack_trace=depth)
    assert info.trace == stack_trace(err)[:depth]


def test_make_err_info_shorter_than_limit(raised):
    info = make_err_info(raised(KeyError("k")), max_stack_trace=10)
    assert info.msg == "'k'"
    assert len(info.trace) == 1


def test_make_err_info_negative_depth():
    with pytest.raises(ValueError):
        make_err_info(ValueError("e"), max_stack_trace=-1)
