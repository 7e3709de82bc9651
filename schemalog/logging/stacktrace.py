"""
Stack trace extraction for exceptions.

An exception exposes a structured stack trace once it has been raised:
its ``__traceback__`` links every frame between the raise point and the
frame that caught it. Exceptions that were created but never raised
carry no trace.
"""

import traceback
from typing import List

from schemalog.config.base import DEFAULT_MAX_STACK_TRACE
from schemalog.schemas.records import ErrorInfo


def stack_trace(err: BaseException) -> List[str]:
    """
    Render the stack frames of an exception.

    Args:
        err: The exception to inspect

    Returns:
        One "<function> <file>:<line>" string per frame, most recent call
        first. An empty list when the exception has no traceback.
    """
    tb = getattr(err, "__traceback__", None)
    if tb is None:
        return []

    frames = traceback.extract_tb(tb)
    return [f"{frame.name} {frame.filename}:{frame.lineno}" for frame in reversed(frames)]


def make_err_info(
    err: BaseException, max_stack_trace: int = DEFAULT_MAX_STACK_TRACE
) -> ErrorInfo:
    """
    Build the error info record for an exception.

    Args:
        err: The exception to render
        max_stack_trace: Maximum number of frames to keep

    Returns:
        ErrorInfo with the exception message and at most max_stack_trace
        of its most recent frames
    """
    if max_stack_trace < 0:
        raise ValueError("max_stack_trace must not be negative")

    return ErrorInfo(msg=str(err), trace=stack_trace(err)[:max_stack_trace])
