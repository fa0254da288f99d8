"""Helpers to log failing results and turn them into exceptions and back."""

from __future__ import annotations

import contextlib
import inspect
from typing import Callable, Iterator

from .reporting import ReportingHandler
from .result import Result, ResultCode, SFSError

_SKIPPED_FILES = {__file__, contextlib.__file__}


def _caller_location() -> tuple[str, int]:
    frame = inspect.currentframe()
    while frame is not None and frame.f_code.co_filename in _SKIPPED_FILES:
        frame = frame.f_back
    if frame is None:
        return "", 0
    location = (frame.f_code.co_filename, frame.f_lineno)
    del frame
    return location


def _log_failure(result: Result, handler: ReportingHandler) -> None:
    file, line = _caller_location()
    handler.error(
        "FAILED [%s] %s%s(%s:%u)",
        str(result.code),
        result.message,
        " " if result.message else "",
        file,
        line,
    )


def log_failed_result(result: Result, handler: ReportingHandler) -> None:
    """Log the result as an error if it is a failure."""
    if result.is_failure():
        _log_failure(result, handler)


def log_if_failed(result: Result, handler: ReportingHandler) -> None:
    if result.is_failure():
        _log_failure(result, handler)


def raise_log(result: Result, handler: ReportingHandler) -> None:
    """Log a failing result and raise it."""
    if result.is_failure() is False:
        raise ValueError("raise_log requires a failing result")
    _log_failure(result, handler)
    raise SFSError(result)


def raise_if_failed_log(result: Result, handler: ReportingHandler) -> None:
    if result.is_failure():
        _log_failure(result, handler)
        raise SFSError(result)


def _failing_result(code: ResultCode, message: str) -> Result:
    result = Result(code, message)
    if result.is_success():
        raise ValueError("a success code cannot be raised")
    return result


def raise_code_if(code: ResultCode, condition: bool, message: str = "") -> None:
    if condition:
        raise SFSError(_failing_result(code, message))


def raise_code_if_log(
    code: ResultCode, condition: bool, handler: ReportingHandler, message: str = ""
) -> None:
    if condition:
        result = _failing_result(code, message)
        _log_failure(result, handler)
        raise SFSError(result)


def capture_result(func: Callable, *args, **kwargs) -> Result:
    """Call func and express its outcome as a Result instead of an exception.

    A Result returned by func is passed through; any other return value means success.
    """
    try:
        value = func(*args, **kwargs)
    except MemoryError:
        return Result(ResultCode.OUT_OF_MEMORY)
    except SFSError as error:
        return error.result
    except Exception:
        return Result(ResultCode.UNEXPECTED)
    if isinstance(value, Result):
        return value
    return Result(ResultCode.SUCCESS)


@contextlib.contextmanager
def log_and_reraise(handler: ReportingHandler) -> Iterator[None]:
    """Log any SFSError raised in the block, then let it propagate."""
    try:
        yield
    except SFSError as error:
        log_failed_result(error.result, handler)
        raise