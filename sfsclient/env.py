"""Reading and changing environment variables."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from .result import ResultCode, SFSError


def get_env(name: str) -> Optional[str]:
    """Return the variable's value, or None if it is unset or the name is empty."""
    if not name:
        return None
    return os.environ.get(name)


def set_env(name: str, value: str) -> bool:
    """Set a variable; returns False for an empty name or value, or on failure."""
    if not name or not value:
        return False
    try:
        os.environ[name] = value
    except (OSError, ValueError):
        return False
    return True


def unset_env(name: str) -> bool:
    """Unset a variable; returns True even if it was not set, False for an empty name."""
    if not name:
        return False
    try:
        os.environ.pop(name, None)
    except (OSError, ValueError):
        return False
    return True


@contextmanager
def scoped_env(name: str, value: str) -> Iterator[None]:
    """Set a variable for the duration of the block, then restore its old state."""
    old_value = get_env(name)
    if not set_env(name, value):
        raise SFSError(ResultCode.UNEXPECTED, "Failed to set environment variable")
    try:
        yield
    finally:
        if old_value is not None:
            set_env(name, old_value)
        else:
            unset_env(name)