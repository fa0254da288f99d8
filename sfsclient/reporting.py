"""Log severities and a thread-safe holder for the logging callback."""

from __future__ import annotations

import inspect
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

MAX_LOG_MESSAGE_SIZE = 1024


class LogSeverity(Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    VERBOSE = "Verbose"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LogData:
    """One log record passed to the logging callback."""

    severity: LogSeverity
    message: str
    file: str
    line: int
    function: str
    time: datetime


LoggingCallback = Callable[[LogData], None]


def _caller_frame():
    frame = inspect.currentframe()
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    return frame


class ReportingHandler:
    """Forwards log records to an externally set callback, one thread at a time."""

    def __init__(self) -> None:
        self._callback: Optional[LoggingCallback] = None
        self._lock = threading.RLock()

    def set_logging_callback(self, callback: Optional[LoggingCallback]) -> None:
        """Set the callback; pass None to reset it."""
        with self._lock:
            self._callback = callback

    def log(self, severity: LogSeverity, message: str, *args) -> None:
        """Log a message; with args it is %-formatted and cut to the maximum size."""
        if args:
            message = (message % args)[: MAX_LOG_MESSAGE_SIZE - 1]
        frame = _caller_frame()
        if frame is not None:
            file, line, function = frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name
        else:
            file, line, function = "", 0, ""
        del frame
        with self._lock:
            if self._callback is not None:
                self._callback(
                    LogData(severity, message, file, line, function, datetime.now(timezone.utc))
                )

    def info(self, message: str, *args) -> None:
        self.log(LogSeverity.INFO, message, *args)

    def warning(self, message: str, *args) -> None:
        self.log(LogSeverity.WARNING, message, *args)

    def error(self, message: str, *args) -> None:
        self.log(LogSeverity.ERROR, message, *args)

    def verbose(self, message: str, *args) -> None:
        self.log(LogSeverity.VERBOSE, message, *args)