"""Level-filtered logging with ISO-8601 UTC timestamps and optional colour."""

from __future__ import annotations

import inspect
import os
import sys
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Severity of a log record."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color_label(self) -> str:
        return _COLOR_LABELS[self]


_LABELS = {
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.FATAL: "FTL",
}

_COLOR_LABELS = {
    LogLevel.DEBUG: "\x1b[34mDBG\x1b[0m",
    LogLevel.INFO: "\x1b[32mINF\x1b[0m",
    LogLevel.WARN: "\x1b[33mWRN\x1b[0m",
    LogLevel.ERROR: "\x1b[31mERR\x1b[0m",
    LogLevel.FATAL: "\x1b[31mFTL\x1b[0m",
}

_min_level = LogLevel.DEBUG


def set_level(level: int) -> None:
    """Set the inclusive minimum level that is logged."""
    global _min_level
    _min_level = LogLevel(level)


def iso8601_utc_time(now: datetime | None = None) -> str:
    """Format a time (default: now) as ``YYYY-mm-ddTHH:MM:SS.ffffffZ`` in UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{now.strftime('%Y-%m-%dT%H:%M:%S')}.{now.microsecond:06d}Z"


def is_color_terminal(stream: TextIO | None = None) -> bool:
    """Whether ``stream`` (default stderr) is a terminal that shows colour."""
    if stream is None:
        stream = sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    term = os.environ.get("TERM")
    return bool(term) and term != "dumb"


def format_record(level: int, message: str, timestamp: str, location: str, color: bool = False) -> str:
    """Build one log line, ending it with a newline unless it already has one."""
    level = LogLevel(level)
    label = level.color_label if color else level.label
    line = f"[{label}][{timestamp}][{location}] {message}"
    return line if message.endswith("\n") else line + "\n"


def log(level: int, fmt: str, *args: Any, stream: TextIO | None = None) -> str | None:
    """Write a printf-style record to ``stream`` if ``level`` passes the filter.

    Returns the written text, or None when the record was filtered out.
    """
    level = LogLevel(level)
    if level < _min_level:
        return None
    if stream is None:
        stream = sys.stderr
    message = fmt % args if args else fmt

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        code = caller.f_code
        location = f"{os.path.basename(code.co_filename)}:{caller.f_lineno}:{code.co_name}"
    else:
        location = "?:0:?"
    del frame, caller

    color = stream is sys.stderr and is_color_terminal(stream)
    record = format_record(level, message, iso8601_utc_time(), location, color)
    stream.write(record)
    return record