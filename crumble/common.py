"""Runtime assertions, integer type limits and small numeric helpers."""

from __future__ import annotations

from typing import Any, TextIO

from crumble.log import LogLevel, log

U64_MASK = (1 << 64) - 1

_CHAR = (-(1 << 7), (1 << 7) - 1)
_UCHAR = (0, (1 << 8) - 1)
_SHORT = (-(1 << 15), (1 << 15) - 1)
_USHORT = (0, (1 << 16) - 1)
_INT = (-(1 << 31), (1 << 31) - 1)
_UINT = (0, (1 << 32) - 1)
_LONG = (-(1 << 63), (1 << 63) - 1)
_ULONG = (0, (1 << 64) - 1)

_LIMITS: dict[str, tuple[int, int]] = {
    "char": _CHAR,
    "signed char": _CHAR,
    "unsigned char": _UCHAR,
    "short": _SHORT,
    "unsigned short": _USHORT,
    "int": _INT,
    "unsigned int": _UINT,
    "long": _LONG,
    "unsigned long": _ULONG,
    "long long": _LONG,
    "unsigned long long": _ULONG,
    "i8": _CHAR,
    "u8": _UCHAR,
    "i16": _SHORT,
    "u16": _USHORT,
    "i32": _INT,
    "u32": _UINT,
    "i64": _LONG,
    "u64": _ULONG,
    "usize": _ULONG,
}


class RuntimeAssertionError(AssertionError):
    """Raised when a runtime assertion does not hold."""


def assert_runtime(condition: Any, expression: str = "", stream: TextIO | None = None) -> None:
    """Log at FATAL and raise if ``condition`` is false."""
    if condition:
        return
    log(LogLevel.FATAL, "Assertion `%s` failed!", expression, stream=stream)
    raise RuntimeAssertionError(f"Assertion `{expression}` failed!")


def min_value_of(type_name: str) -> int:
    """The minimum value of the named integer type, or 0 if it is not known."""
    limits = _LIMITS.get(type_name)
    if limits is None:
        log(LogLevel.ERROR, "There is no `*_MIN` for this type.")
        return 0
    return limits[0]


def max_value_of(type_name: str) -> int:
    """The maximum value of the named integer type, or 0 if it is not known."""
    limits = _LIMITS.get(type_name)
    if limits is None:
        log(LogLevel.ERROR, "There is no `*_MAX` for this type.")
        return 0
    return limits[1]


def clamp(x: Any, minimum: Any, maximum: Any) -> Any:
    """Return ``x`` limited to the range ``minimum``..``maximum``."""
    if x < minimum:
        return minimum
    if x > maximum:
        return maximum
    return x


def dist(a: Any, b: Any) -> Any:
    """The absolute distance between ``a`` and ``b``."""
    return a - b if a > b else b - a


def to_u64(value: int) -> int:
    """Wrap an integer to an unsigned 64-bit value."""
    return value & U64_MASK