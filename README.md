# crumble

A handful of small building blocks:

- **`crumble.log`**: leveled logging. Each record carries an ISO-8601 UTC timestamp
  with microseconds and the caller's file, line and function.
- **`crumble.prandom`**: `PRandom`, a seedable xoshiro256++ pseudo-random generator
  that gives unsigned 64-bit integers and single-precision floats.
- **`crumble.common`**: runtime assertions, C integer limits, `clamp`, `dist`
  and 64-bit wrap-around.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Logging

```python
from crumble.log import LogLevel, log, set_level

set_level(LogLevel.WARN)
log(LogLevel.INFO, "not shown")            # returns None
log(LogLevel.ERROR, "disk usage at %d%%", 97)
```

A record looks like this:

```
[ERR][2024-01-01T12:00:00.000000Z][app.py:5:main] disk usage at 97%
```

The levels are `DEBUG`, `INFO`, `WARN`, `ERROR` and `FATAL`; `set_level` sets the
inclusive minimum, which starts at `DEBUG`. Records go to `sys.stderr` unless you
pass `stream=`. The message is formatted with `%` only when arguments are given.
A newline is added unless the message already ends in one. `log` returns the text
it wrote, or `None` when the record was filtered out.

Level tags are coloured only when the stream is `sys.stderr` and
`is_color_terminal()` holds: the stream is a TTY and `TERM` is set and not `dumb`.

Lower-level pieces are available too:

- `iso8601_utc_time(now=None)` formats a `datetime` (default: now) as
  `YYYY-mm-ddTHH:MM:SS.ffffffZ` in UTC.
- `format_record(level, message, timestamp, location, color=False)` builds one line.

## Pseudo-random numbers

```python
from crumble.prandom import PRandom

rng = PRandom(123)             # fixed seed
rng.next()                     # unsigned 64-bit integer
rng.next_float()               # in [0.0, 1.0]
rng.next_float(10.0)           # in [0.0, 10.0]
rng.next_float(0.7, 0.8)       # in [0.7, 0.8]
rng.seed(42)                   # reseed; returns the next value
rng.rseed()                    # reseed from the shared splitmix64 stream
```

`PRandom()` without a seed, and `rseed()`, take their state from a splitmix64
stream shared by the whole process. That stream always starts from the same
state, so a fresh process produces the same sequence of unseeded generators.

Floats are computed and rounded in single precision. `next_float` accepts at most
two arguments and raises `TypeError` otherwise.

A `PRandom` is also an endless iterator of 64-bit values.

## Helpers

```python
from crumble.common import clamp, dist, max_value_of, min_value_of, to_u64

clamp(15, 0, 10)               # 10
dist(3, 8)                     # 5
max_value_of("unsigned char")  # 255
min_value_of("int")            # -2147483648
max_value_of("u16")            # 65535
to_u64(-1)                     # 18446744073709551615
```

`min_value_of` and `max_value_of` know the C names (`char`, `signed char`,
`unsigned char`, `short`, `int`, `long`, `long long` and their unsigned forms,
with 64-bit `long`) and the short names `i8`..`i64`, `u8`..`u64` and `usize`.
For any other name they log an error record and return 0.

`assert_runtime(condition, expression="", stream=None)` logs a fatal record and
raises `RuntimeAssertionError` (a subclass of `AssertionError`) when the
condition is false.