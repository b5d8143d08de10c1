"""xoshiro256++ 1.0 pseudo-random generator with splitmix64 reseeding."""

from __future__ import annotations

import struct
from typing import Iterator

from crumble.common import to_u64

_U64_MAX = (1 << 64) - 1


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _U64_MAX


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class _SplitMix64:
    """Process-wide splitmix64 stream used for reseeding."""

    def __init__(self, state: int) -> None:
        self._state = state

    def __call__(self) -> int:
        self._state = to_u64(self._state + 0x9E3779B97F4A7C15)
        t = self._state
        t = to_u64((t ^ (t >> 30)) * 0xBF58476D1CE4E5B9)
        t = to_u64((t ^ (t >> 27)) * 0x94D049BB133111EB)
        return t ^ (t >> 31)


_smix64 = _SplitMix64(123)
_U64_MAX_F32 = _f32(float(_U64_MAX))


class PRandom:
    """A xoshiro256++ generator; seeded from ``seed`` or from splitmix64."""

    def __init__(self, seed: int | None = None) -> None:
        self._s = [0, 0, 0, 0]
        if seed is None:
            self.rseed()
        else:
            self.seed(seed)

    def next(self) -> int:
        """Return the next unsigned 64-bit value."""
        s = self._s
        result = to_u64(_rotl(to_u64(s[0] + s[3]), 23) + s[0])
        t = (s[1] << 17) & _U64_MAX

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl(s[3], 45)

        return result

    def seed(self, seed: int) -> int:
        """Seed from ``seed`` and return the next value."""
        seed = to_u64(seed)
        seed = to_u64(((seed << 45) | (seed >> 19)) * 0x94D049BB133111EB)
        seed ^= to_u64(((seed >> 10) | (seed << 4)) * 0xBF58476D1CE4E5B9)
        self._s = [seed] * 4
        return self.next()

    def rseed(self) -> int:
        """Seed from the shared splitmix64 stream and return the next value."""
        self._s = [_smix64() for _ in range(4)]
        return self.next()

    def next_float(self, *args: float) -> float:
        """Return a single-precision float.

        ``next_float()`` lies in 0..1, ``next_float(max)`` in 0..max and
        ``next_float(min, max)`` in min..max, all inclusive.
        """
        if len(args) > 2:
            raise TypeError(f"next_float() takes at most 2 arguments ({len(args)} given)")
        unit = _f32(_f32(float(self.next())) / _U64_MAX_F32)
        if not args:
            return unit
        if len(args) == 1:
            return _f32(unit * _f32(float(args[0])))
        low = _f32(float(args[0]))
        high = _f32(float(args[1]))
        return _f32(_f32(unit * _f32(high - low)) + low)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()