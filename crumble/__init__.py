"""Leveled logging, integer helpers and a xoshiro256++ pseudo-random generator."""

__version__ = "0.1.0"
__all__ = ["common", "log", "prandom"]