"""Utilities for the lucky draw subsystem."""

from .engine import DrawEngine, EmptyPoolError

__all__ = [
    "DrawEngine",
    "EmptyPoolError",
]
