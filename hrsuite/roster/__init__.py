"""Roster normalization and storage."""

from .normalize import (
    MOCK_ROSTER,
    Roster,
    dedupe,
    duplicate_count,
    duplicate_names,
    is_duplicate,
    normalize,
    split_lines,
)
from .store import RosterStore

__all__ = [
    "MOCK_ROSTER",
    "Roster",
    "RosterStore",
    "dedupe",
    "duplicate_count",
    "duplicate_names",
    "is_duplicate",
    "normalize",
    "split_lines",
]
