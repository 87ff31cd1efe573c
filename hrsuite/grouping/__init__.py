"""Utilities for the grouping subsystem."""

from .engine import (
    DEFAULT_NAME_FORMAT,
    GroupingEngine,
    MIN_GROUP_SIZE,
    clamp_group_size,
    expected_group_count,
)
from .naming import GroupNameGenerator, build_naming_prompt, parse_names

__all__ = [
    "DEFAULT_NAME_FORMAT",
    "GroupNameGenerator",
    "GroupingEngine",
    "MIN_GROUP_SIZE",
    "build_naming_prompt",
    "clamp_group_size",
    "expected_group_count",
    "parse_names",
]
