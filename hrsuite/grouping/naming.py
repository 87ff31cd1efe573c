"""Capability interface for decorating groups with generated names."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Optional

DEFAULT_STYLE = "fun, professional, and energetic"
DEFAULT_LANGUAGE = "Traditional Chinese"


class GroupNameGenerator(ABC):
    """Source of display names for a grouping result.

    Implementations return an ordered list of names, or ``None`` when no
    names are available. They must not raise for transport problems; the
    grouping engine treats ``None`` as "keep the current names".
    """

    @abstractmethod
    def generate(self, count: int, *, style: Optional[str] = None) -> Optional[list[str]]:
        """Return up to ``count`` names in the requested ``style``."""


def build_naming_prompt(
    count: int,
    style: Optional[str] = None,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Return the instruction sent to a text-generation service."""
    style = style or DEFAULT_STYLE
    return (
        f"I have {count} groups of people for an HR team building event. "
        f"Please generate {count} {style} team names in {language}. "
        "Return as a JSON array of strings."
    )


def parse_names(payload: Any) -> Optional[list[Any]]:
    """Decode a name-generation reply.

    Parameters
    ----------
    payload : Any
        Either the raw JSON text returned by the service or an already
        decoded value.

    Returns
    -------
    Optional[list]
        The decoded list, or ``None`` when the payload is not valid JSON or
        does not hold an array. Element types are checked by the caller.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError:
            return None
    if not isinstance(payload, list):
        return None
    return payload


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_STYLE",
    "GroupNameGenerator",
    "build_naming_prompt",
    "parse_names",
]
