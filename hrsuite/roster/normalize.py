"""Helpers for turning raw participant input into a canonical roster."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Optional, Sequence

from ..models import Participant
from ..models.utils import current_seed, participant_id

Roster = tuple[Participant, ...]

MOCK_ROSTER: tuple[str, ...] = (
    "王小明", "李小華", "陳大文", "張曉芬", "林志玲",
    "周杰倫", "蔡依林", "郭台銘", "徐若瑄", "金城武",
    "劉德華", "梁朝偉", "周星馳", "成龍", "甄子丹",
)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split pasted text or file content into raw candidate lines."""
    if not text:
        return []
    return _LINE_BREAK.split(text)


def _normalize_line(
    raw: str, *, record_like: bool = False, delimiter: str = ","
) -> str:
    """Trim a raw line and, for record-like input, keep only the first field.

    Parameters
    ----------
    raw : str
        Raw line supplied by the ingestion boundary.
    record_like : bool, default: False
        When ``True`` the line is treated as a delimited record and only the
        text before the first ``delimiter`` is significant.
    delimiter : str, default: ","
        Field separator used for record-like lines.
    """
    line = raw.strip()
    if record_like:
        line = line.split(delimiter, 1)[0].strip()
    return line


def normalize(
    raw_lines: Iterable[str],
    *,
    record_like: bool = False,
    delimiter: str = ",",
    seed: Optional[str] = None,
) -> Roster:
    """Build a roster from raw lines.

    Every surviving line gets an id ``"{seed}-{index}"`` where ``index`` is
    its position among the surviving lines. Empty lines are dropped and the
    original order is preserved. Nothing in the input is treated as an
    error; an empty input yields an empty roster.

    Parameters
    ----------
    raw_lines : Iterable[str]
        One candidate name per line.
    record_like : bool, default: False
        Treat each line as a delimited record (CSV file content).
    delimiter : str, default: ","
        Field separator for record-like lines.
    seed : Optional[str], default: None
        Prefix shared by all ids in this roster. Defaults to the current
        millisecond timestamp.

    Returns
    -------
    tuple[Participant, ...]
        The new roster.
    """
    seed = seed or current_seed()
    names = [
        _normalize_line(raw, record_like=record_like, delimiter=delimiter)
        for raw in raw_lines
    ]
    return tuple(
        Participant(id=participant_id(seed, index), name=name)
        for index, name in enumerate(name for name in names if name)
    )


def duplicate_names(roster: Sequence[Participant]) -> set[str]:
    """Return the names that appear more than once in ``roster``."""
    counts = Counter(p.name for p in roster)
    return {name for name, count in counts.items() if count > 1}


def duplicate_count(roster: Sequence[Participant]) -> int:
    """Return how many distinct names are repeated.

    ``[A, B, A, C, B, B]`` yields ``2``: A and B are repeated, C is not.
    """
    return len(duplicate_names(roster))


def is_duplicate(roster: Sequence[Participant], name: str) -> bool:
    return name in duplicate_names(roster)


def dedupe(roster: Sequence[Participant]) -> Roster:
    """Return ``roster`` with only the first occurrence of each name.

    First-seen order and the surviving participants' ids are kept, so the
    operation is idempotent.
    """
    unique: list[Participant] = []
    seen: set[str] = set()
    for participant in roster:
        if participant.name in seen:
            continue
        seen.add(participant.name)
        unique.append(participant)
    return tuple(unique)


__all__ = [
    "MOCK_ROSTER",
    "Roster",
    "dedupe",
    "duplicate_count",
    "duplicate_names",
    "is_duplicate",
    "normalize",
    "split_lines",
]
