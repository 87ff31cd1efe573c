"""Session-owned holder for the current roster snapshot."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Union

from ..models import Participant
from .normalize import (
    MOCK_ROSTER,
    Roster,
    dedupe,
    duplicate_count,
    normalize,
    split_lines,
)

logger = logging.getLogger(__name__)


class RosterStore:
    """Owns the roster of one event session.

    The roster is an immutable tuple that is swapped as a whole on every
    change, so a snapshot taken by an engine never changes underneath it.
    """

    def __init__(self, participants: Iterable[Participant] = ()) -> None:
        self._participants: Roster = tuple(participants)

    @property
    def participants(self) -> Roster:
        return self._participants

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants)

    def replace(self, raw_lines: Iterable[str], *, record_like: bool = False) -> Roster:
        """Normalize ``raw_lines`` and replace the roster with the result."""
        self._participants = normalize(raw_lines, record_like=record_like)
        logger.info(f"Roster replaced with {len(self._participants)} participants")
        return self._participants

    def load_text(self, text: str) -> Roster:
        """Replace the roster from pasted text, one name per line."""
        return self.replace(split_lines(text))

    def load_file(
        self,
        path: Union[str, os.PathLike],
        *,
        encoding: str = "utf-8-sig",
    ) -> Roster:
        """Replace the roster from a CSV or TXT file.

        Lines are treated as records: only the first comma-separated field
        is used as the participant name.
        """
        with open(path, "r", encoding=encoding, newline="") as f:
            content = f.read()
        logger.debug(f"Read roster file {path}")
        return self.replace(split_lines(content), record_like=True)

    def load_mock(self) -> Roster:
        return self.replace(MOCK_ROSTER)

    def clear(self) -> None:
        self._participants = ()
        logger.info("Roster cleared")

    def remove_duplicates(self) -> Roster:
        """Keep only the first participant for each repeated name."""
        before = len(self._participants)
        self._participants = dedupe(self._participants)
        logger.info(
            f"Removed {before - len(self._participants)} duplicate entries from roster"
        )
        return self._participants

    def duplicate_count(self) -> int:
        return duplicate_count(self._participants)


__all__ = ["RosterStore"]
