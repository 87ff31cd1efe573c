"""Engine for drawing single winners from the roster."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, Union

from ..models import Participant, WinnerRecord
from ..roster.store import RosterStore

logger = logging.getLogger(__name__)


class EmptyPoolError(RuntimeError):
    """Raised when a draw finds no eligible participant.

    Attributes
    ----------
    roster_size : int
        Size of the roster at the time of the failed draw.
    allow_duplicates : bool
        Whether repeat winners were allowed for the failed draw.
    """

    def __init__(self, roster_size: int, allow_duplicates: bool) -> None:
        self.roster_size = roster_size
        self.allow_duplicates = allow_duplicates
        if roster_size == 0:
            message = "The roster is empty; there is nobody to draw"
        else:
            message = "Every participant has already won; no one is left in the pool"
        super().__init__(message)


class DrawEngine:
    """Stateful lucky draw over a roster with a newest-first winner history."""

    def __init__(
        self,
        roster: Union[RosterStore, Sequence[Participant]],
        *,
        allow_duplicates: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Create a draw engine.

        Parameters
        ----------
        roster : Union[RosterStore, Sequence[Participant]]
            Roster source. A :class:`RosterStore` is read at the start of
            every draw so that roster replacements are picked up; a plain
            sequence is copied once.
        allow_duplicates : bool, default: False
            When ``True`` previous winners stay in the pool.
        rng : Optional[random.Random], default: None
            Random source. Pass a seeded :class:`random.Random` to make the
            selection reproducible.
        """
        if isinstance(roster, RosterStore):
            self._store: Optional[RosterStore] = roster
            self._roster: tuple[Participant, ...] = ()
        else:
            self._store = None
            self._roster = tuple(roster)
        self._allow_duplicates = allow_duplicates
        self._rng = rng or random.Random()
        self._history: list[WinnerRecord] = []

    @property
    def roster(self) -> tuple[Participant, ...]:
        if self._store is not None:
            return self._store.participants
        return self._roster

    @property
    def allow_duplicates(self) -> bool:
        return self._allow_duplicates

    @allow_duplicates.setter
    def allow_duplicates(self, value: bool) -> None:
        # Only later pools are affected; recorded history stays as it is.
        self._allow_duplicates = bool(value)

    @property
    def history(self) -> tuple[WinnerRecord, ...]:
        """Winner records, newest first."""
        return tuple(self._history)

    @property
    def winners(self) -> tuple[Participant, ...]:
        return tuple(record.participant for record in self._history)

    def pool(self) -> tuple[Participant, ...]:
        """Return the participants eligible for the next draw."""
        roster = self.roster
        if self._allow_duplicates:
            return roster
        won = {record.participant.id for record in self._history}
        return tuple(p for p in roster if p.id not in won)

    def remaining(self) -> int:
        return len(self.pool())

    def sample_for_display(self) -> Optional[Participant]:
        """Return a random pool member for a spinning display.

        The sample is not recorded anywhere and has no bearing on the next
        :meth:`draw`.
        """
        pool = self.pool()
        if not pool:
            return None
        return pool[self._rng.randrange(len(pool))]

    def draw(self) -> Participant:
        """Draw one winner from a single pool snapshot.

        Returns
        -------
        Participant
            The winner, which is also prepended to :attr:`history`.

        Raises
        ------
        EmptyPoolError
            If the pool is empty. History is left unchanged.
        """
        pool = self.pool()
        if not pool:
            logger.warning(
                f"Draw aborted: empty pool (roster size {len(self.roster)}, "
                f"allow_duplicates={self._allow_duplicates})"
            )
            raise EmptyPoolError(len(self.roster), self._allow_duplicates)

        winner = pool[self._rng.randrange(len(pool))]
        record = WinnerRecord(participant=winner, drawn_at=len(self._history) + 1)
        self._history.insert(0, record)
        logger.info(f"Drew winner #{record.drawn_at}: {winner.name} ({winner.id})")
        return winner

    def reset(self) -> None:
        """Clear the winner history without touching the roster."""
        self._history = []
        logger.info("Draw history cleared")


__all__ = ["DrawEngine", "EmptyPoolError"]
