"""Engine that partitions a roster into randomly composed groups."""

from __future__ import annotations

import logging
import math
import random
from typing import Optional, Sequence

from ..models import Group, Participant
from .naming import GroupNameGenerator

logger = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2
DEFAULT_NAME_FORMAT = "Group {ordinal}"


def clamp_group_size(group_size: int, roster_size: int) -> int:
    """Clamp ``group_size`` into ``[2, max(2, roster_size)]``."""
    upper = max(MIN_GROUP_SIZE, roster_size)
    clamped = min(max(int(group_size), MIN_GROUP_SIZE), upper)
    if clamped != group_size:
        logger.debug(f"Group size {group_size} clamped to {clamped}")
    return clamped


def expected_group_count(roster_size: int, group_size: int) -> int:
    """Return how many groups :meth:`GroupingEngine.partition` will produce."""
    if roster_size <= 0:
        return 0
    return math.ceil(roster_size / clamp_group_size(group_size, roster_size))


class GroupingEngine:
    """Randomized partition of a roster into fixed-size groups."""

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        name_generator: Optional[GroupNameGenerator] = None,
        default_name_format: str = DEFAULT_NAME_FORMAT,
    ) -> None:
        """Create a grouping engine.

        Parameters
        ----------
        rng : Optional[random.Random], default: None
            Random source used for shuffling. Pass a seeded instance for
            reproducible partitions.
        name_generator : Optional[GroupNameGenerator], default: None
            Capability used by :meth:`decorate`. When omitted, groups keep
            their default names.
        default_name_format : str, default: "Group {ordinal}"
            Format string for default group names; ``ordinal`` is 1-based.
        """
        self._rng = rng or random.Random()
        self._name_generator = name_generator
        self._default_name_format = default_name_format

    @property
    def name_generator(self) -> Optional[GroupNameGenerator]:
        return self._name_generator

    def shuffle(self, roster: Sequence[Participant]) -> list[Participant]:
        """Return a uniformly random permutation of ``roster``.

        :meth:`random.Random.shuffle` is a Fisher-Yates shuffle, so every
        permutation is equally likely for a uniform source.
        """
        shuffled = list(roster)
        self._rng.shuffle(shuffled)
        return shuffled

    def partition(self, roster: Sequence[Participant], group_size: int) -> list[Group]:
        """Shuffle ``roster`` and split it into consecutive groups.

        Parameters
        ----------
        roster : Sequence[Participant]
            Participants to distribute. The sequence itself is not modified.
        group_size : int
            Target members per group, clamped into ``[2, max(2, len(roster))]``.

        Returns
        -------
        list[Group]
            ``ceil(len(roster) / group_size)`` groups. Every group has exactly
            ``group_size`` members except possibly the last one, which holds
            the remainder. An empty roster yields an empty list.
        """
        size = clamp_group_size(group_size, len(roster))
        shuffled = self.shuffle(roster)

        groups: list[Group] = []
        for start in range(0, len(shuffled), size):
            chunk = shuffled[start : start + size]
            groups.append(
                Group(
                    name=self._default_name_format.format(ordinal=len(groups) + 1),
                    members=[p.name for p in chunk],
                )
            )

        logger.info(
            f"Partitioned {len(roster)} participants into {len(groups)} groups of up to {size}"
        )
        return groups

    def decorate(self, groups: Sequence[Group], *, style: Optional[str] = None) -> int:
        """Rename ``groups`` with names from the configured generator.

        Names are applied by position. Missing, blank or non-string entries
        leave the matching group untouched, and any failure of the generator
        keeps every current name.

        Returns
        -------
        int
            Number of groups whose name changed.
        """
        if not groups or self._name_generator is None:
            return 0

        try:
            names = self._name_generator.generate(len(groups), style=style)
        except Exception as e:
            logger.warning(f"Group name generation failed, keeping default names: {e}")
            return 0

        if not isinstance(names, list):
            logger.warning("Group name generation returned no names, keeping default names")
            return 0
        if len(names) != len(groups):
            logger.warning(
                f"Group name generation returned {len(names)} names for {len(groups)} groups"
            )

        renamed = 0
        for group, name in zip(groups, names):
            if not isinstance(name, str) or not name.strip():
                continue
            group.name = name.strip()
            renamed += 1
        return renamed

    def partition_and_decorate(
        self,
        roster: Sequence[Participant],
        group_size: int,
        *,
        style: Optional[str] = None,
    ) -> list[Group]:
        """Partition ``roster`` and then apply best-effort decoration."""
        groups = self.partition(roster, group_size)
        self.decorate(groups, style=style)
        return groups


__all__ = [
    "DEFAULT_NAME_FORMAT",
    "GroupingEngine",
    "MIN_GROUP_SIZE",
    "clamp_group_size",
    "expected_group_count",
]
