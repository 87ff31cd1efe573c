import logging
import os
import random
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .export import default_export_filename, write_delimited_file
from .grouping.engine import GroupingEngine
from .lucky_draw.engine import DrawEngine
from .models import Group, Participant
from .roster.store import RosterStore

if TYPE_CHECKING:
    from .grouping.naming import GroupNameGenerator

logger = logging.getLogger(__name__)


class EventSession:
    """Engines and results belonging to one facilitation session.

    The draw engine reads the session's :class:`RosterStore`, so replacing
    the roster is visible from the next draw onward. The grouping engine is
    stateless; the latest grouping result is kept on :attr:`groups`.

    Each engine gets its own random source. When ``rng`` is supplied, both
    sources are seeded from it, so a seeded session is reproducible and
    running a grouping never shifts the sequence of drawn winners.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        name_generator: Optional["GroupNameGenerator"] = None,
        allow_duplicates: bool = False,
    ) -> None:
        if rng is not None:
            draw_rng = random.Random(rng.getrandbits(64))
            group_rng = random.Random(rng.getrandbits(64))
        else:
            draw_rng = random.Random()
            group_rng = random.Random()

        self.roster = RosterStore()
        self.draw_engine = DrawEngine(
            self.roster, allow_duplicates=allow_duplicates, rng=draw_rng
        )
        self.grouping_engine = GroupingEngine(
            rng=group_rng, name_generator=name_generator
        )
        self.groups: list[Group] = []


def build_default_name_generator() -> Optional["GroupNameGenerator"]:
    """Return a GenAI-backed namer when an API key is configured.

    Returns
    -------
    Optional[GroupNameGenerator]
        ``None`` when ``GENAI_API_KEY`` is not available or the naming
        settings are invalid, in which case groups keep their default names.
    """
    from dotenv import load_dotenv

    load_dotenv()
    if not os.getenv("GENAI_API_KEY"):
        logger.info("GENAI_API_KEY is not set; group names will not be generated")
        return None

    from .genai.namer import GenAIGroupNamer

    try:
        return GenAIGroupNamer()
    except ValueError as e:
        logger.warning(f"Invalid group naming configuration, names will not be generated: {e}")
        return None


def run_lucky_draw(session: EventSession) -> Participant:
    """Draw one winner for ``session``.

    Raises
    ------
    EmptyPoolError
        If nobody is left to draw. The caller should surface the message
        and disable the draw action.
    """
    return session.draw_engine.draw()


def run_grouping(
    session: EventSession,
    group_size: int,
    *,
    decorate: bool = True,
    style: Optional[str] = None,
) -> list[Group]:
    """Partition the session roster and store the result on the session.

    The previous grouping result is replaced. When ``decorate`` is true and a
    name generator is configured, generated names are applied on a
    best-effort basis; failures leave the default names in place.

    Parameters
    ----------
    session : EventSession
        Session whose roster is partitioned.
    group_size : int
        Requested members per group; clamped by the engine.
    decorate : bool, default: True
        Whether to request generated group names.
    style : Optional[str], default: None
        Style hint forwarded to the name generator.

    Returns
    -------
    list[Group]
        The new grouping result.
    """
    engine = session.grouping_engine
    if decorate:
        groups = engine.partition_and_decorate(
            session.roster.participants, group_size, style=style
        )
    else:
        groups = engine.partition(session.roster.participants, group_size)
    session.groups = groups
    return groups


def export_grouping(
    session: EventSession,
    path: Optional[Union[str, os.PathLike]] = None,
) -> Path:
    """Write the latest grouping result of ``session`` to a CSV file.

    Raises
    ------
    ValueError
        If ``session`` has no grouping result yet.
    """
    if not session.groups:
        raise ValueError("No grouping result to export; run a grouping first")
    return write_delimited_file(session.groups, path or default_export_filename())
