"""Participant and winner value objects."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .utils import dt_iso


@dataclass(frozen=True)
class Participant:
    """A single named entry on the roster.

    Attributes
    ----------
    id : str
        Opaque token assigned at normalization time. It is stable for the
        lifetime of the roster snapshot that produced it.
    name : str
        Trimmed, non-empty display name. Several participants may share
        the same name.
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("name must be a string")
        if not self.name or self.name != self.name.strip():
            raise ValueError("name must be non-empty and trimmed")

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class WinnerRecord:
    """Entry in the lucky draw history.

    Attributes
    ----------
    participant : Participant
        The participant returned by the draw.
    drawn_at : int
        1-based ordinal of the draw within the current history; the first
        winner after a reset is ``1``.
    recorded_at : datetime
        UTC timestamp of the draw.
    """

    participant: Participant
    drawn_at: int
    recorded_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def to_json(self) -> dict[str, Any]:
        return {
            "participant": self.participant.to_json(),
            "drawn_at": self.drawn_at,
            "recorded_at": dt_iso(self.recorded_at),
        }

    def to_json_str(self) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False)

    def __str__(self) -> str:
        return f"NO. {self.drawn_at} {self.participant.name}"


__all__ = ["Participant", "WinnerRecord"]
