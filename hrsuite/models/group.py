"""Grouping result value object."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .utils import generate_group_id


@dataclass
class Group:
    """One chunk of a roster partition.

    ``members`` holds participant names by value, so later roster changes do
    not leak into an existing grouping result. ``name`` starts out as the
    default ``"Group N"`` label and may be overwritten by decoration.
    """

    name: str
    members: list[str] = field(default_factory=list)
    id: str = field(default_factory=generate_group_id)

    @property
    def size(self) -> int:
        return len(self.members)

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "members": list(self.members)}

    def to_json_str(self) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"<Group(id='{self.id}', name='{self.name}', size={self.size})>"


__all__ = ["Group"]
