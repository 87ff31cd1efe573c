"""Utility helpers for the models package."""

from __future__ import annotations

import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

BASE62_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


def current_seed(length: int = 4) -> str:
    """Return a seed for roster identifiers.

    The seed is a millisecond timestamp followed by a short base62 suffix,
    so two rosters normalized within the same millisecond still get
    distinct ids.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(BASE62_ALPHABET) for _ in range(length))
    return f"{millis}{suffix}"


def participant_id(seed: str, index: int) -> str:
    """Combine a roster ``seed`` with the participant position.

    Two participants normalized in the same batch always differ by ``index``,
    so the identifier stays unique even when their names are equal.
    """
    if index < 0:
        raise ValueError("index must be non-negative")
    return f"{seed}-{index}"


def generate_group_id(prefix: str = "group", length: int = 12) -> str:
    """Return a fresh group identifier using base62 random characters."""
    suffix = "".join(secrets.choice(BASE62_ALPHABET) for _ in range(length))
    return f"{prefix}-{suffix}"


def dt_iso(dt: Optional[datetime]) -> Optional[str]:
    """Convert a datetime to an ISO 8601 string in UTC, or return None.

    This is a small helper intended for serializing timestamps in JSON.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


__all__ = [
    "BASE62_ALPHABET",
    "current_seed",
    "dt_iso",
    "generate_group_id",
    "participant_id",
]
