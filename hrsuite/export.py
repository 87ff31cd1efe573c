"""CSV export of grouping results."""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from .models import Group

logger = logging.getLogger(__name__)

BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv;charset=utf-8"
DEFAULT_HEADER = ("GroupName", "MemberName")


def _quote(value: str) -> str:
    """Wrap ``value`` in double quotes, doubling any embedded quote."""
    return '"' + value.replace('"', '""') + '"'


def _rows(groups: Iterable[Group]) -> Iterable[str]:
    for group in groups:
        for member in group.members:
            yield f"{_quote(group.name)},{_quote(member)}"


def to_delimited_text(
    groups: Sequence[Group],
    *,
    header: Sequence[str] = DEFAULT_HEADER,
) -> str:
    """Serialize ``groups`` as spreadsheet-friendly CSV text.

    Parameters
    ----------
    groups : Sequence[Group]
        Grouping result in display order.
    header : Sequence[str], default: ("GroupName", "MemberName")
        Header fields, written unquoted.

    Returns
    -------
    str
        A byte-order mark, the header row and one quoted
        ``"group","member"`` row per member, in group order then member
        order, joined by ``"\\n"``. An empty ``groups`` still yields the BOM
        and the header row.
    """
    lines = [",".join(header)]
    lines.extend(_rows(groups))
    return BOM + "\n".join(lines)


def default_export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"grouping-result_{today.isoformat()}.csv"


def write_delimited_file(
    groups: Sequence[Group],
    path: Union[str, os.PathLike],
) -> Path:
    """Write :func:`to_delimited_text` output to ``path`` as UTF-8."""
    target = Path(path)
    # newline="" keeps the single "\n" row separator on every platform.
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(to_delimited_text(groups))
    logger.info(f"Exported {len(groups)} groups to {target}")
    return target


__all__ = [
    "BOM",
    "CSV_MEDIA_TYPE",
    "DEFAULT_HEADER",
    "default_export_filename",
    "to_delimited_text",
    "write_delimited_file",
]
