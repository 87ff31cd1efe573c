from __future__ import annotations

import logging
import sys

from hrsuite.lucky_draw import EmptyPoolError
from hrsuite.workflows import (
    EventSession,
    build_default_name_generator,
    export_grouping,
    run_grouping,
    run_lucky_draw,
)


def main(group_size: int = 4, draws: int = 3) -> None:
    """Load the mock roster, draw a few winners and export a grouping."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )

    session = EventSession(name_generator=build_default_name_generator())
    session.roster.load_mock()
    print(f"Roster: {len(session.roster)} participants")

    for _ in range(draws):
        try:
            run_lucky_draw(session)
        except EmptyPoolError as e:
            print(f"Draw stopped: {e}")
            break
    for record in session.draw_engine.history:
        print(f"  {record}")

    groups = run_grouping(session, group_size)
    for group in groups:
        print(f"{group.name} ({group.size}): {', '.join(group.members)}")

    path = export_grouping(session)
    print(f"Exported grouping to {path}")


if __name__ == "__main__":
    main(*(int(arg) for arg in sys.argv[1:3]))
