from .participant import Participant, WinnerRecord
from .group import Group

__all__ = [
    "Participant",
    "WinnerRecord",
    "Group",
]
