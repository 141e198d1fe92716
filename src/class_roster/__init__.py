"""Class rosters with attendance and a no-repeat random picker."""

from .errors import (
    CorruptRosterError,
    EmptyRosterError,
    InvalidNameError,
    NoActiveRosterError,
    RosterAlreadyExistsError,
    RosterError,
    RosterIOError,
    RosterNotFoundError,
)
from .manager import PickResult, RosterManager
from .session import RosterSession
from .storage import RosterStore
from .students import Roster, Student

__all__ = [
    "CorruptRosterError",
    "EmptyRosterError",
    "InvalidNameError",
    "NoActiveRosterError",
    "PickResult",
    "Roster",
    "RosterAlreadyExistsError",
    "RosterError",
    "RosterIOError",
    "RosterManager",
    "RosterNotFoundError",
    "RosterSession",
    "RosterStore",
    "Student",
]
