"""In-memory state of the running application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .students import Roster, Student


@dataclass
class RosterSession:
    """Holds the single active roster and the lucky number.

    ``lucky_number`` is ``None`` while unset. It is only replaced by a new
    roll or an explicit clear; loading another roster keeps it.
    """

    current_class: Optional[str] = None
    students: Optional[List[Student]] = None
    lucky_number: Optional[int] = None

    @property
    def has_roster(self) -> bool:
        return bool(self.current_class) and self.students is not None

    def activate(self, roster: Roster) -> None:
        self.current_class = roster.class_name
        self.students = roster.students

    def clear(self) -> None:
        self.current_class = None
        self.students = None

    def as_roster(self) -> Optional[Roster]:
        if not self.has_roster:
            return None
        return Roster(class_name=self.current_class, students=self.students)
