"""Roster bookkeeping: persistence, membership and random picking."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, List, Optional, Set, TypeVar

from . import picker
from .errors import NoActiveRosterError, RosterAlreadyExistsError, RosterIOError
from .importer import parse_roster_text
from .logger import get_logger
from .roster import (
    AttendanceSummary,
    append_student,
    drop_student,
    format_as_text,
    index_of,
    summarize,
)
from .session import RosterSession
from .storage import RosterStore, validate_class_name
from .students import Roster, Student, copy_students

T = TypeVar("T")

PICKED = "picked"
NO_ELIGIBLE = "no_eligible"
NO_STUDENTS = "no_students"


@dataclass(frozen=True)
class PickResult:
    """Outcome of one random-pick round."""

    outcome: str
    student: Optional[Student] = None

    @property
    def picked(self) -> bool:
        return self.outcome == PICKED


class RosterManager:
    """Coordinate the active session with the roster store.

    Every mutation is staged on a copy of the student list, written to the
    store, and only then committed to the session. A failed write therefore
    leaves both the session and the previous document untouched. Committing
    copies the staged values back into the existing ``Student`` objects, so
    handles returned earlier stay valid.
    """

    def __init__(
        self,
        store: RosterStore,
        session: Optional[RosterSession] = None,
        *,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        rng: Optional[random.Random] = None,
        cooldown: int = picker.DEFAULT_COOLDOWN,
    ) -> None:
        self._store = store
        self.session = session or RosterSession()
        self._logger = logger or get_logger("manager")
        self._rng = rng or random.Random()
        self._cooldown = cooldown

    @property
    def store(self) -> RosterStore:
        return self._store

    @property
    def cooldown(self) -> int:
        return self._cooldown

    @property
    def current_class(self) -> Optional[str]:
        return self.session.current_class

    @property
    def students(self) -> List[Student]:
        return list(self.session.students or [])

    # ------------------------------------------------------------------ persistence
    def list_rosters(self) -> Set[str]:
        return self._store.list_rosters()

    def load_roster(self, class_name: str) -> Roster:
        roster = self._store.load(class_name)
        self.session.activate(roster)
        self._logger.info("Loaded class '%s' (%d students)", roster.class_name, len(roster))
        return roster

    def save_roster(self, roster: Optional[Roster] = None) -> None:
        if roster is None:
            roster = self._require_roster()
        self._store.save(roster)

    def import_from_text(self, class_name: str, raw_text: str) -> List[Student]:
        class_name = validate_class_name(class_name)
        if self._store.exists(class_name):
            raise RosterAlreadyExistsError(f"Class '{class_name}' already exists")
        roster = Roster(class_name=class_name, students=parse_roster_text(raw_text))
        self._store.save(roster)
        self.session.activate(roster)
        self._logger.info("Imported %d student(s) into class '%s'", len(roster), class_name)
        return roster.students

    def import_file(self, path: Path | str) -> List[Student]:
        path = Path(path)
        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RosterIOError(f"Cannot read {path}: {exc}") from exc
        return self.import_from_text(path.stem, raw_text)

    def create_empty_roster(self, class_name: str) -> Roster:
        class_name = validate_class_name(class_name)
        if self._store.exists(class_name):
            raise RosterAlreadyExistsError(f"Class '{class_name}' already exists")
        roster = Roster(class_name=class_name)
        self._store.save(roster)
        self.session.activate(roster)
        self._logger.info("Created empty class '%s'", class_name)
        return roster

    def delete_roster(self, class_name: Optional[str] = None) -> str:
        target = class_name or self.session.current_class
        if not target:
            raise NoActiveRosterError("No class is selected")
        self._store.delete(target)
        if target == self.session.current_class:
            self.session.clear()
        self._logger.info("Deleted class '%s'", target)
        return target

    # ------------------------------------------------------------------ membership
    def add_student(self, name: str) -> Student:
        return self._mutate(lambda students: append_student(students, name), "add student")

    def remove_student(self, student: Student) -> Student:
        index = index_of(self._require_students(), student)

        def _remove(students: List[Student]) -> Student:
            return drop_student(students, students[index])

        return self._mutate(_remove, "remove student")

    def set_presence(self, student: Student, present: bool) -> Student:
        index = index_of(self._require_students(), student)

        def _mark(students: List[Student]) -> Student:
            students[index].is_present = present
            return students[index]

        return self._mutate(_mark, "update attendance")

    def attendance_summary(self) -> AttendanceSummary:
        return summarize(self._require_students())

    def export_text(self) -> str:
        return format_as_text(self._require_students())

    # ------------------------------------------------------------------ picking
    def pick_random_student(self) -> PickResult:
        if not self._require_students():
            return PickResult(outcome=NO_STUDENTS)
        lucky = self.session.lucky_number

        def _pick(students: List[Student]) -> Optional[Student]:
            return picker.pick_student(students, lucky, rng=self._rng, cooldown=self._cooldown)

        chosen = self._mutate(_pick, "pick student")
        if chosen is None:
            self._logger.info("No eligible student this round")
            return PickResult(outcome=NO_ELIGIBLE)
        self._logger.info("Picked student %d (%s)", chosen.student_number, chosen.name)
        return PickResult(outcome=PICKED, student=chosen)

    def roll_lucky_number(self) -> int:
        students = self._require_students()
        number = picker.roll_lucky_number(len(students), rng=self._rng)
        self.session.lucky_number = number
        self._logger.info("Lucky number is %d", number)
        return number

    def clear_lucky_number(self) -> None:
        self.session.lucky_number = None

    # ------------------------------------------------------------------ internals
    def _require_roster(self) -> Roster:
        roster = self.session.as_roster()
        if roster is None:
            raise NoActiveRosterError("No class is selected")
        return roster

    def _require_students(self) -> List[Student]:
        return self._require_roster().students

    def _mutate(self, change: Callable[[List[Student]], T], action: str) -> T:
        roster = self._require_roster()
        staged = copy_students(roster.students)
        live_by_copy = {id(copy): live for copy, live in zip(staged, roster.students)}
        result = change(staged)
        try:
            self._store.save(Roster(class_name=roster.class_name, students=staged))
        except RosterIOError:
            self._logger.warning("Could not %s in '%s'; nothing was changed", action, roster.class_name)
            raise
        committed = []
        for student in staged:
            live = live_by_copy.get(id(student))
            if live is None:
                committed.append(student)
                continue
            for item in fields(Student):
                setattr(live, item.name, getattr(student, item.name))
            committed.append(live)
        self.session.students[:] = committed
        if isinstance(result, Student):
            return live_by_copy.get(id(result), result)
        return result
