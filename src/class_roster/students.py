"""Domain objects for students and class rosters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from .errors import CorruptRosterError

# Field names used in the persisted JSON documents.
_FIELDS = {
    "student_number": "studentNumber",
    "name": "name",
    "is_present": "isPresent",
    "times_since_last_picked": "timesSinceLastPicked",
}


@dataclass
class Student:
    """A single student entry on a roster."""

    student_number: int
    name: str
    is_present: bool = True
    times_since_last_picked: int = 0

    @property
    def is_eligible(self) -> bool:
        return self.times_since_last_picked == 0

    def to_dict(self) -> dict[str, Any]:
        return {json_key: getattr(self, attr) for attr, json_key in _FIELDS.items()}

    @classmethod
    def from_dict(cls, entry: Any) -> "Student":
        if not isinstance(entry, dict):
            raise CorruptRosterError("Student entry must be a JSON object")
        try:
            number = entry["studentNumber"]
            name = entry["name"]
            present = entry["isPresent"]
            cooldown = entry.get("timesSinceLastPicked", 0)
        except KeyError as exc:
            raise CorruptRosterError(f"Student entry missing field: {exc.args[0]}") from exc
        # bool is an int subclass; reject it where a number is expected
        if not isinstance(number, int) or isinstance(number, bool) or number < 1:
            raise CorruptRosterError(f"Invalid studentNumber: {number!r}")
        if not isinstance(name, str):
            raise CorruptRosterError(f"Invalid name for student {number}: {name!r}")
        if not isinstance(present, bool):
            raise CorruptRosterError(f"Invalid isPresent for student {number}: {present!r}")
        if not isinstance(cooldown, int) or isinstance(cooldown, bool) or cooldown < 0:
            raise CorruptRosterError(f"Invalid timesSinceLastPicked for student {number}: {cooldown!r}")
        return cls(
            student_number=number,
            name=name,
            is_present=present,
            times_since_last_picked=cooldown,
        )


@dataclass
class Roster:
    """Named, ordered collection of students for one class."""

    class_name: str
    students: list[Student] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.students)

    def to_payload(self) -> list[dict[str, Any]]:
        return [student.to_dict() for student in self.students]

    @classmethod
    def from_payload(cls, class_name: str, payload: Any) -> "Roster":
        if not isinstance(payload, list):
            raise CorruptRosterError(f"Roster '{class_name}' must be a JSON array of students")
        return cls(class_name=class_name, students=[Student.from_dict(entry) for entry in payload])


def copy_students(students: Iterable[Student]) -> list[Student]:
    """Return detached copies so a change can be staged before it is saved."""
    return [replace(student) for student in students]
