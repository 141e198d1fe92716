"""Membership changes on an ordered student list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import InvalidNameError, RosterNotFoundError
from .students import Student


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int

    @property
    def absent(self) -> int:
        return self.total - self.present


def renumber(students: List[Student]) -> None:
    """Re-derive ``student_number`` as the 1-based position of each student."""
    for index, student in enumerate(students, start=1):
        student.student_number = index


def append_student(students: List[Student], name: str) -> Student:
    name = (name or "").strip()
    if not name:
        raise InvalidNameError("Student name must not be empty")
    student = Student(student_number=len(students) + 1, name=name)
    students.append(student)
    return student


def index_of(students: List[Student], student: Student) -> int:
    for index, candidate in enumerate(students):
        if candidate is student:
            return index
    try:
        return students.index(student)
    except ValueError:
        raise RosterNotFoundError(
            f"Student {student.student_number} ({student.name}) is not on this roster"
        ) from None


def drop_student(students: List[Student], student: Student) -> Student:
    index = index_of(students, student)
    removed = students.pop(index)
    renumber(students)
    return removed


def summarize(students: List[Student]) -> AttendanceSummary:
    return AttendanceSummary(
        total=len(students),
        present=sum(1 for student in students if student.is_present),
    )


def format_as_text(students: List[Student]) -> str:
    """Render students in the ``name,+`` / ``name,-`` import format."""
    return "\n".join(f"{s.name},{'+' if s.is_present else '-'}" for s in students)
