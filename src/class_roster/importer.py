"""Parsing of plain-text class lists.

Each line holds ``name,flag`` where ``flag`` is ``+`` (present) or ``-``
(absent). Lines that do not match are dropped without error.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .students import Student

LOGGER = logging.getLogger(__name__)

PRESENT_FLAG = "+"
ABSENT_FLAG = "-"


def _parse_line(line: str) -> Optional[tuple[str, bool]]:
    parts = line.split(",")
    if len(parts) != 2:
        return None
    name = parts[0].strip()
    flag = parts[1].strip()
    if any(ch.isdigit() for ch in name):
        return None
    if flag not in (PRESENT_FLAG, ABSENT_FLAG):
        return None
    return name, flag == PRESENT_FLAG


def parse_roster_text(raw_text: str) -> List[Student]:
    """Build numbered students from ``raw_text`` in line order."""
    students: List[Student] = []
    skipped = 0
    for line in raw_text.split("\n"):
        parsed = _parse_line(line)
        if parsed is None:
            if line.strip():
                skipped += 1
            continue
        name, present = parsed
        students.append(Student(student_number=len(students) + 1, name=name, is_present=present))
    if skipped:
        LOGGER.debug("Skipped %d malformed roster line(s)", skipped)
    return students
