"""Random student selection with a cooldown and a lucky-number exclusion."""

from __future__ import annotations

import random
from typing import List, Optional

from .errors import EmptyRosterError
from .students import Student

DEFAULT_COOLDOWN = 3


def age_cooldowns(students: List[Student]) -> None:
    """Count one round down for every student, never below zero."""
    for student in students:
        student.times_since_last_picked = max(0, student.times_since_last_picked - 1)


def eligible_students(students: List[Student], lucky_number: Optional[int]) -> List[Student]:
    return [
        student
        for student in students
        if student.times_since_last_picked == 0
        and (lucky_number is None or student.student_number != lucky_number)
    ]


def pick_student(
    students: List[Student],
    lucky_number: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    cooldown: int = DEFAULT_COOLDOWN,
) -> Optional[Student]:
    """Run one picking round over ``students`` in place.

    Every cooldown is aged first, then one student is drawn uniformly from
    those that are off cooldown and do not hold the lucky number. The drawn
    student gets ``cooldown`` rounds of rest. Returns ``None`` when nobody is
    eligible; the ageing still applies in that case.
    """
    rng = rng or random.Random()
    age_cooldowns(students)
    pool = eligible_students(students, lucky_number)
    if not pool:
        return None
    chosen = pool[rng.randrange(len(pool))]
    chosen.times_since_last_picked = cooldown
    return chosen


def roll_lucky_number(roster_size: int, *, rng: Optional[random.Random] = None) -> int:
    if roster_size < 1:
        raise EmptyRosterError("Cannot draw a lucky number for an empty roster")
    rng = rng or random.Random()
    return rng.randint(1, roster_size)
