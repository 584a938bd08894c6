"""Conflict detection over selected sections.

``has_conflicts`` validates generated schedules and checks every pair of
entries, including entries of the same course. ``detect_conflicts`` and
``detect_new_course_conflicts`` serve interactive selection and skip pairs
from the same course.
"""

from collections.abc import Sequence

from src.planner.models import Conflict, ConflictingSlotPair, SelectedCourse
from src.planner.overlap import slots_overlap


def _sections_overlap(first: SelectedCourse, second: SelectedCourse) -> bool:
    return any(
        slots_overlap(slot1, slot2)
        for slot1 in first.selected_section.time_slots
        for slot2 in second.selected_section.time_slots
    )


def has_conflicts(schedule: Sequence[SelectedCourse]) -> bool:
    """Return True if any two entries of the schedule overlap in time."""
    for i, first in enumerate(schedule):
        for second in schedule[i + 1 :]:
            if _sections_overlap(first, second):
                return True
    return False


def is_valid(schedule: Sequence[SelectedCourse]) -> bool:
    """A generated schedule is valid when it has no time conflicts."""
    return not has_conflicts(schedule)


def detect_conflicts(selections: Sequence[SelectedCourse]) -> list[Conflict]:
    """List every conflicting pair of selections from different courses.

    Each conflict carries all colliding slot pairs for that pair of
    selections, in slot order.
    """
    conflicts: list[Conflict] = []

    for i, first in enumerate(selections):
        for second in selections[i + 1 :]:
            if first.course.course_code == second.course.course_code:
                continue

            colliding = [
                ConflictingSlotPair(slot1=slot1, slot2=slot2)
                for slot1 in first.selected_section.time_slots
                for slot2 in second.selected_section.time_slots
                if slots_overlap(slot1, slot2)
            ]
            if colliding:
                conflicts.append(
                    Conflict(
                        course1=first,
                        course2=second,
                        conflicting_time_slots=colliding,
                    )
                )

    return conflicts


def detect_new_course_conflicts(
    candidate: SelectedCourse,
    existing: Sequence[SelectedCourse],
) -> list[str]:
    """Course codes in ``existing`` that clash with ``candidate``.

    Entries from the candidate's own course are ignored. Each course code
    appears once, in the order it is first found.
    """
    own_code = candidate.course.course_code
    codes: list[str] = []

    for other in existing:
        code = other.course.course_code
        if code == own_code or code in codes:
            continue
        if _sections_overlap(candidate, other):
            codes.append(code)

    return codes
