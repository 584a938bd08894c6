"""Helpers for editing and summarizing a student's current selection."""

from collections.abc import Sequence

from src.planner.models import (
    AnyLecture,
    Course,
    DayOfWeek,
    Section,
    SectionType,
    SelectedCourse,
    SpecificLecture,
)

DEPENDENT_SECTION_TYPES: frozenset[SectionType] = frozenset(
    {SectionType.TUTORIAL, SectionType.LAB}
)


def _is_dependent(section: Section) -> bool:
    return section.section_type in DEPENDENT_SECTION_TYPES


def get_schedule_days(selections: Sequence[SelectedCourse]) -> list[DayOfWeek]:
    """Days with at least one class, Monday first."""
    used = {
        slot.day
        for selected in selections
        for slot in selected.selected_section.time_slots
    }
    return [day for day in DayOfWeek if day in used]


def has_available_seats(section: Section) -> bool:
    """Whether a section still has room.

    Uses ``seats_remaining`` when known, then ``enrolled < quota``; sections
    without capacity data are assumed open.
    """
    if section.seats_remaining is not None:
        return section.seats_remaining > 0
    if section.quota is not None and section.enrolled is not None:
        return section.enrolled < section.quota
    return True


def calculate_total_credits(selections: Sequence[SelectedCourse]) -> float:
    """Sum of course credits, counting each course once."""
    seen: set[str] = set()
    total: float = 0
    for selected in selections:
        code = selected.course.course_code
        if code in seen:
            continue
        seen.add(code)
        total += selected.course.credits or 0
    return total


def count_unique_courses(selections: Sequence[SelectedCourse]) -> int:
    return len({selected.course.course_code for selected in selections})


def get_active_lecture_id(
    selections: Sequence[SelectedCourse],
    course: Course,
) -> str | None:
    """Lecture currently in effect for ``course``.

    A directly selected lecture wins. Otherwise the parent lecture of a
    selected tutorial/lab is used, as long as that lecture exists in the course.
    """
    own = [s for s in selections if s.course.course_code == course.course_code]

    for selected in own:
        if selected.selected_section.is_lecture:
            return selected.selected_section.section_id

    parent = next(
        (
            s.selected_section.parent_lecture
            for s in own
            if _is_dependent(s.selected_section)
            and isinstance(s.selected_section.parent_lecture, SpecificLecture)
        ),
        None,
    )
    if parent is None:
        return None

    lecture_exists = any(
        section.is_lecture and section.section_id == parent.lecture_id
        for section in course.sections
    )
    return parent.lecture_id if lecture_exists else None


def remove_dependent_sections_for_lecture(
    selections: Sequence[SelectedCourse],
    course_code: str,
    lecture_id: str,
) -> list[SelectedCourse]:
    """Keep only ``lecture_id`` and its own tutorials/labs for one course.

    Used after switching lectures so dependent sections stay in sync.
    """

    def keep(selected: SelectedCourse) -> bool:
        if selected.course.course_code != course_code:
            return True
        section = selected.selected_section
        if section.is_lecture:
            return section.section_id == lecture_id
        if _is_dependent(section):
            return (
                isinstance(section.parent_lecture, SpecificLecture)
                and section.parent_lecture.lecture_id == lecture_id
            )
        return True

    return [s for s in selections if keep(s)]


def remove_lecture_and_dependents(
    selections: Sequence[SelectedCourse],
    course_code: str,
    lecture_id: str,
) -> list[SelectedCourse]:
    """Remove a lecture, its tutorials/labs and unparented tutorials/labs of the course."""

    def keep(selected: SelectedCourse) -> bool:
        if selected.course.course_code != course_code:
            return True
        section = selected.selected_section
        if section.is_lecture:
            return section.section_id != lecture_id
        if _is_dependent(section):
            if isinstance(section.parent_lecture, AnyLecture):
                return False
            return section.parent_lecture.lecture_id != lecture_id
        return True

    return [s for s in selections if keep(s)]


def _belongs_to_lecture(section: Section, lecture_id: str) -> bool:
    parent = section.parent_lecture
    if isinstance(parent, SpecificLecture):
        return parent.lecture_id == lecture_id
    # Unlinked sections follow the catalog naming convention: lecture id prefix
    return section.section_id.startswith(lecture_id)


def pick_tutorial_for_lecture_swap(
    course: Course,
    old_lecture_id: str,
    new_lecture_id: str,
    current_tutorial_id: str,
) -> Section | None:
    """Choose the replacement tutorial/lab when switching lectures.

    The current section's id is re-prefixed with the new lecture id
    (``AT03`` under ``A`` becomes ``BT03`` under ``B``). If that section does
    not exist, the new lecture's first section by id is used.

    Returns:
        The replacement section, or None if the new lecture has no
        sections of the current one's type.
    """
    current = next(
        (s for s in course.sections if s.section_id == current_tutorial_id),
        None,
    )
    section_types = {current.section_type} if current else DEPENDENT_SECTION_TYPES

    candidates = sorted(
        (
            s
            for s in course.sections
            if s.section_type in section_types and _belongs_to_lecture(s, new_lecture_id)
        ),
        key=lambda s: s.section_id,
    )
    if not candidates:
        return None

    if current_tutorial_id.startswith(old_lecture_id):
        mapped_id = new_lecture_id + current_tutorial_id[len(old_lecture_id) :]
        for candidate in candidates:
            if candidate.section_id == mapped_id:
                return candidate

    return candidates[0]
