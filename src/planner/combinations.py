"""Enumerate candidate schedules across a set of courses.

Each course contributes a list of course-local combinations: a lecture on
its own, or a lecture paired with one of its dependent sections. A
candidate schedule takes one course-local combination from every course.
No pruning happens here; conflicts are filtered afterwards.
"""

import itertools
from collections.abc import Iterator, Sequence

from src.planner.errors import CombinationLimitError
from src.planner.logging import get_logger
from src.planner.models import Course, Section, SelectedCourse

log = get_logger(__name__)


def dependents_for_lecture(course: Course, lecture: Section) -> list[Section]:
    """Non-lecture sections of ``course`` that may accompany ``lecture``.

    A section linked to a specific lecture matches only that lecture; a
    section with no parent matches every lecture.
    """
    return [
        section
        for section in course.sections
        if not section.is_lecture and section.parent_lecture.matches(lecture.section_id)
    ]


def course_combinations(course: Course) -> list[list[SelectedCourse]]:
    """All course-local combinations for one course, in catalog order.

    Returns an empty list when the course has no lecture sections.
    """
    combinations: list[list[SelectedCourse]] = []

    for lecture in (s for s in course.sections if s.is_lecture):
        lecture_entry = SelectedCourse(course=course, selected_section=lecture)
        dependents = dependents_for_lecture(course, lecture)

        if not dependents:
            combinations.append([lecture_entry])
            continue

        for dependent in dependents:
            combinations.append(
                [lecture_entry, SelectedCourse(course=course, selected_section=dependent)]
            )

    return combinations


def iter_combinations(
    courses: Sequence[Course],
    *,
    max_candidates: int | None = None,
) -> Iterator[list[SelectedCourse]]:
    """Lazily yield every candidate schedule as a flat list of selections.

    Order is lexicographic over the courses as supplied: the first course's
    combinations vary slowest.

    Args:
        courses: Courses to schedule.
        max_candidates: Optional cap on the number of candidates yielded.

    Raises:
        CombinationLimitError: If more than ``max_candidates`` candidates exist.
    """
    if not courses:
        return

    per_course: list[list[list[SelectedCourse]]] = []
    for course in courses:
        local = course_combinations(course)
        if not local:
            # One empty factor empties the whole product
            log.warning("course_has_no_lectures", course_code=course.course_code)
        per_course.append(local)

    for count, product in enumerate(itertools.product(*per_course), start=1):
        if max_candidates is not None and count > max_candidates:
            log.warning("combination_limit_exceeded", limit=max_candidates)
            raise CombinationLimitError(max_candidates)
        yield list(itertools.chain.from_iterable(product))


def generate_all_combinations(
    courses: Sequence[Course],
    *,
    max_candidates: int | None = None,
) -> list[list[SelectedCourse]]:
    """Every candidate schedule for ``courses`` (``[]`` for no courses)."""
    combinations = list(iter_combinations(courses, max_candidates=max_candidates))
    log.debug(
        "combinations_generated",
        courses=len(courses),
        candidates=len(combinations),
    )
    return combinations
