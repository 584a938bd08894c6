"""Generate, validate, score and rank conflict-free schedules.

Pipeline: enumerate every candidate combination, drop the ones with a time
conflict, score the rest under the chosen preference, then sort descending
by score and keep the top ``max_results``. Equal scores keep generation
order, so identical input always yields identical output.
"""

from collections.abc import Sequence

from src.planner.combinations import iter_combinations
from src.planner.config import PlannerConfig, get_config
from src.planner.conflicts import is_valid
from src.planner.logging import get_logger
from src.planner.models import (
    Course,
    GeneratedSchedule,
    Preference,
    ScheduleGenerationOptions,
)
from src.planner.overlap import is_well_formed_time
from src.planner.scoring import calculate_metadata, calculate_score, resolve_preference

log = get_logger(__name__)


def malformed_times(courses: Sequence[Course]) -> list[tuple[str, str, str]]:
    """(course code, section id, time) for every slot time that is not H:MM."""
    return [
        (course.course_code, section.section_id, value)
        for course in courses
        for section in course.sections
        for slot in section.time_slots
        for value in (slot.start_time, slot.end_time)
        if not is_well_formed_time(value)
    ]


def generate_schedules(
    courses: Sequence[Course],
    options: ScheduleGenerationOptions | None = None,
    *,
    config: PlannerConfig | None = None,
) -> list[GeneratedSchedule]:
    """Rank every conflict-free schedule for ``courses``.

    Args:
        courses: Courses to schedule; one lecture (plus one matching dependent
            section where the course has them) is chosen from each.
        options: Preference and result cap. Defaults to unranked results.
        config: Planner settings; the shared configuration when omitted.

    Returns:
        At most ``max_results`` schedules, best score first. Empty when no
        courses are given or every combination conflicts.

    Raises:
        CombinationLimitError: If ``config.max_candidates`` is set and exceeded.
    """
    if not courses:
        return []

    options = options or ScheduleGenerationOptions()
    config = config or get_config()
    max_results = options.max_results or config.default_max_results
    preference = resolve_preference(options.preference)

    malformed = malformed_times(courses)
    if malformed:
        # Such slots never overlap; reported once per request
        log.warning(
            "malformed_times",
            count=len(malformed),
            sample=[f"{code}/{section_id}: {value!r}" for code, section_id, value in malformed[:5]],
        )

    candidates = 0
    schedules: list[GeneratedSchedule] = []
    for sections in iter_combinations(courses, max_candidates=config.max_candidates):
        candidates += 1
        if not is_valid(sections):
            continue
        schedules.append(
            GeneratedSchedule(
                sections=sections,
                score=calculate_score(sections, preference),
                metadata=calculate_metadata(sections),
            )
        )

    # sorted() is stable with reverse=True: ties stay in generation order
    ranked = sorted(schedules, key=lambda s: s.score, reverse=True)[:max_results]

    log.info(
        "schedules_generated",
        courses=len(courses),
        candidates=candidates,
        valid=len(schedules),
        returned=len(ranked),
        preference=preference.value if preference else None,
    )
    return ranked


def score_schedule(schedule: GeneratedSchedule, preference: Preference | str | None) -> float:
    """Re-score an already generated schedule under another preference."""
    return calculate_score(schedule.sections, preference)
