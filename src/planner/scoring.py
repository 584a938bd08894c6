"""Per-day schedule aggregates and preference scoring.

Every preference produces a higher-is-better score from a few per-day
aggregates: gaps between consecutive classes, long breaks, and each day's
first start and last end. Days without classes are left out of averages.
"""

from collections.abc import Callable, Sequence

from src.planner.logging import get_logger
from src.planner.models import (
    WEEKDAYS,
    DayOfWeek,
    Preference,
    ScheduleMetadata,
    SelectedCourse,
    TimeSlot,
)
from src.planner.overlap import time_to_minutes

log = get_logger(__name__)

LONG_BREAK_MINUTES = 60
SHORT_BREAKS_CEILING = 1000
CONSISTENT_START_CEILING = 1000
END_EARLY_CEILING = 1200  # 20:00
LONG_BREAK_POINTS = 100
FREE_DAY_POINTS = 200


def group_by_day(schedule: Sequence[SelectedCourse]) -> dict[DayOfWeek, list[TimeSlot]]:
    """Collect every time slot of the schedule by day, sorted by start time."""
    grouped: dict[DayOfWeek, list[TimeSlot]] = {}
    for selected in schedule:
        for slot in selected.selected_section.time_slots:
            grouped.setdefault(slot.day, []).append(slot)

    for slots in grouped.values():
        slots.sort(key=lambda s: time_to_minutes(s.start_time))
    return grouped


def _daily_gaps(schedule: Sequence[SelectedCourse]) -> list[float]:
    """Raw gap before each class that follows another class on the same day."""
    gaps: list[float] = []
    for slots in group_by_day(schedule).values():
        for current, following in zip(slots, slots[1:]):
            gaps.append(time_to_minutes(following.start_time) - time_to_minutes(current.end_time))
    return gaps


def total_gap_minutes(schedule: Sequence[SelectedCourse]) -> float:
    return sum(max(0, gap) for gap in _daily_gaps(schedule))


def count_long_breaks(schedule: Sequence[SelectedCourse]) -> int:
    return sum(1 for gap in _daily_gaps(schedule) if gap >= LONG_BREAK_MINUTES)


def daily_start_times(schedule: Sequence[SelectedCourse]) -> list[float]:
    """Earliest start (minutes) of each day that has classes."""
    return [
        min(time_to_minutes(s.start_time) for s in slots)
        for slots in group_by_day(schedule).values()
    ]


def daily_end_times(schedule: Sequence[SelectedCourse]) -> list[float]:
    """Latest end (minutes) of each day that has classes."""
    return [
        max(time_to_minutes(s.end_time) for s in slots)
        for slots in group_by_day(schedule).values()
    ]


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0


def average_start_time(schedule: Sequence[SelectedCourse]) -> float:
    return _mean(daily_start_times(schedule))


def average_end_time(schedule: Sequence[SelectedCourse]) -> float:
    return _mean(daily_end_times(schedule))


def start_time_variance(schedule: Sequence[SelectedCourse]) -> float:
    """Population variance of the daily first start times."""
    starts = daily_start_times(schedule)
    if not starts:
        return 0
    mean = _mean(starts)
    return sum((start - mean) ** 2 for start in starts) / len(starts)


def unique_days(schedule: Sequence[SelectedCourse]) -> set[DayOfWeek]:
    return {
        slot.day
        for selected in schedule
        for slot in selected.selected_section.time_slots
    }


def count_free_days(schedule: Sequence[SelectedCourse]) -> int:
    """Five weekdays minus every distinct day used, weekend days included."""
    return len(WEEKDAYS) - len(unique_days(schedule))


def _score_short_breaks(schedule: Sequence[SelectedCourse]) -> float:
    return max(0, SHORT_BREAKS_CEILING - total_gap_minutes(schedule))


def _score_long_breaks(schedule: Sequence[SelectedCourse]) -> float:
    return count_long_breaks(schedule) * LONG_BREAK_POINTS


def _score_consistent_start(schedule: Sequence[SelectedCourse]) -> float:
    return max(0, CONSISTENT_START_CEILING - start_time_variance(schedule))


def _score_start_late(schedule: Sequence[SelectedCourse]) -> float:
    return average_start_time(schedule)


def _score_end_early(schedule: Sequence[SelectedCourse]) -> float:
    return max(0, END_EARLY_CEILING - average_end_time(schedule))


def _score_days_off(schedule: Sequence[SelectedCourse]) -> float:
    return count_free_days(schedule) * FREE_DAY_POINTS


SCORERS: dict[Preference, Callable[[Sequence[SelectedCourse]], float]] = {
    Preference.SHORT_BREAKS: _score_short_breaks,
    Preference.LONG_BREAKS: _score_long_breaks,
    Preference.CONSISTENT_START: _score_consistent_start,
    Preference.START_LATE: _score_start_late,
    Preference.END_EARLY: _score_end_early,
    Preference.DAYS_OFF: _score_days_off,
}


def resolve_preference(preference: Preference | str | None) -> Preference | None:
    """Map a preference name to :class:`Preference`, or None if unknown/unset."""
    if preference is None:
        return None
    try:
        return Preference(preference)
    except ValueError:
        log.warning("unknown_preference", preference=preference)
        return None


def calculate_score(
    schedule: Sequence[SelectedCourse],
    preference: Preference | str | None,
) -> float:
    """Score a schedule under a preference; higher is better.

    ``None`` and unrecognized preferences score 0.
    """
    resolved = resolve_preference(preference)
    if resolved is None:
        return 0
    return SCORERS[resolved](schedule)


def calculate_metadata(schedule: Sequence[SelectedCourse]) -> ScheduleMetadata:
    """Aggregates reported with every schedule, whatever the preference."""
    return ScheduleMetadata(
        total_gap_minutes=total_gap_minutes(schedule),
        days_used=len(unique_days(schedule)),
        avg_start_time=average_start_time(schedule),
        avg_end_time=average_end_time(schedule),
        free_days=count_free_days(schedule),
        long_break_count=count_long_breaks(schedule),
    )
