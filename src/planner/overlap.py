"""Time arithmetic and the same-day interval overlap predicate.

Times are "H:MM" / "HH:MM" strings converted to minutes since midnight.
Malformed strings convert to NaN rather than raising: every comparison
against NaN is false, so a malformed slot never overlaps anything.
"""

import math
import re

from src.planner.models import TimeSlot

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})")


def _match_time(time: str) -> re.Match | None:
    return _TIME_RE.fullmatch(time.strip()) if isinstance(time, str) else None


def is_well_formed_time(time: str) -> bool:
    """Whether ``time`` is an H:MM / HH:MM string."""
    return _match_time(time) is not None


def time_to_minutes(time: str) -> float:
    """Convert an "HH:MM" string to minutes since midnight.

    Returns:
        ``hours * 60 + minutes``, or ``nan`` if the string is not H:MM / HH:MM.
    """
    match = _match_time(time)
    if match is None:
        return math.nan
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to a zero-padded "HH:MM" string."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def slot_duration(slot: TimeSlot) -> float:
    """Length of a time slot in minutes."""
    return time_to_minutes(slot.end_time) - time_to_minutes(slot.start_time)


def slots_overlap(slot1: TimeSlot, slot2: TimeSlot) -> bool:
    """Check whether two time slots intersect.

    Intervals are half-open, so a class ending at 10:00 does not clash with
    one starting at 10:00. Slots on different days never overlap.
    """
    if slot1.day != slot2.day:
        return False

    start1 = time_to_minutes(slot1.start_time)
    end1 = time_to_minutes(slot1.end_time)
    start2 = time_to_minutes(slot2.start_time)
    end2 = time_to_minutes(slot2.end_time)

    return start1 < end2 and start2 < end1
