"""Conflict-free weekly timetable planner.

Enumerates lecture/tutorial/lab section combinations for a set of courses,
drops combinations with time clashes, and ranks the rest by a student's
scheduling preference.
"""

from src.planner.conflicts import detect_conflicts, detect_new_course_conflicts
from src.planner.errors import CombinationLimitError, PlannerError
from src.planner.generator import generate_schedules
from src.planner.models import (
    Course,
    GeneratedSchedule,
    Preference,
    ScheduleGenerationOptions,
    Section,
    SectionType,
    SelectedCourse,
    TimeSlot,
)
from src.planner.overlap import slots_overlap

__all__ = [
    "generate_schedules",
    "slots_overlap",
    "detect_conflicts",
    "detect_new_course_conflicts",
    "Course",
    "Section",
    "SectionType",
    "SelectedCourse",
    "TimeSlot",
    "GeneratedSchedule",
    "Preference",
    "ScheduleGenerationOptions",
    "PlannerError",
    "CombinationLimitError",
]
