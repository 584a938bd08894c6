"""Pydantic models for course catalog input and generated schedules.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Field names are snake_case in Python and camelCase on the wire
(e.g. ``course_code`` <-> ``courseCode``), so catalog JSON validates directly.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class _CatalogModel(BaseModel):
    """Immutable base for everything read from (or returned to) the caller."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


WEEKDAYS: tuple[DayOfWeek, ...] = (
    DayOfWeek.MONDAY,
    DayOfWeek.TUESDAY,
    DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY,
    DayOfWeek.FRIDAY,
)


class SectionType(str, Enum):
    LECTURE = "Lecture"
    TUTORIAL = "Tutorial"
    LAB = "Lab"
    SEMINAR = "Seminar"


class TimeSlot(_CatalogModel):
    """One recurring weekly meeting window."""

    day: DayOfWeek
    start_time: str  # "HH:MM", not format-checked
    end_time: str  # "HH:MM", not format-checked
    location: str | None = None  # e.g. "LSB LT1"


class SpecificLecture(_CatalogModel):
    """Dependent section tied to one lecture by its section id."""

    kind: Literal["specific"] = "specific"
    lecture_id: str

    def matches(self, lecture_id: str) -> bool:
        return self.lecture_id == lecture_id


class AnyLecture(_CatalogModel):
    """Dependent section with no recorded parent: pairs with every lecture."""

    kind: Literal["any"] = "any"

    def matches(self, lecture_id: str) -> bool:
        return True


ParentLecture = Annotated[
    Union[SpecificLecture, AnyLecture], Field(discriminator="kind")
]


class Section(_CatalogModel):
    """One offering of a course (a lecture, tutorial, lab or seminar).

    ``parent_lecture`` accepts the catalog's plain string (or null/absent) and
    stores it as an explicit :class:`SpecificLecture` / :class:`AnyLecture`.
    It serializes back to the plain string form.
    """

    section_id: str
    section_type: SectionType
    time_slots: list[TimeSlot] = Field(default_factory=list)
    parent_lecture: ParentLecture = Field(default_factory=AnyLecture)
    instructor: str | None = None
    quota: int | None = None
    enrolled: int | None = None
    seats_remaining: int | None = None

    @field_validator("parent_lecture", mode="before")
    @classmethod
    def _coerce_parent_lecture(cls, value: Any) -> Any:
        if value is None or value == "":
            return AnyLecture()
        if isinstance(value, str):
            return SpecificLecture(lecture_id=value)
        return value

    @field_serializer("parent_lecture")
    def _serialize_parent_lecture(self, value: SpecificLecture | AnyLecture) -> str | None:
        if isinstance(value, SpecificLecture):
            return value.lecture_id
        return None

    @property
    def is_lecture(self) -> bool:
        return self.section_type == SectionType.LECTURE


class Course(_CatalogModel):
    """A course and all of its sections for one term."""

    course_code: str  # e.g. "CSCI3100"
    course_name: str = ""
    department: str = ""
    credits: float | None = None
    term: str | None = None  # e.g. "2025-26-T1"
    career: str | None = None  # e.g. "Undergraduate"
    description: str | None = None
    sections: list[Section] = Field(default_factory=list)


class SelectedCourse(_CatalogModel):
    """One chosen section of one course."""

    course: Course
    selected_section: Section
    color: str | None = None  # display color owned by the caller


class ScheduleMetadata(_CatalogModel):
    """Raw aggregates for a schedule, computed for every preference."""

    total_gap_minutes: float = 0
    days_used: int = 0
    avg_start_time: float = 0  # minutes since midnight
    avg_end_time: float = 0  # minutes since midnight
    free_days: int = 0
    long_break_count: int = 0


class GeneratedSchedule(_CatalogModel):
    sections: list[SelectedCourse]
    score: float
    metadata: ScheduleMetadata


class ConflictingSlotPair(_CatalogModel):
    slot1: TimeSlot
    slot2: TimeSlot


class Conflict(_CatalogModel):
    """Two selections from different courses whose time slots collide."""

    course1: SelectedCourse
    course2: SelectedCourse
    conflicting_time_slots: list[ConflictingSlotPair]


class Preference(str, Enum):
    """Scoring heuristics a student can rank schedules by."""

    SHORT_BREAKS = "shortBreaks"
    LONG_BREAKS = "longBreaks"
    CONSISTENT_START = "consistentStart"
    START_LATE = "startLate"
    END_EARLY = "endEarly"
    DAYS_OFF = "daysOff"


class ScheduleGenerationOptions(_CatalogModel):
    """Options for :func:`src.planner.generator.generate_schedules`.

    ``preference`` also accepts arbitrary strings so that unrecognized values
    degrade to an unranked result instead of failing validation.
    """

    preference: Preference | str | None = None
    max_results: int | None = Field(default=None, ge=1)
