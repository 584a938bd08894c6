import sys

import pytest
import structlog

from src.planner.config import reset_config
from src.planner.models import Course, Section, SelectedCourse, TimeSlot


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    # Keep tests independent of the developer's environment and .env
    monkeypatch.delenv("PLANNER_DEFAULT_MAX_RESULTS", raising=False)
    monkeypatch.delenv("PLANNER_MAX_CANDIDATES", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def _restore_structlog():
    # cli.main configures structlog on pytest's captured stream; undo it
    yield
    structlog.reset_defaults()
    # Module-level loggers cache their first configuration; drop that cache
    for name, module in list(sys.modules.items()):
        if name.startswith("src.planner"):
            for value in vars(module).values():
                if isinstance(value, structlog._config.BoundLoggerLazyProxy):
                    value.__dict__.pop("bind", None)


@pytest.fixture
def slot():
    def _slot(day="Monday", start="09:00", end="10:00", location=None):
        return TimeSlot(day=day, start_time=start, end_time=end, location=location)

    return _slot


@pytest.fixture
def section():
    def _section(section_id, section_type="Lecture", slots=(), parent=None, **fields):
        return Section(
            section_id=section_id,
            section_type=section_type,
            time_slots=list(slots),
            parent_lecture=parent,
            **fields,
        )

    return _section


@pytest.fixture
def course():
    def _course(code, *sections, **fields):
        return Course(course_code=code, sections=list(sections), **fields)

    return _course


@pytest.fixture
def select():
    def _select(course, section_id):
        chosen = next(s for s in course.sections if s.section_id == section_id)
        return SelectedCourse(course=course, selected_section=chosen)

    return _select


@pytest.fixture
def course_a(slot, section, course):
    """Lecture Mon 09:00-10:15 with one tutorial Fri 11:00-12:00."""
    return course(
        "AAAA1000",
        section("A-LEC", "Lecture", [slot("Monday", "09:00", "10:15")]),
        section("A-TUT", "Tutorial", [slot("Friday", "11:00", "12:00")], parent="A-LEC"),
        credits=3,
    )


@pytest.fixture
def course_b(slot, section, course):
    """Single lecture Tue 14:00-15:15."""
    return course(
        "BBBB2000",
        section("B-LEC", "Lecture", [slot("Tuesday", "14:00", "15:15")]),
        credits=2,
    )


@pytest.fixture
def course_c(slot, section, course):
    """Single lecture Mon 09:30-10:30, clashing with course_a's lecture."""
    return course(
        "CCCC3000",
        section("C-LEC", "Lecture", [slot("Monday", "09:30", "10:30")]),
    )
