import pytest

from src.planner.models import Course, SelectedCourse
from src.planner.selection import (
    calculate_total_credits,
    count_unique_courses,
    get_active_lecture_id,
    get_schedule_days,
    has_available_seats,
    pick_tutorial_for_lecture_swap,
    remove_dependent_sections_for_lecture,
    remove_lecture_and_dependents,
)


@pytest.fixture
def base_course(slot, section, course):
    return course(
        "TEST1000",
        section(
            "A",
            "Lecture",
            [slot("Monday", "09:00", "10:15"), slot("Wednesday", "09:00", "10:15")],
            quota=120,
            enrolled=60,
            seats_remaining=60,
        ),
        section(
            "B",
            "Lecture",
            [slot("Tuesday", "14:00", "15:15"), slot("Thursday", "14:00", "15:15")],
        ),
        section("TA1", "Tutorial", [slot("Friday", "11:00", "12:00")], parent="A"),
        section("TB1", "Tutorial", [slot("Thursday", "16:00", "17:00")], parent="B"),
        section("T-ORPHAN", "Tutorial", [slot("Monday", "12:00", "13:00")]),
        course_name="Testing Basics",
        credits=3,
        term="2025-26-T1",
    )


@pytest.fixture
def other_course(slot, section, course):
    return course(
        "OTHER2000",
        section("X", "Lecture", [slot("Monday", "15:00", "16:15")]),
        credits=2,
    )


@pytest.fixture
def pattern_course(slot, section, course):
    return course(
        "UGFH1000",
        section("A", "Lecture", [slot("Monday", "09:00", "10:15")]),
        section("B", "Lecture", [slot("Tuesday", "14:00", "15:15")]),
        section("AT03", "Tutorial", [slot("Friday", "12:00", "13:00")]),
        section("BT03", "Tutorial", [slot("Friday", "13:00", "14:00")]),
        section("BT01", "Tutorial", [slot("Friday", "14:00", "15:00")]),
        term="2025-26-Summer",
    )


def _own_ids(selections, course: Course):
    return [
        s.selected_section.section_id
        for s in selections
        if s.course.course_code == course.course_code
    ]


def test_active_lecture_is_the_selected_lecture(base_course, select):
    assert get_active_lecture_id([select(base_course, "A")], base_course) == "A"


def test_active_lecture_inferred_from_tutorial(base_course, select):
    assert get_active_lecture_id([select(base_course, "TA1")], base_course) == "A"


def test_active_lecture_none_for_unparented_tutorial(base_course, select):
    assert get_active_lecture_id([select(base_course, "T-ORPHAN")], base_course) is None


def test_active_lecture_none_when_parent_missing(base_course, section):
    stray = SelectedCourse(
        course=base_course,
        selected_section=section("TZ", "Tutorial", parent="Z"),
    )

    assert get_active_lecture_id([stray], base_course) is None


def test_switching_lectures_prunes_other_dependents(base_course, other_course, select):
    selections = [
        select(base_course, "A"),
        select(base_course, "TA1"),
        select(base_course, "B"),
        select(base_course, "TB1"),
        select(other_course, "X"),
    ]

    result = remove_dependent_sections_for_lecture(selections, "TEST1000", "B")

    assert _own_ids(result, base_course) == ["B", "TB1"]
    assert _own_ids(result, other_course) == ["X"]


def test_removing_lecture_drops_its_dependents_and_orphans(base_course, other_course, select):
    selections = [
        select(base_course, "A"),
        select(base_course, "TA1"),
        select(base_course, "T-ORPHAN"),
        select(base_course, "B"),
        select(other_course, "X"),
    ]

    result = remove_lecture_and_dependents(selections, "TEST1000", "A")

    assert _own_ids(result, base_course) == ["B"]
    assert _own_ids(result, other_course) == ["X"]


def test_swap_maps_tutorial_by_section_pattern(pattern_course):
    picked = pick_tutorial_for_lecture_swap(pattern_course, "A", "B", "AT03")

    assert picked.section_id == "BT03"


def test_swap_falls_back_to_first_sorted_tutorial(pattern_course):
    picked = pick_tutorial_for_lecture_swap(pattern_course, "A", "B", "AT09")

    assert picked.section_id == "BT01"


def test_swap_uses_explicit_parent_links(base_course):
    picked = pick_tutorial_for_lecture_swap(base_course, "A", "B", "TA1")

    assert picked.section_id == "TB1"


def test_swap_returns_none_without_candidates(other_course):
    assert pick_tutorial_for_lecture_swap(other_course, "X", "Y", "XT01") is None


def test_schedule_days_in_week_order(base_course, other_course, select):
    days = get_schedule_days([select(base_course, "TA1"), select(base_course, "A"), select(other_course, "X")])

    assert [d.value for d in days] == ["Monday", "Wednesday", "Friday"]


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"seats_remaining": 0, "quota": 10, "enrolled": 5}, False),
        ({"seats_remaining": 3}, True),
        ({"quota": 30, "enrolled": 30}, False),
        ({"quota": 30, "enrolled": 29}, True),
        ({}, True),
    ],
)
def test_has_available_seats(section, fields, expected):
    assert has_available_seats(section("L1", "Lecture", **fields)) is expected


def test_credits_count_each_course_once(base_course, other_course, select):
    selections = [select(base_course, "A"), select(base_course, "TA1"), select(other_course, "X")]

    assert calculate_total_credits(selections) == 5
    assert count_unique_courses(selections) == 2


def test_missing_credits_count_as_zero(course, section, select):
    uncredited = course("NOCR1000", section("L1", "Lecture"))

    assert calculate_total_credits([select(uncredited, "L1")]) == 0


def test_unique_courses_ignore_extra_sections_of_same_course(base_course, other_course, select):
    selections = [select(base_course, "A"), select(base_course, "TA1"), select(base_course, "T-ORPHAN")]

    assert count_unique_courses(selections) == 1
    assert count_unique_courses(selections + [select(other_course, "X")]) == 2
    assert count_unique_courses([]) == 0
