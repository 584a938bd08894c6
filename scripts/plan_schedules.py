"""Rank conflict-free timetables for a set of courses from a JSON catalog.

Standalone CLI script. Loads a course catalog (a JSON list of courses in the
camelCase catalog shape), picks the requested courses, runs the schedule
generator and prints the ranked schedules as JSON or a human-readable table.

Run with: python scripts/plan_schedules.py data/courses.json --course CSCI3100 --course MATH1510
Ranked:   python scripts/plan_schedules.py data/courses.json -c CSCI3100 -c MATH1510 --preference daysOff
Table:    python scripts/plan_schedules.py data/courses.json -c CSCI3100 --table --max-results 5

Valid preferences: shortBreaks, longBreaks, consistentStart, startLate,
                   endEarly, daysOff

Exit codes:
  0 = success (JSON or table on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import math
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import TypeAdapter

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.planner.config import PlannerConfig  # noqa: E402
from src.planner.errors import ScheduleInputError  # noqa: E402
from src.planner.generator import generate_schedules  # noqa: E402
from src.planner.logging import setup_logging_from_config  # noqa: E402
from src.planner.models import (  # noqa: E402
    Course,
    GeneratedSchedule,
    Preference,
    ScheduleGenerationOptions,
)
from src.planner.overlap import minutes_to_time  # noqa: E402

_CATALOG = TypeAdapter(list[Course])

_DAY_ORDER = {
    "Monday": 0,
    "Tuesday": 1,
    "Wednesday": 2,
    "Thursday": 3,
    "Friday": 4,
    "Saturday": 5,
    "Sunday": 6,
}


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Rank conflict-free timetables from a JSON course catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "catalog",
        type=str,
        help="Path to the course catalog JSON file.",
    )
    parser.add_argument(
        "-c",
        "--course",
        dest="courses",
        action="append",
        required=True,
        help="Course code to schedule (repeat for each course).",
    )
    parser.add_argument(
        "--preference",
        type=str,
        default=None,
        choices=[p.value for p in Preference],
        help="Ranking heuristic (default: unranked).",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of schedules to print (default: PLANNER_DEFAULT_MAX_RESULTS or 100).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table instead of JSON.",
    )
    return parser.parse_args(argv)


def load_catalog(path: str | Path) -> list[Course]:
    """Read and validate a catalog file.

    Raises:
        pydantic.ValidationError: If the file does not have the catalog shape.
    """
    text = Path(path).read_text(encoding="utf-8")
    return _CATALOG.validate_json(text)


def select_courses(catalog: list[Course], codes: list[str]) -> list[Course]:
    """Pick courses by code, in the order the codes were requested.

    Raises:
        ScheduleInputError: If any code is missing from the catalog.
    """
    by_code = {course.course_code.upper(): course for course in catalog}
    missing = [code for code in codes if code.upper() not in by_code]
    if missing:
        raise ScheduleInputError(f"Unknown course code(s): {', '.join(missing)}")
    return [by_code[code.upper()] for code in codes]


def _format_table(schedules: list[GeneratedSchedule]) -> str:
    """Render schedules as aligned text, one block per schedule."""
    blocks: list[str] = []
    for rank, schedule in enumerate(schedules, start=1):
        meta = schedule.metadata
        lines = [
            f"#{rank}  score={schedule.score:g}  days={meta.days_used}  "
            f"free={meta.free_days}  gaps={meta.total_gap_minutes:g}min",
        ]

        rows: list[tuple[str, str, str, str, str]] = []
        for selected in schedule.sections:
            section = selected.selected_section
            for slot in section.time_slots:
                rows.append(
                    (
                        slot.day.value,
                        f"{slot.start_time}-{slot.end_time}",
                        selected.course.course_code,
                        f"{section.section_type.value} {section.section_id}",
                        slot.location or "",
                    )
                )
        rows.sort(key=lambda r: (_DAY_ORDER.get(r[0], 99), r[1]))

        widths = [max((len(r[i]) for r in rows), default=0) for i in range(5)]
        for row in rows:
            lines.append(
                "  " + " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
            )
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def main(args: argparse.Namespace) -> None:
    config = PlannerConfig()
    setup_logging_from_config(config)

    catalog = load_catalog(args.catalog)
    courses = select_courses(catalog, args.courses)
    _log(f"plan_schedules: {len(courses)} course(s) from {len(catalog)} in catalog")

    options = ScheduleGenerationOptions(
        preference=args.preference,
        max_results=args.max_results,
    )
    schedules = generate_schedules(courses, options, config=config)

    if not schedules:
        _log("  No conflict-free schedule exists for these courses")

    if args.table:
        print(_format_table(schedules))
    else:
        output = [s.model_dump(mode="json", by_alias=True) for s in schedules]
        print(json.dumps(output, indent=2, ensure_ascii=False))

    if schedules:
        best = schedules[0].metadata
        summary = f"  {len(schedules)} schedule(s)"
        if not math.isnan(best.avg_start_time + best.avg_end_time):
            summary += (
                f"; best averages {minutes_to_time(best.avg_start_time)}"
                f"-{minutes_to_time(best.avg_end_time)}"
            )
        _log(summary)


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
