"""Error hierarchy for schedule planning.

The core never raises for correct-shaped input: malformed times, unknown
preferences and empty catalogs degrade to non-overlapping slots, zero scores
and empty results. These exceptions cover the cases where a caller has opted
into stricter behaviour.
"""


class PlannerError(Exception):
    """Base exception for all planner errors."""

    pass


class CombinationLimitError(PlannerError):
    """Candidate enumeration exceeded the configured ``max_candidates`` cap.

    Raised while enumerating, before validation and scoring, so a runaway
    catalog stops early instead of exhausting memory.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"More than {limit} candidate schedules; narrow the course selection")
        self.limit = limit


class ScheduleInputError(PlannerError):
    """Caller-supplied request cannot be resolved against the catalog.

    Examples: a requested course code that is not in the loaded catalog.
    """

    pass
