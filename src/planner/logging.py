"""Structured logging for the planner, built on structlog.

Log events are snake_case names with keyword context, for example
``log.info("schedules_generated", candidates=12, valid=3)``. Output is
JSON in production and the console renderer in development. It always goes
to stderr, so scripts can keep stdout for their JSON results.
"""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from src.planner.config import PlannerConfig


def setup_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    *,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and route stdlib logging through the same stream.

    Args:
        json_output: Render JSON lines instead of the coloured console format.
        log_level: Minimum level name; unknown names fall back to INFO.
        stream: Destination for log lines (stderr when omitted).
    """
    stream = stream or sys.stderr
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(stream)]
    root.setLevel(numeric_level)


def setup_logging_from_config(config: "PlannerConfig") -> None:
    """Apply the ``log_json`` / ``log_level`` settings of a planner config."""
    setup_logging(json_output=config.log_json, log_level=config.log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger bound to a module name (pass ``__name__``)."""
    return structlog.get_logger(name)
