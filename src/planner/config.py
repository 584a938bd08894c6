"""Planner configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PlannerConfig(BaseSettings):
    """Planner configuration loaded from environment variables.

    Settings are read from ``PLANNER_*`` environment variables with sensible
    defaults. For local development, create a .env file in the project root.
    """

    # Ranking
    default_max_results: int = Field(
        default=100,
        ge=1,
        description="Number of ranked schedules returned when max_results is unset",
    )

    # Enumeration guard
    max_candidates: int | None = Field(
        default=None,
        ge=1,
        description=(
            "Abort with CombinationLimitError once more than this many candidate "
            "schedules are enumerated (None = unbounded)"
        ),
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "PLANNER_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_config: PlannerConfig | None = None


def get_config() -> PlannerConfig:
    """Get the shared planner configuration.

    Entry points accept an explicit ``config=`` argument; this instance is
    only used when none is passed.

    Returns:
        PlannerConfig: Planner configuration instance
    """
    global _config
    if _config is None:
        _config = PlannerConfig()
    return _config


def reset_config() -> None:
    """Drop the shared configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
