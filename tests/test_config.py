import pytest
from pydantic import ValidationError

from src.planner.config import PlannerConfig, get_config, reset_config


def test_defaults():
    config = PlannerConfig()

    assert config.default_max_results == 100
    assert config.max_candidates is None
    assert config.log_json is False
    assert config.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("PLANNER_DEFAULT_MAX_RESULTS", "25")
    monkeypatch.setenv("PLANNER_MAX_CANDIDATES", "5000")

    config = PlannerConfig()

    assert config.default_max_results == 25
    assert config.max_candidates == 5000


def test_rejects_non_positive_limits():
    with pytest.raises(ValidationError):
        PlannerConfig(default_max_results=0)


def test_get_config_is_shared_until_reset():
    first = get_config()

    assert get_config() is first
    reset_config()
    assert get_config() is not first
