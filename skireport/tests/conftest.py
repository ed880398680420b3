"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from skireport.config.defaults import DEFAULT_RESORTS
from skireport.config.schema import SkillConfig, StorageConfig
from skireport.models.forecast import ForecastPeriod

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _make_period(
    name: str, is_daytime: bool, temperature: int, short: str = "Snow"
) -> ForecastPeriod:
    return ForecastPeriod(
        name=name,
        temperature=temperature,
        is_daytime=is_daytime,
        short_forecast=short,
        detailed_forecast=f"{short}. Temperature near {temperature}.",
    )


@pytest.fixture
def make_period():
    """Factory for ForecastPeriod test values."""
    return _make_period


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def night_first_forecast() -> dict:
    """Forecast issued in the evening: opens on Tonight, ends on a lone day."""
    with open(FIXTURE_DIR / "weather_gov_forecast_night_first.json") as f:
        return json.load(f)


@pytest.fixture
def day_first_forecast() -> dict:
    """Forecast issued in the morning: opens on Today, strictly paired."""
    with open(FIXTURE_DIR / "weather_gov_forecast_day_first.json") as f:
        return json.load(f)


@pytest.fixture
def default_config(tmp_path: Path) -> SkillConfig:
    """Default config with the built-in resorts and a temporary database."""
    return SkillConfig(
        resorts=DEFAULT_RESORTS,
        storage=StorageConfig(db_path=str(tmp_path / "skireport.db")),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "weather_api": {"timeout": 3.0},
        "storage": {"db_path": str(tmp_path / "skireport.db")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
