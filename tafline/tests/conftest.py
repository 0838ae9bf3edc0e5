"""Shared test fixtures."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from tafline.config.schema import EngineConfig
from tafline.models.amendment import AmendmentType, ForecastAmendment, Wind
from tafline.models.timeline import TimelineWindow

DAY = datetime(2026, 3, 14, 0, 0, tzinfo=UTC)


def _at(hour: float) -> datetime:
    """Instant ``hour`` hours after 00:00Z on the test day."""
    return DAY + timedelta(hours=hour)


def _amendment(
    start: float,
    end: float,
    amendment_type: AmendmentType = AmendmentType.BASE,
    **kwargs,
) -> ForecastAmendment:
    return ForecastAmendment(
        valid_from=_at(start), valid_to=_at(end), type=amendment_type, **kwargs
    )


@pytest.fixture
def window() -> TimelineWindow:
    return TimelineWindow(valid_from=_at(0), valid_to=_at(18))


@pytest.fixture
def example_amendments() -> list[ForecastAmendment]:
    """Base, a BECMG at 06Z, the post-BECMG base, and a TEMPO 10-12Z."""
    return [
        _amendment(0, 18, wind=Wind(direction=280, speed=10)),
        _amendment(6, 7, AmendmentType.BECOMING),
        _amendment(6, 18, wind=Wind(direction=310, speed=18)),
        _amendment(10, 12, AmendmentType.TEMPORARY, wind=Wind(direction=340, speed=30)),
    ]


@pytest.fixture
def default_config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "timeline": {"min_segment_width_pct": 1.5},
        "live": {"clamp_to_window": False},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def kjfk_taf(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "taf_kjfk.json") as f:
        return json.load(f)
