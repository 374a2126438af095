"""Shared test fixtures and sample payloads."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from asi.models.activity import ActivityProfile
from asi.models.weather import WeatherSample

TODAY = date(2024, 6, 15)


SAMPLE_WEATHER = {
    "temperature": 21.4,
    "humidity": 55.0,
    "wind_speed": 9.5,
    "precipitation": 0.0,
    "timestamp": "2024-06-15",
}

SAMPLE_PROFILE = {
    "id": "hiking",
    "name": "Hiking",
    "description": "Mountain hikes and trails",
    "temperature": {"min": 15, "max": 28},
    "humidity": {"min": 40, "max": 70},
    "wind_speed": {"min": 0, "max": 15},
    "precipitation": {"min": 0, "max": 2},
}


def _make_sample(
    temperature: float = 20.0,
    humidity: float = 55.0,
    wind_speed: float = 10.0,
    precipitation: float = 0.0,
    timestamp: date = TODAY,
) -> WeatherSample:
    return WeatherSample(
        temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
        precipitation=precipitation,
        timestamp=timestamp,
    )


def _make_series(samples: list[dict], end: date = TODAY) -> list[WeatherSample]:
    """Build a chronological series from field overrides, ending at *end*."""
    start = end - timedelta(days=len(samples) - 1)
    return [
        _make_sample(timestamp=start + timedelta(days=i), **fields)
        for i, fields in enumerate(samples)
    ]


# Hiking-profile samples with known composites: ideal scores 100, poor scores 40
# (temperature and precipitation far outside their ranges, the rest ideal).
IDEAL_DAY = {"temperature": 20.0, "humidity": 55.0, "wind_speed": 10.0, "precipitation": 0.0}
POOR_DAY = {"temperature": -20.0, "humidity": 55.0, "wind_speed": 10.0, "precipitation": 60.0}


@pytest.fixture
def hiking() -> ActivityProfile:
    return ActivityProfile.model_validate(SAMPLE_PROFILE)


@pytest.fixture
def make_sample():
    """Factory fixture for creating WeatherSample models."""
    return _make_sample


@pytest.fixture
def make_series():
    """Factory fixture for creating chronological series."""
    return _make_series


@pytest.fixture
def improving_series() -> list[WeatherSample]:
    """30 days: 23 poor days followed by 7 ideal days."""
    return _make_series([POOR_DAY] * 23 + [IDEAL_DAY] * 7)


@pytest.fixture
def worsening_series() -> list[WeatherSample]:
    """30 days: 23 ideal days followed by 7 poor days."""
    return _make_series([IDEAL_DAY] * 23 + [POOR_DAY] * 7)
