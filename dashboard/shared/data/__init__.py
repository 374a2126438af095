"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from .base import WeatherRepository
from .errors import WeatherDataError
from .types import DailyScore, LocationData, WeatherSampleData


def get_repository() -> WeatherRepository:
    """Return the weather repository used by the dashboard pages."""
    from .simulated_repo import SimulatedWeatherRepository

    return SimulatedWeatherRepository()


__all__ = [
    "DailyScore",
    "LocationData",
    "WeatherDataError",
    "WeatherRepository",
    "WeatherSampleData",
    "get_repository",
]
