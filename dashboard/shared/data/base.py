"""Abstract base repository for weather data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from asi.models.activity import ActivityProfile

from .types import LocationData, WeatherSampleData


class WeatherRepository(ABC):
    """Source-agnostic interface for weather series and activity configuration."""

    @abstractmethod
    def get_series(
        self, lat: float, lng: float, days: int, seed: int,
    ) -> list[WeatherSampleData]: ...

    @abstractmethod
    def get_activities(self) -> list[ActivityProfile]: ...

    @abstractmethod
    def get_locations(self) -> list[LocationData]: ...
