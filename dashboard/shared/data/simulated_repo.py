"""Simulated weather archive backed by the synthetic series generator."""

from __future__ import annotations

import random
import time

import streamlit as st

from asi.generator import generate_series
from asi.models.activity import ActivityProfile
from asi.profiles import ACTIVITY_PROFILES

from .base import WeatherRepository
from .errors import WeatherDataError
from ..api_logging import log_api_call
from ..constants import PREDEFINED_LOCATIONS, SIMULATED_FETCH_DELAY
from .types import LocationData, WeatherSampleData

# ── Cached fetch helpers ─────────────────────────────────────────────────────


@st.cache_data(ttl=600)
def _fetch_series(
    lat: float, lng: float, days: int, seed: int, delay: float,
) -> list[WeatherSampleData]:
    if delay > 0:
        time.sleep(delay)
    try:
        series = generate_series(lat, lng, days, rng=random.Random(seed))
        return [sample.model_dump(mode="json") for sample in series]  # type: ignore[misc]
    except Exception as exc:
        raise WeatherDataError(
            f"Failed to generate {days}-day series for ({lat}, {lng}): {exc}",
        ) from exc


# ── Repository class ─────────────────────────────────────────────────────────


class SimulatedWeatherRepository(WeatherRepository):
    """Weather repository that simulates a historical archive.

    Each (location, day count, seed) triple always yields the same series;
    a new seed regenerates it.
    """

    def __init__(
        self,
        delay: float = SIMULATED_FETCH_DELAY,
        profiles: tuple[ActivityProfile, ...] = ACTIVITY_PROFILES,
        locations: list[LocationData] | None = None,
    ) -> None:
        self._delay = delay
        self._profiles = profiles
        self._locations = list(PREDEFINED_LOCATIONS if locations is None else locations)

    @log_api_call
    def get_series(
        self, lat: float, lng: float, days: int, seed: int,
    ) -> list[WeatherSampleData]:
        if days < 1:
            raise WeatherDataError(f"Day count must be positive, got {days}")
        return _fetch_series(float(lat), float(lng), int(days), int(seed), self._delay)

    @log_api_call
    def get_activities(self) -> list[ActivityProfile]:
        return list(self._profiles)

    @log_api_call
    def get_locations(self) -> list[LocationData]:
        return [dict(loc) for loc in self._locations]  # type: ignore[misc]
