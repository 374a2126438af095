"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

import math
import statistics

from pydantic import TypeAdapter, ValidationError

from asi.models.activity import ActivityProfile
from asi.models.weather import WeatherSample
from asi.scoring import composite_score

from ..data.errors import WeatherDataError
from ..data.types import DailyScore, LocationData, WeatherSampleData
from ..formatters import format_coordinates

_SERIES_ADAPTER = TypeAdapter(list[WeatherSample])


def to_weather_samples(samples: list[WeatherSampleData]) -> list[WeatherSample]:
    """Validate repository dicts into WeatherSample models."""
    try:
        return _SERIES_ADAPTER.validate_python(samples)
    except ValidationError as exc:
        raise WeatherDataError(f"Malformed weather series: {exc}") from exc


def compute_recent_averages(
    samples: list[WeatherSampleData],
    variables: tuple[str, ...],
    window: int = 7,
) -> dict[str, float | None]:
    """Mean of each variable over the last *window* samples (None when empty)."""
    recent = samples[-window:] if window > 0 else []
    return {
        var: statistics.mean(s[var] for s in recent) if recent else None
        for var in variables
    }


def compute_variable_stats(
    samples: list[WeatherSampleData],
    variable: str,
) -> dict[str, float | None]:
    """Return avg/max/min of one variable across the series."""
    values = [s[variable] for s in samples if s.get(variable) is not None]
    if not values:
        return {"avg": None, "max": None, "min": None}
    return {"avg": statistics.mean(values), "max": max(values), "min": min(values)}


def compute_daily_scores(
    series: list[WeatherSample],
    profile: ActivityProfile,
) -> list[DailyScore]:
    """Unrounded composite score of each day, in series order."""
    return [
        {"timestamp": s.timestamp.isoformat(), "score": composite_score(s, profile)}
        for s in series
    ]


def filter_locations(locations: list[LocationData], term: str) -> list[LocationData]:
    """Case-insensitive substring match on location names."""
    needle = term.strip().lower()
    if not needle:
        return list(locations)
    return [loc for loc in locations if needle in loc["name"].lower()]


def parse_coordinates(lat_text: str, lng_text: str) -> LocationData | None:
    """Parse user-typed coordinates, or None if either is invalid or out of range."""
    try:
        lat = float(lat_text)
        lng = float(lng_text)
    except (TypeError, ValueError):
        return None
    if math.isnan(lat) or math.isnan(lng):
        return None
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        return None
    return {"lat": lat, "lng": lng, "name": format_coordinates(lat, lng)}
