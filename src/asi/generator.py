"""Synthetic daily weather series for a coordinate.

Stands in for an archive of historical observations: the values follow a
crude climate shape (latitude, season, distance from the prime meridian)
with uniform noise on top. All randomness comes from the injected ``rng``.
"""

from __future__ import annotations

import math
import random
from datetime import date, timedelta
from typing import Protocol

from asi.models.weather import WeatherSample

DEFAULT_DAYS = 30

TEMPERATURE_BOUNDS = (-30.0, 50.0)
HUMIDITY_BOUNDS = (10.0, 100.0)
WIND_SPEED_BOUNDS = (0.0, 80.0)
PRECIPITATION_BOUNDS = (0.0, 100.0)


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1); ``random.Random`` qualifies."""

    def random(self) -> float: ...


def _clamp(low: float, high: float, value: float) -> float:
    return max(low, min(high, value))


def _sample_day(lat: float, lng: float, day: date, rng: RandomSource) -> WeatherSample:
    lat_factor = abs(lat) / 90  # 0 at the equator, 1 at the poles
    season_factor = math.sin((day.month - 1) * math.pi / 6)

    temperature = (30 - lat_factor * 40) + season_factor * 10 + (rng.random() - 0.5) * 15

    coastal_factor = math.sin(lng * math.pi / 180) * 0.3
    humidity = 50 + coastal_factor * 30 + rng.random() * 40

    wind_speed = 5 + lat_factor * 15 + rng.random() * 20

    rain_chance = max(0.0, 0.3 - lat_factor * 0.2)
    precipitation = rng.random() * 20 if rng.random() < rain_chance else 0.0

    return WeatherSample(
        temperature=_clamp(*TEMPERATURE_BOUNDS, temperature),
        humidity=_clamp(*HUMIDITY_BOUNDS, humidity),
        wind_speed=_clamp(*WIND_SPEED_BOUNDS, wind_speed),
        precipitation=_clamp(*PRECIPITATION_BOUNDS, precipitation),
        timestamp=day,
    )


def generate_series(
    lat: float,
    lng: float,
    days: int = DEFAULT_DAYS,
    rng: RandomSource | None = None,
    *,
    today: date | None = None,
) -> list[WeatherSample]:
    """Generate ``days`` daily samples ending at ``today``, oldest first.

    Args:
        lat: Latitude in [-90, 90]. Not validated.
        lng: Longitude in [-180, 180]. Not validated.
        days: Number of samples. Values below 1 give an empty series.
        rng: Random source; a seeded ``random.Random`` makes the output reproducible.
        today: Date of the most recent sample (defaults to ``date.today()``).

    Returns:
        Chronologically ordered list of WeatherSample.
    """
    if rng is None:
        rng = random.Random()
    if today is None:
        today = date.today()

    # Drawn newest-first so a given seed always maps to the same dates.
    samples = [
        _sample_day(lat, lng, today - timedelta(days=offset), rng)
        for offset in range(days)
    ]
    samples.reverse()
    return samples
