"""Data contracts for the ASI dashboard data layer."""

from __future__ import annotations

from typing import TypedDict


class LocationData(TypedDict):
    lat: float
    lng: float
    name: str


class WeatherSampleData(TypedDict):
    temperature: float  # °C
    humidity: float  # %
    wind_speed: float  # km/h
    precipitation: float  # mm
    timestamp: str  # ISO 8601 date


class DailyScore(TypedDict):
    timestamp: str  # ISO 8601 date
    score: float  # unrounded composite, 0-100
