"""Data fetch error for the ASI dashboard."""

from __future__ import annotations


class WeatherDataError(Exception):
    """Weather data could not be produced. UI catches only this."""
