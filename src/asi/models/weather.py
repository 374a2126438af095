"""Weather sample model."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class WeatherSample(BaseModel):
    """One simulated day of surface weather."""

    model_config = ConfigDict(frozen=True)

    temperature: float  # °C
    humidity: float = Field(ge=0, le=100)  # %
    wind_speed: float = Field(ge=0)  # km/h
    precipitation: float = Field(ge=0)  # mm
    timestamp: date
