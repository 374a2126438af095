"""Activity profile models: optimal ranges and scoring weights."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OptimalRange(BaseModel):
    """Closed interval [min, max] of ideal values for one weather variable."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def _check_order(self) -> OptimalRange:
        if self.min > self.max:
            raise ValueError(f"range min ({self.min}) is greater than max ({self.max})")
        return self

    @property
    def is_degenerate(self) -> bool:
        """True when the range collapses to a single value."""
        return self.min == self.max

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class ScoringWeights(BaseModel):
    """Relative weight of each variable in the per-sample composite score."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.3, ge=0)
    humidity: float = Field(default=0.2, ge=0)
    wind_speed: float = Field(default=0.2, ge=0)
    precipitation: float = Field(default=0.3, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> ScoringWeights:
        total = self.temperature + self.humidity + self.wind_speed + self.precipitation
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0, got {total:.6f}")
        return self


class ActivityProfile(BaseModel):
    """Optimal conditions for one outdoor activity."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    temperature: OptimalRange  # °C
    humidity: OptimalRange  # %
    wind_speed: OptimalRange  # km/h
    precipitation: OptimalRange  # mm
    weights: ScoringWeights = ScoringWeights()
