"""Scoring result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SuitabilityLevel(str, Enum):
    """Qualitative band of an ASI score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


class TrendDirection(str, Enum):
    """Direction of the ASI relative to the baseline window."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class VariableScores(BaseModel):
    """Per-variable sub-scores (0-100)."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(ge=0, le=100)
    humidity: float = Field(ge=0, le=100)
    wind_speed: float = Field(ge=0, le=100)
    precipitation: float = Field(ge=0, le=100)


class SuitabilityScore(BaseModel):
    """Aggregate score of a series with its level."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: SuitabilityLevel


class SuitabilityResult(BaseModel):
    """Full evaluation of a series for one activity."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: SuitabilityLevel
    trend: TrendDirection
    previous_score: int | None = Field(default=None, ge=0, le=100)  # None without a baseline
    sub_scores: VariableScores
