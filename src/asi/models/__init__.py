"""ASI data models."""

from asi.models.activity import ActivityProfile, OptimalRange, ScoringWeights
from asi.models.result import (
    SuitabilityLevel,
    SuitabilityResult,
    SuitabilityScore,
    TrendDirection,
    VariableScores,
)
from asi.models.weather import WeatherSample

__all__ = [
    "ActivityProfile",
    "OptimalRange",
    "ScoringWeights",
    "SuitabilityLevel",
    "SuitabilityResult",
    "SuitabilityScore",
    "TrendDirection",
    "VariableScores",
    "WeatherSample",
]
