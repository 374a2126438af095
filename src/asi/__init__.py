"""ASI — Activity Suitability Index scoring over simulated weather."""

from asi.exceptions import ASIError, ASIValidationError, UnknownActivityError
from asi.generator import DEFAULT_DAYS, RandomSource, generate_series
from asi.models import (
    ActivityProfile,
    OptimalRange,
    ScoringWeights,
    SuitabilityLevel,
    SuitabilityResult,
    SuitabilityScore,
    TrendDirection,
    VariableScores,
    WeatherSample,
)
from asi.profiles import ACTIVITY_PROFILES, get_profile, load_profiles
from asi.scheduling import LatestOnlyScheduler
from asi.scoring import (
    TREND_WINDOW,
    aggregate_score,
    classify_level,
    composite_score,
    evaluate,
    score,
    trend,
    variable_score,
)

__all__ = [
    "ACTIVITY_PROFILES",
    "ASIError",
    "ASIValidationError",
    "ActivityProfile",
    "DEFAULT_DAYS",
    "LatestOnlyScheduler",
    "OptimalRange",
    "RandomSource",
    "ScoringWeights",
    "SuitabilityLevel",
    "SuitabilityResult",
    "SuitabilityScore",
    "TREND_WINDOW",
    "TrendDirection",
    "UnknownActivityError",
    "VariableScores",
    "WeatherSample",
    "aggregate_score",
    "classify_level",
    "composite_score",
    "evaluate",
    "generate_series",
    "get_profile",
    "load_profiles",
    "score",
    "trend",
    "variable_score",
]

__version__ = "0.1.0"
