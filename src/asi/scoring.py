"""Activity Suitability Index (ASI) scoring engine.

Pure functions. Each variable is scored 0-100 against the activity's
optimal range, the four variable scores are weight-summed into a daily
composite, and the composites are averaged over the series with linearly
increasing weight toward the most recent day.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from asi.models.activity import ActivityProfile, OptimalRange
from asi.models.result import (
    SuitabilityLevel,
    SuitabilityResult,
    SuitabilityScore,
    TrendDirection,
    VariableScores,
)
from asi.models.weather import WeatherSample

TREND_WINDOW = 7
TREND_THRESHOLD = 5

# Lower bound of each level, best first.
LEVEL_THRESHOLDS: tuple[tuple[int, SuitabilityLevel], ...] = (
    (80, SuitabilityLevel.EXCELLENT),
    (60, SuitabilityLevel.GOOD),
    (40, SuitabilityLevel.FAIR),
    (20, SuitabilityLevel.POOR),
)

VARIABLES = ("temperature", "humidity", "wind_speed", "precipitation")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ── Per-sample scores ────────────────────────────────────────────


def variable_score(value: float, range_min: float, range_max: float) -> float:
    """Score one value against [range_min, range_max].

    100 inside the range. Outside, the score falls linearly with the
    distance to the nearest bound, measured in range widths, and bottoms
    out at 0. A zero-width range scores 100 on its value and 0 elsewhere.
    """
    if range_min <= value <= range_max:
        return 100.0
    width = range_max - range_min
    if width == 0:
        return 0.0
    if value < range_min:
        distance = range_min - value
    else:
        distance = value - range_max
    return max(0.0, 100.0 - distance / width * 100.0)


def _range_score(value: float, optimal: OptimalRange) -> float:
    return variable_score(value, optimal.min, optimal.max)


def variable_scores(sample: WeatherSample, profile: ActivityProfile) -> VariableScores:
    """Score each of the four variables of a sample."""
    return VariableScores(
        temperature=_range_score(sample.temperature, profile.temperature),
        humidity=_range_score(sample.humidity, profile.humidity),
        wind_speed=_range_score(sample.wind_speed, profile.wind_speed),
        precipitation=_range_score(sample.precipitation, profile.precipitation),
    )


def composite_score(sample: WeatherSample, profile: ActivityProfile) -> float:
    """Weighted sum of the variable scores of one sample, in [0, 100]."""
    scores = variable_scores(sample, profile)
    weights = profile.weights
    return (
        scores.temperature * weights.temperature
        + scores.humidity * weights.humidity
        + scores.wind_speed * weights.wind_speed
        + scores.precipitation * weights.precipitation
    )


# ── Series aggregation ───────────────────────────────────────────


def _recency_weighted_mean(values: Sequence[float]) -> float:
    """Mean where chronological index k carries weight (k+1)/N."""
    n = len(values)
    if n == 0:
        return 0.0
    weights = [(k + 1) / n for k in range(n)]
    return sum(v * w for v, w in zip(values, weights)) / sum(weights)


def aggregate_score(series: Sequence[WeatherSample], profile: ActivityProfile) -> int:
    """Recency-weighted ASI of a chronological series, rounded. 0 when empty."""
    composites = [composite_score(sample, profile) for sample in series]
    return _round_half_up(_recency_weighted_mean(composites))


def aggregate_variable_scores(
    series: Sequence[WeatherSample],
    profile: ActivityProfile,
) -> VariableScores:
    """Recency-weighted per-variable sub-scores, one decimal. All 0 when empty."""
    per_sample = [variable_scores(sample, profile) for sample in series]
    averaged = {
        name: round(_recency_weighted_mean([getattr(s, name) for s in per_sample]), 1)
        for name in VARIABLES
    }
    return VariableScores(**averaged)


# ── Classification ───────────────────────────────────────────────


def classify_level(score: int) -> SuitabilityLevel:
    """Map a rounded ASI to its qualitative level."""
    for lower_bound, level in LEVEL_THRESHOLDS:
        if score >= lower_bound:
            return level
    return SuitabilityLevel.VERY_POOR


def score(series: Sequence[WeatherSample], profile: ActivityProfile) -> SuitabilityScore:
    """Aggregate score and level of a series."""
    value = aggregate_score(series, profile)
    return SuitabilityScore(score=value, level=classify_level(value))


def _baseline(series: Sequence[WeatherSample], recent_window: int) -> Sequence[WeatherSample]:
    """The series with its ``recent_window`` most recent samples removed."""
    return series[: max(len(series) - max(recent_window, 0), 0)]


def compare_scores(current: int, previous: int, threshold: int = TREND_THRESHOLD) -> TrendDirection:
    if current > previous + threshold:
        return TrendDirection.UP
    if current < previous - threshold:
        return TrendDirection.DOWN
    return TrendDirection.STABLE


def trend(
    series: Sequence[WeatherSample],
    profile: ActivityProfile,
    recent_window: int = TREND_WINDOW,
    *,
    threshold: int = TREND_THRESHOLD,
    require_baseline: bool = True,
) -> TrendDirection:
    """Compare the full-series ASI with the ASI of the series minus its recent window.

    With ``require_baseline`` (the default) a series no longer than
    ``recent_window`` has no baseline and reports STABLE. Without it the
    empty baseline scores 0, so any current score above ``threshold``
    reads as UP.
    """
    baseline = _baseline(series, recent_window)
    if require_baseline and not baseline:
        return TrendDirection.STABLE
    return compare_scores(
        aggregate_score(series, profile),
        aggregate_score(baseline, profile),
        threshold,
    )


def evaluate(
    series: Sequence[WeatherSample],
    profile: ActivityProfile,
    recent_window: int = TREND_WINDOW,
) -> SuitabilityResult:
    """Score, level, trend and sub-scores of a series in one pass.

    ``previous_score`` is the ASI of the series minus its recent window, or
    None when that leaves nothing to compare against.
    """
    current = score(series, profile)
    baseline = _baseline(series, recent_window)
    previous = aggregate_score(baseline, profile) if baseline else None
    return SuitabilityResult(
        score=current.score,
        level=current.level,
        trend=trend(series, profile, recent_window),
        previous_score=previous,
        sub_scores=aggregate_variable_scores(series, profile),
    )
