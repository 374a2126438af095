"""Activity suitability service — business logic behind the ASI pages."""

from __future__ import annotations

from dataclasses import dataclass

from asi.models.activity import ActivityProfile
from asi.models.result import SuitabilityResult
from asi.scoring import evaluate

from ..api_logging import log_service_call
from ..constants import (
    CLIMATE_VARIABLES,
    RECOMMENDATIONS,
    TREND_MESSAGES,
    TREND_WINDOW,
    VARIABLE_COLORS,
    VARIABLE_LABELS,
    VARIABLE_UNITS,
)
from ..data.base import WeatherRepository
from ..data.types import DailyScore, LocationData, WeatherSampleData
from .common import (
    compute_daily_scores,
    compute_recent_averages,
    compute_variable_stats,
    to_weather_samples,
)
from .export import build_export_frame, export_filename, frame_to_csv


@dataclass(frozen=True)
class SuitabilityReport:
    result: SuitabilityResult
    recent_conditions: dict[str, float | None]
    daily_scores: list[DailyScore]
    recommendation: str
    trend_message: str
    recent_window: int


@dataclass(frozen=True)
class VariableTrendData:
    variable: str
    label: str
    unit: str
    color: str
    dates: list[str]
    values: list[float]
    stats: dict[str, float | None]


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str
    row_count: int


class SuitabilityService:
    """Encapsulates fetching, scoring and exporting for one location/activity pair."""

    def __init__(self, repo: WeatherRepository, recent_window: int = TREND_WINDOW) -> None:
        self._repo = repo
        self._recent_window = recent_window

    @log_service_call
    def fetch_series(
        self,
        location: LocationData,
        days: int,
        seed: int,
    ) -> list[WeatherSampleData]:
        """Fetch the simulated series for a location."""
        return self._repo.get_series(location["lat"], location["lng"], days, seed)

    @log_service_call
    def list_activities(self) -> list[ActivityProfile]:
        return self._repo.get_activities()

    @log_service_call
    def list_locations(self) -> list[LocationData]:
        return self._repo.get_locations()

    @log_service_call
    def evaluate(
        self,
        samples: list[WeatherSampleData],
        profile: ActivityProfile,
    ) -> SuitabilityReport:
        """Score a series and gather what the ASI card displays."""
        series = to_weather_samples(samples)
        result = evaluate(series, profile, self._recent_window)
        return SuitabilityReport(
            result=result,
            recent_conditions=compute_recent_averages(
                samples, CLIMATE_VARIABLES, self._recent_window,
            ),
            daily_scores=compute_daily_scores(series, profile),
            recommendation=RECOMMENDATIONS[result.level],
            trend_message=TREND_MESSAGES[result.trend],
            recent_window=self._recent_window,
        )

    @log_service_call
    def prepare_variable_trends(
        self,
        samples: list[WeatherSampleData],
        variables: list[str],
    ) -> list[VariableTrendData]:
        """Chart data and summary stats for each requested climate variable."""
        dates = [s["timestamp"] for s in samples]
        return [
            VariableTrendData(
                variable=var,
                label=VARIABLE_LABELS[var],
                unit=VARIABLE_UNITS[var],
                color=VARIABLE_COLORS[var],
                dates=dates,
                values=[s[var] for s in samples],
                stats=compute_variable_stats(samples, var),
            )
            for var in variables
            if var in CLIMATE_VARIABLES
        ]

    @log_service_call
    def build_csv_export(
        self,
        location: LocationData,
        profile: ActivityProfile,
        samples: list[WeatherSampleData],
    ) -> CsvExport:
        """CSV of the raw series with each day's suitability score."""
        series = to_weather_samples(samples)
        frame = build_export_frame(
            location, profile.name, samples, compute_daily_scores(series, profile),
        )
        end_date = samples[-1]["timestamp"] if samples else "empty"
        return CsvExport(
            filename=export_filename(location, end_date),
            content=frame_to_csv(frame),
            row_count=len(frame),
        )
