"""Tests for SuitabilityService (mocked repository)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from asi.models.activity import ActivityProfile
from asi.models.result import SuitabilityLevel, TrendDirection
from asi.profiles import ACTIVITY_PROFILES
from shared.constants import MIN_DAYS, RECOMMENDATIONS, TREND_MESSAGES
from shared.data.base import WeatherRepository
from shared.data.errors import WeatherDataError
from shared.formatters import format_score_delta
from shared.services.export import EXPORT_COLUMNS
from shared.services.suitability import (
    CsvExport,
    SuitabilityReport,
    SuitabilityService,
    VariableTrendData,
)
from tests.conftest import IDEAL_DAY, POOR_DAY, SAMPLE_PROFILE


@pytest.fixture
def mock_repo():
    return MagicMock(spec=WeatherRepository)


@pytest.fixture
def service(mock_repo):
    return SuitabilityService(mock_repo)


@pytest.fixture
def hiking_profile() -> ActivityProfile:
    return ActivityProfile.model_validate(SAMPLE_PROFILE)


@pytest.fixture
def improving_data(make_series_data) -> list[dict]:
    """23 poor days then 7 ideal days for the hiking profile."""
    return make_series_data([POOR_DAY] * 23 + [IDEAL_DAY] * 7)


class TestRepositoryPassThrough:
    def test_fetch_series(self, service, mock_repo, sample_location, sample_series):
        mock_repo.get_series.return_value = sample_series
        result = service.fetch_series(sample_location, 30, 1234)
        assert result == sample_series
        mock_repo.get_series.assert_called_once_with(-23.5505, -46.6333, 30, 1234)

    def test_fetch_series_propagates_error(self, service, mock_repo, sample_location):
        mock_repo.get_series.side_effect = WeatherDataError("archive offline")
        with pytest.raises(WeatherDataError, match="archive offline"):
            service.fetch_series(sample_location, 30, 1)

    def test_list_activities(self, service, mock_repo):
        mock_repo.get_activities.return_value = list(ACTIVITY_PROFILES)
        assert len(service.list_activities()) == 12

    def test_list_locations(self, service, mock_repo, sample_location):
        mock_repo.get_locations.return_value = [sample_location]
        assert service.list_locations() == [sample_location]


class TestEvaluate:
    def test_improving_series(self, service, improving_data, hiking_profile):
        report = service.evaluate(improving_data, hiking_profile)
        assert isinstance(report, SuitabilityReport)
        assert report.result.score == 64
        assert report.result.level == SuitabilityLevel.GOOD
        assert report.result.trend == TrendDirection.UP
        assert report.result.previous_score == 40

    def test_texts_follow_result(self, service, improving_data, hiking_profile):
        report = service.evaluate(improving_data, hiking_profile)
        assert report.recommendation == RECOMMENDATIONS[SuitabilityLevel.GOOD]
        assert report.trend_message == TREND_MESSAGES[TrendDirection.UP]
        assert report.recent_window == 7

    def test_recent_conditions_are_last_week(self, service, improving_data, hiking_profile):
        report = service.evaluate(improving_data, hiking_profile)
        assert report.recent_conditions["temperature"] == pytest.approx(20.0)
        assert report.recent_conditions["precipitation"] == pytest.approx(0.0)

    def test_daily_scores(self, service, improving_data, hiking_profile):
        report = service.evaluate(improving_data, hiking_profile)
        assert len(report.daily_scores) == 30
        assert report.daily_scores[0]["score"] == pytest.approx(40.0)
        assert report.daily_scores[-1]["score"] == pytest.approx(100.0)

    def test_empty_series(self, service, hiking_profile):
        report = service.evaluate([], hiking_profile)
        assert report.result.score == 0
        assert report.result.level == SuitabilityLevel.VERY_POOR
        assert report.result.trend == TrendDirection.STABLE
        assert report.daily_scores == []
        assert all(v is None for v in report.recent_conditions.values())

    def test_custom_window(self, mock_repo, make_series_data, hiking_profile):
        # With a 1-day window the baseline still contains ideal days: no trend.
        data = make_series_data([IDEAL_DAY] * 10)
        report = SuitabilityService(mock_repo, recent_window=1).evaluate(data, hiking_profile)
        assert report.result.trend == TrendDirection.STABLE
        assert report.result.previous_score == 100
        assert report.recent_window == 1

    def test_shortest_period_has_no_baseline(self, service, make_series_data, hiking_profile):
        # MIN_DAYS samples leave nothing before the recent window
        data = make_series_data([IDEAL_DAY] * MIN_DAYS)
        report = service.evaluate(data, hiking_profile)
        assert report.result.trend == TrendDirection.STABLE
        assert report.result.previous_score is None
        assert format_score_delta(report.result.score, report.result.previous_score) is None

    def test_malformed_series_raises(self, service, make_sample_data, hiking_profile):
        with pytest.raises(WeatherDataError):
            service.evaluate([make_sample_data(wind_speed=-5.0)], hiking_profile)


class TestPrepareVariableTrends:
    def test_one_entry_per_variable(self, service, sample_series):
        trends = service.prepare_variable_trends(sample_series, ["temperature", "precipitation"])
        assert [t.variable for t in trends] == ["temperature", "precipitation"]
        assert all(isinstance(t, VariableTrendData) for t in trends)

    def test_entry_contents(self, service, sample_series):
        (temp,) = service.prepare_variable_trends(sample_series, ["temperature"])
        assert temp.label == "Temperature"
        assert temp.unit == "°C"
        assert temp.dates[0] == "2024-06-06"
        assert temp.dates[-1] == "2024-06-15"
        assert temp.values[-1] == 23.0
        assert temp.stats["max"] == 23.0

    def test_unknown_variable_skipped(self, service, sample_series):
        trends = service.prepare_variable_trends(sample_series, ["pressure", "humidity"])
        assert [t.variable for t in trends] == ["humidity"]

    def test_empty_series(self, service):
        (temp,) = service.prepare_variable_trends([], ["temperature"])
        assert temp.values == []
        assert temp.stats["avg"] is None


class TestBuildCsvExport:
    def test_export(self, service, sample_location, sample_series, hiking_profile):
        export = service.build_csv_export(sample_location, hiking_profile, sample_series)
        assert isinstance(export, CsvExport)
        assert export.row_count == 10
        assert export.filename == "climate-analysis-sao-paulo-br-2024-06-15.csv"

        lines = export.content.splitlines()
        assert lines[0] == ",".join(EXPORT_COLUMNS)
        assert len(lines) == 11
        assert lines[-1] == "\"São Paulo, BR\",Hiking,2024-06-15,23.0,55.0,10.0,0.0,100"

    def test_suitability_rounded_once(self, service, sample_location, make_series_data, hiking_profile):
        # composite 72.46 must export as 72, not 72.5 rounded up to 73
        data = make_series_data([{"temperature": 3.066}])
        export = service.build_csv_export(sample_location, hiking_profile, data)
        assert export.content.splitlines()[-1].endswith(",3.1,55.0,10.0,0.0,72")

    def test_empty_series(self, service, sample_location, hiking_profile):
        export = service.build_csv_export(sample_location, hiking_profile, [])
        assert export.row_count == 0
        assert export.filename == "climate-analysis-sao-paulo-br-empty.csv"
        assert export.content.splitlines() == [",".join(EXPORT_COLUMNS)]
