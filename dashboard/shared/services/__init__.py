"""Service layer — business logic for the ASI dashboard."""

from .common import (
    compute_daily_scores,
    compute_recent_averages,
    compute_variable_stats,
    filter_locations,
    parse_coordinates,
    to_weather_samples,
)
from .export import EXPORT_COLUMNS, build_export_frame, export_filename, frame_to_csv
from .suitability import (
    CsvExport,
    SuitabilityReport,
    SuitabilityService,
    VariableTrendData,
)

__all__ = [
    "CsvExport",
    "EXPORT_COLUMNS",
    "SuitabilityReport",
    "SuitabilityService",
    "VariableTrendData",
    "build_export_frame",
    "compute_daily_scores",
    "compute_recent_averages",
    "compute_variable_stats",
    "export_filename",
    "filter_locations",
    "frame_to_csv",
    "parse_coordinates",
    "to_weather_samples",
]
