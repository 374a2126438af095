"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ASI_BLUE,
    CLIMATE_VARIABLES,
    LEVEL_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    TREND_ICONS,
    VARIABLE_LABELS,
    VARIABLE_UNITS,
)
from .formatters import format_coordinates, format_measurement, format_range, format_score_delta

# --- Data layer ---
from .data import WeatherDataError, get_repository

# --- Service layer ---
from .services import CsvExport, SuitabilityReport, SuitabilityService, VariableTrendData

# --- UI components ---
from .sidebar import AnalysisSelection, render_analysis_sidebar

__all__ = [
    "ASI_BLUE",
    "AnalysisSelection",
    "CLIMATE_VARIABLES",
    "CsvExport",
    "LEVEL_COLORS",
    "PLOTLY_LAYOUT_DEFAULTS",
    "SuitabilityReport",
    "SuitabilityService",
    "TREND_ICONS",
    "VARIABLE_LABELS",
    "VARIABLE_UNITS",
    "VariableTrendData",
    "WeatherDataError",
    "format_coordinates",
    "format_measurement",
    "format_range",
    "format_score_delta",
    "get_repository",
    "render_analysis_sidebar",
]
