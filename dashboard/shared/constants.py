"""Shared constants for the ASI dashboard."""

from __future__ import annotations

from asi.models.result import SuitabilityLevel, TrendDirection

from .data.types import LocationData

ASI_BLUE = "#3B82F6"

# ── Data settings ────────────────────────────────────────────────────────────

SIMULATED_FETCH_DELAY = 1.0  # seconds; stands in for archive latency
DEFAULT_DAYS = 30
MIN_DAYS = 7
MAX_DAYS = 90
TREND_WINDOW = 7

PREDEFINED_LOCATIONS: list[LocationData] = [
    {"lat": -23.5505, "lng": -46.6333, "name": "São Paulo, BR"},
    {"lat": 40.7128, "lng": -74.0060, "name": "New York, USA"},
    {"lat": 51.5074, "lng": -0.1278, "name": "London, UK"},
    {"lat": 35.6762, "lng": 139.6503, "name": "Tokyo, Japan"},
    {"lat": -15.7942, "lng": -47.8822, "name": "Brasília, BR"},
    {"lat": 48.8566, "lng": 2.3522, "name": "Paris, France"},
]

# ── Climate variables ────────────────────────────────────────────────────────

CLIMATE_VARIABLES: tuple[str, ...] = ("temperature", "precipitation", "wind_speed", "humidity")

VARIABLE_LABELS: dict[str, str] = {
    "temperature": "Temperature",
    "precipitation": "Precipitation",
    "wind_speed": "Wind Speed",
    "humidity": "Relative Humidity",
}

VARIABLE_UNITS: dict[str, str] = {
    "temperature": "°C",
    "precipitation": "mm",
    "wind_speed": "km/h",
    "humidity": "%",
}

VARIABLE_COLORS: dict[str, str] = {
    "temperature": "#EF4444",
    "precipitation": "#3B82F6",
    "wind_speed": "#10B981",
    "humidity": "#8B5CF6",
}

# ── Suitability display ──────────────────────────────────────────────────────

LEVEL_COLORS: dict[SuitabilityLevel, str] = {
    SuitabilityLevel.EXCELLENT: "#4ADE80",
    SuitabilityLevel.GOOD: "#60A5FA",
    SuitabilityLevel.FAIR: "#FACC15",
    SuitabilityLevel.POOR: "#FB923C",
    SuitabilityLevel.VERY_POOR: "#F87171",
}

RECOMMENDATIONS: dict[SuitabilityLevel, str] = {
    SuitabilityLevel.EXCELLENT: "Ideal conditions! Excellent time for this activity.",
    SuitabilityLevel.GOOD: "Good conditions. Activity recommended with basic precautions.",
    SuitabilityLevel.FAIR: "Moderate conditions. Consider adjusting timing or equipment.",
    SuitabilityLevel.POOR: "Unfavorable conditions. Activity not recommended for beginners.",
    SuitabilityLevel.VERY_POOR: "Poor conditions. Recommend avoiding this activity.",
}

TREND_MESSAGES: dict[TrendDirection, str] = {
    TrendDirection.UP: "Conditions improving",
    TrendDirection.DOWN: "Conditions worsening",
    TrendDirection.STABLE: "Stable conditions",
}

TREND_ICONS: dict[TrendDirection, str] = {
    TrendDirection.UP: "↗",
    TrendDirection.DOWN: "↘",
    TrendDirection.STABLE: "→",
}

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
