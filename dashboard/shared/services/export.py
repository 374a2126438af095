"""CSV export of the sampled series with daily suitability."""

from __future__ import annotations

import math
import re
import unicodedata

import pandas as pd

from ..data.types import DailyScore, LocationData, WeatherSampleData

EXPORT_COLUMNS = [
    "Location",
    "Activity",
    "Date",
    "Temperature (°C)",
    "Humidity (%)",
    "Wind Speed (km/h)",
    "Precipitation (mm)",
    "Suitability",
]

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


def build_export_frame(
    location: LocationData,
    activity_name: str,
    samples: list[WeatherSampleData],
    daily_scores: list[DailyScore],
) -> pd.DataFrame:
    """One row per day; *daily_scores* must be parallel to *samples*."""
    if len(samples) != len(daily_scores):
        raise ValueError(
            f"samples and daily_scores differ in length ({len(samples)} != {len(daily_scores)})",
        )
    rows = [
        {
            "Location": location["name"],
            "Activity": activity_name,
            "Date": s["timestamp"],
            "Temperature (°C)": round(s["temperature"], 1),
            "Humidity (%)": round(s["humidity"], 1),
            "Wind Speed (km/h)": round(s["wind_speed"], 1),
            "Precipitation (mm)": round(s["precipitation"], 1),
            "Suitability": int(math.floor(d["score"] + 0.5)),
        }
        for s, d in zip(samples, daily_scores)
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def frame_to_csv(frame: pd.DataFrame) -> str:
    return frame.to_csv(index=False, float_format="%.1f", lineterminator="\n")


def export_filename(location: LocationData, end_date: str) -> str:
    """'climate-analysis-<location>-<date>.csv' with filesystem-safe characters."""
    ascii_name = unicodedata.normalize("NFKD", location["name"]).encode("ascii", "ignore").decode()
    slug = _UNSAFE_FILENAME_RE.sub("-", ascii_name).strip("-").lower() or "location"
    return f"climate-analysis-{slug}-{end_date}.csv"
