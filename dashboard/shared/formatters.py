"""Formatting helpers for the ASI dashboard."""

from __future__ import annotations

from asi.models.activity import OptimalRange


def format_measurement(value: float | None, unit: str, decimals: int = 0) -> str:
    """Format a value with its unit ("21°C", "55%", "12 km/h") or '—' if None."""
    if value is None:
        return "—"
    number = f"{value:.{decimals}f}"
    if unit in ("°C", "%"):
        return f"{number}{unit}"
    return f"{number} {unit}"


def format_range(optimal: OptimalRange, unit: str) -> str:
    """Format an optimal range as 'min – max unit'."""
    low = f"{optimal.min:g}"
    high = f"{optimal.max:g}"
    if unit in ("°C", "%"):
        return f"{low}{unit} – {high}{unit}"
    return f"{low} – {high} {unit}"


def format_coordinates(lat: float, lng: float, decimals: int = 4) -> str:
    return f"{lat:.{decimals}f}, {lng:.{decimals}f}"


def format_score_delta(current: int, previous: int | None) -> str | None:
    """Format the change against the baseline score as '+n' / '-n', or None if unchanged."""
    if previous is None:
        return None
    delta = current - previous
    if delta == 0:
        return None
    return f"{delta:+d}"
