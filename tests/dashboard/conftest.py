"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────

END_DATE = date(2024, 6, 15)

SAO_PAULO = {"lat": -23.5505, "lng": -46.6333, "name": "São Paulo, BR"}


def _make_sample_data(
    timestamp: str = "2024-06-15",
    temperature: float = 20.0,
    humidity: float = 55.0,
    wind_speed: float = 10.0,
    precipitation: float = 0.0,
) -> dict:
    return {
        "temperature": temperature,
        "humidity": humidity,
        "wind_speed": wind_speed,
        "precipitation": precipitation,
        "timestamp": timestamp,
    }


def _make_series_data(rows: list[dict], end: date = END_DATE) -> list[dict]:
    """Chronological repository-shaped series ending at *end*."""
    start = end - timedelta(days=len(rows) - 1)
    return [
        _make_sample_data(timestamp=(start + timedelta(days=i)).isoformat(), **fields)
        for i, fields in enumerate(rows)
    ]


@pytest.fixture
def sample_location() -> dict:
    return dict(SAO_PAULO)


@pytest.fixture
def sample_series() -> list[dict]:
    """10 days with distinct values; the last 7 average 20°C / 0.5 mm."""
    return _make_series_data([
        {"temperature": 10.0, "precipitation": 5.0},
        {"temperature": 12.0, "precipitation": 0.0},
        {"temperature": 14.0, "precipitation": 0.0},
        {"temperature": 17.0, "precipitation": 0.0},
        {"temperature": 18.0, "precipitation": 0.0},
        {"temperature": 19.0, "precipitation": 0.0},
        {"temperature": 20.0, "precipitation": 1.5},
        {"temperature": 21.0, "precipitation": 2.0},
        {"temperature": 22.0, "precipitation": 0.0},
        {"temperature": 23.0, "precipitation": 0.0},
    ])


@pytest.fixture
def make_sample_data():
    """Factory fixture for repository-shaped sample dicts."""
    return _make_sample_data


@pytest.fixture
def make_series_data():
    """Factory fixture for repository-shaped series."""
    return _make_series_data
