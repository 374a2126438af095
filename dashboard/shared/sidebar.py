"""Shared sidebar rendering for location, activity and period selection."""

from __future__ import annotations

import random
from dataclasses import dataclass

import streamlit as st

from asi.models.activity import ActivityProfile

from .constants import DEFAULT_DAYS, MAX_DAYS, MIN_DAYS
from .data import WeatherDataError
from .formatters import format_coordinates
from .services import SuitabilityService, filter_locations, parse_coordinates
from .data.types import LocationData

_SEED_KEY = "refresh_seed"


@dataclass(frozen=True)
class AnalysisSelection:
    """Result of the sidebar selection."""

    location: LocationData
    profile: ActivityProfile
    days: int
    seed: int


def _new_seed() -> int:
    return random.randrange(2**32)


def current_seed() -> int:
    """Seed of the series shown in this session; stable until refreshed."""
    if _SEED_KEY not in st.session_state:
        st.session_state[_SEED_KEY] = _new_seed()
    return st.session_state[_SEED_KEY]


def _render_location_picker(locations: list[LocationData]) -> LocationData | None:
    mode = st.sidebar.radio("Location", ["Search by city", "Coordinates"], horizontal=True)

    if mode == "Search by city":
        term = st.sidebar.text_input("City", placeholder="Type city name...")
        matches = filter_locations(locations, term)
        if not matches:
            st.sidebar.warning("No location found.")
            return None
        options = {loc["name"]: loc for loc in matches}
        name = st.sidebar.selectbox("Suggested locations", list(options.keys()))
        return options[name]

    lat_col, lng_col = st.sidebar.columns(2)
    lat_text = lat_col.text_input("Latitude", placeholder="-23.5505")
    lng_text = lng_col.text_input("Longitude", placeholder="-46.6333")
    if not lat_text or not lng_text:
        st.sidebar.info("Enter latitude and longitude.")
        return None
    location = parse_coordinates(lat_text, lng_text)
    if location is None:
        st.sidebar.warning("Latitude must be in [-90, 90] and longitude in [-180, 180].")
    return location


def render_analysis_sidebar(service: SuitabilityService) -> AnalysisSelection | None:
    """Render location/activity/period pickers in the sidebar.

    Returns an AnalysisSelection, or None (with st.stop()) when incomplete.
    """
    try:
        locations = service.list_locations()
        activities = service.list_activities()
    except WeatherDataError as exc:
        st.sidebar.error(f"Failed to load configuration: {exc}")
        st.stop()
        return None

    location = _render_location_picker(locations)

    if not activities:
        st.sidebar.warning("No activities configured.")
        st.stop()
        return None
    by_name = {p.name: p for p in activities}
    activity_name = st.sidebar.selectbox("Activity", list(by_name.keys()))
    profile = by_name[activity_name]

    days = st.sidebar.slider("Days of history", MIN_DAYS, MAX_DAYS, DEFAULT_DAYS)

    if st.sidebar.button("Refresh data"):
        st.session_state[_SEED_KEY] = _new_seed()

    if location is None:
        st.info("Select a location and activity to calculate the ASI.")
        st.stop()
        return None

    st.sidebar.caption(f"{location['name']} ({format_coordinates(location['lat'], location['lng'])})")

    return AnalysisSelection(
        location=location,
        profile=profile,
        days=days,
        seed=current_seed(),
    )
