"""Named activity profiles and profile-table loading."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from asi.exceptions import ASIValidationError, UnknownActivityError
from asi.models.activity import ActivityProfile

_Range = tuple[float, float]

# id, name, description, temp °C, humidity %, wind km/h, precipitation mm
_PROFILE_TABLE: list[tuple[str, str, str, _Range, _Range, _Range, _Range]] = [
    ("hiking", "Hiking", "Mountain hikes and trails", (15, 28), (40, 70), (0, 15), (0, 2)),
    ("beach", "Beach Day", "Water activities and sunbathing", (25, 35), (50, 80), (5, 20), (0, 1)),
    ("camping", "Camping", "Outdoor camping", (10, 25), (30, 65), (0, 25), (0, 5)),
    ("cycling", "Cycling", "Bike rides", (12, 30), (35, 75), (0, 20), (0, 3)),
    ("photography", "Photography", "Landscape and nature photography", (5, 35), (20, 90), (0, 30), (0, 15)),
    ("forest_walk", "Forest Walk", "Forest area exploration", (8, 26), (45, 85), (0, 18), (0, 8)),
    ("stargazing", "Stargazing", "Star and planet observation", (-5, 25), (20, 60), (0, 10), (0, 0)),
    ("snow_sports", "Snow Sports", "Skiing and snowboarding", (-15, 5), (60, 90), (0, 35), (5, 50)),
    ("fishing", "Fishing", "River and lake fishing", (15, 28), (50, 85), (0, 15), (0, 10)),
    ("paragliding", "Paragliding", "Free flight and paragliding", (18, 32), (30, 70), (8, 25), (0, 1)),
    ("storm_watching", "Storm Watching", "Safe storm chasing", (20, 35), (70, 95), (15, 60), (10, 100)),
    ("kitesurfing", "Kitesurfing", "Kitesurfing and windsurfing", (20, 35), (60, 85), (15, 40), (0, 5)),
]


def _row_to_dict(row: tuple) -> dict[str, Any]:
    profile_id, name, description, temperature, humidity, wind_speed, precipitation = row
    return {
        "id": profile_id,
        "name": name,
        "description": description,
        "temperature": {"min": temperature[0], "max": temperature[1]},
        "humidity": {"min": humidity[0], "max": humidity[1]},
        "wind_speed": {"min": wind_speed[0], "max": wind_speed[1]},
        "precipitation": {"min": precipitation[0], "max": precipitation[1]},
    }


def load_profiles(data: Iterable[dict[str, Any]]) -> tuple[ActivityProfile, ...]:
    """Validate a list of profile dicts into ActivityProfile models.

    Raises:
        ASIValidationError: if any entry is malformed or two entries share an id.
    """
    try:
        profiles = TypeAdapter(list[ActivityProfile]).validate_python(list(data))
    except ValidationError as exc:
        raise ASIValidationError(f"Failed to validate activity profiles: {exc}") from exc

    seen: set[str] = set()
    for profile in profiles:
        if profile.id in seen:
            raise ASIValidationError(f"Duplicate activity profile id: {profile.id!r}")
        seen.add(profile.id)
    return tuple(profiles)


ACTIVITY_PROFILES: tuple[ActivityProfile, ...] = load_profiles(
    _row_to_dict(row) for row in _PROFILE_TABLE
)


def get_profile(
    profile_id: str,
    profiles: Iterable[ActivityProfile] = ACTIVITY_PROFILES,
) -> ActivityProfile:
    """Look up a profile by id.

    Raises:
        UnknownActivityError: if no profile has that id.
    """
    for profile in profiles:
        if profile.id == profile_id:
            return profile
    raise UnknownActivityError(profile_id)
