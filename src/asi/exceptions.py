"""Custom exceptions for the ASI library."""

from __future__ import annotations


class ASIError(Exception):
    """Base exception for all ASI library errors."""


class ASIValidationError(ASIError):
    """Raised when configuration data (e.g. an activity profile table) fails model validation."""


class UnknownActivityError(ASIError):
    """Raised when an activity id is not present in the profile table."""

    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Unknown activity profile: {profile_id!r}")
