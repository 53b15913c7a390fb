"""Configuration package."""

from expense_tracker.config.settings import (
    CorruptDataPolicy,
    TrackerSettings,
    get_settings,
    validate_settings,
)

__all__ = [
    "CorruptDataPolicy",
    "TrackerSettings",
    "get_settings",
    "validate_settings",
]
