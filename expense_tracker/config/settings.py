"""
Configuration Management for the Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
This makes it easy to see where data lives and ensures invalid
configuration is rejected at startup.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CorruptDataPolicy(str, Enum):
    """
    What to do when the persisted expenses cannot be read.

    STRICT refuses to start and reports the reason.
    RESET starts with an empty store, overwriting the unreadable data.
    """
    STRICT = "strict"
    RESET = "reset"


class TrackerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    storage_path: Path = Field(
        default=Path.home() / ".expense_tracker" / "storage.json",
        description="JSON file holding the key-value storage"
    )
    storage_key: str = Field(
        default="expenses",
        min_length=1,
        description="Key under which the expense list is stored"
    )
    corrupt_data_policy: CorruptDataPolicy = Field(
        default=CorruptDataPolicy.STRICT,
        description="How to handle unreadable persisted data"
    )

    # User feedback
    notification_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        le=60,
        description="Delay before success notifications dismiss themselves"
    )

    # Presentation
    currency_symbol: str = Field(
        default="₹",
        description="Symbol shown in front of amounts"
    )
    app_title: str = Field(
        default="Monthly Expense Tracker",
        description="Title shown at the top of the page"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )

    @field_validator('storage_path')
    @classmethod
    def expand_storage_path(cls, v: Path) -> Path:
        """Allow '~' in configured paths."""
        return v.expanduser()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()


def validate_settings() -> dict[str, object]:
    """
    Check that the configuration loads.

    Returns {"tracker": True} on success, or {"tracker": False,
    "tracker_error": <reason>}. Useful for startup checks.
    """
    results: dict[str, object] = {}

    try:
        get_settings()
        results["tracker"] = True
    except ValueError as e:
        results["tracker"] = False
        results["tracker_error"] = str(e)

    return results
