"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from expense_tracker.config import (
    CorruptDataPolicy,
    TrackerSettings,
    get_settings,
    validate_settings,
)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestTrackerSettings:

    def test_defaults(self):
        """Test the built-in defaults."""
        settings = TrackerSettings()
        assert settings.storage_key == "expenses"
        assert settings.corrupt_data_policy == CorruptDataPolicy.STRICT
        assert settings.notification_timeout_seconds == 2.0
        assert settings.currency_symbol == "₹"
        assert settings.storage_path.name == "storage.json"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        """Test that EXPENSE_TRACKER_* variables override defaults."""
        monkeypatch.setenv("EXPENSE_TRACKER_STORAGE_PATH", str(tmp_path / "x.json"))
        monkeypatch.setenv("EXPENSE_TRACKER_CORRUPT_DATA_POLICY", "reset")
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "debug")

        settings = TrackerSettings()
        assert settings.storage_path == tmp_path / "x.json"
        assert settings.corrupt_data_policy == CorruptDataPolicy.RESET
        assert settings.log_level == "DEBUG"

    def test_home_is_expanded(self):
        """Test that ~ in the storage path is expanded."""
        settings = TrackerSettings(storage_path="~/expenses.json")
        assert settings.storage_path == Path.home() / "expenses.json"

    def test_rejects_bad_log_level(self):
        """Test that unknown log levels are refused."""
        with pytest.raises(ValidationError, match="Unsupported log level"):
            TrackerSettings(log_level="LOUD")

    def test_rejects_non_positive_timeout(self):
        """Test that a zero notification timeout is refused."""
        with pytest.raises(ValidationError):
            TrackerSettings(notification_timeout_seconds=0)


class TestSettingsHelpers:

    def test_get_settings_is_cached(self):
        """Test that settings are built once."""
        assert get_settings() is get_settings()

    def test_validate_settings_ok(self):
        """Test the report for valid settings."""
        assert validate_settings() == {"tracker": True}

    def test_validate_settings_reports_error(self, monkeypatch):
        """Test the report for an invalid policy value."""
        monkeypatch.setenv("EXPENSE_TRACKER_CORRUPT_DATA_POLICY", "panic")
        results = validate_settings()
        assert results["tracker"] is False
        assert "tracker_error" in results
