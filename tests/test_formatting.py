"""Tests for date and amount formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from expense_tracker.formatting import (
    InvalidDateError,
    format_amount,
    format_short,
    parse_timestamp,
    to_iso_timestamp,
    to_local,
)


IST = timezone(timedelta(hours=5, minutes=30))
NEW_YORK_WINTER = timezone(timedelta(hours=-5))


class TestFormatShort:

    def test_utc_reference_zone(self):
        """Test DD/MM/YY in UTC."""
        assert format_short("2024-03-05T00:00:00.000Z", tz=timezone.utc) == "05/03/24"

    def test_uses_display_zone_calendar_date(self):
        """Midnight UTC is still the previous day in New York."""
        assert format_short("2024-03-05T00:00:00.000Z", tz=NEW_YORK_WINTER) == "04/03/24"

    def test_pads_day_month_and_year(self):
        """Test zero padding of every field."""
        assert format_short("2009-01-02T12:00:00Z", tz=timezone.utc) == "02/01/09"

    def test_crosses_year_boundary(self):
        """Test a timestamp that is already next year locally."""
        assert format_short("2023-12-31T20:00:00Z", tz=IST) == "01/01/24"

    def test_naive_timestamp_is_read_in_display_zone(self):
        """Test that naive timestamps are not shifted."""
        assert format_short("2024-03-05T23:30:00", tz=IST) == "05/03/24"

    @pytest.mark.parametrize("bad", ["", "not a date", "2024-13-01T00:00:00Z", "05/03/24"])
    def test_invalid_date_raises(self, bad):
        """Test that unparseable dates raise."""
        with pytest.raises(InvalidDateError):
            format_short(bad)

    def test_invalid_date_error_is_value_error(self):
        """Test that InvalidDateError is a ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp("nope")


class TestTimestamps:

    def test_to_iso_timestamp_shape(self):
        """Test millisecond precision and the Z suffix."""
        moment = datetime(2024, 3, 5, 10, 15, 30, 123456, tzinfo=timezone.utc)
        assert to_iso_timestamp(moment) == "2024-03-05T10:15:30.123Z"

    def test_to_iso_timestamp_converts_to_utc(self):
        """Test that aware times are converted to UTC."""
        moment = datetime(2024, 3, 5, 5, 30, tzinfo=IST)
        assert to_iso_timestamp(moment) == "2024-03-05T00:00:00.000Z"

    def test_iso_timestamp_parses_back(self):
        """Test that written timestamps can be read again."""
        moment = datetime(2024, 3, 5, 10, 15, 30, 123000, tzinfo=timezone.utc)
        assert parse_timestamp(to_iso_timestamp(moment)) == moment

    def test_to_local_keeps_naive_without_zone(self):
        """Test that naive values pass through with no zone."""
        naive = datetime(2024, 3, 5, 10, 0)
        assert to_local(naive) is naive


class TestFormatAmount:

    @pytest.mark.parametrize("amount,expected", [
        (150.0, "₹150"),
        (12.5, "₹12.5"),
        (0.1 + 0.2, "₹0.30000000000000004"),
        (-20.0, "₹-20"),
    ])
    def test_format_amount(self, amount, expected):
        """Test amount display with the default symbol."""
        assert format_amount(amount) == expected

    def test_custom_symbol(self):
        """Test amount display with another symbol."""
        assert format_amount(9.99, "$") == "$9.99"
