"""
Date and amount formatting.

Stored timestamps are ISO-8601 strings in UTC with millisecond precision
and a 'Z' suffix. Display uses the local calendar date unless a time zone
is passed explicitly.
"""

from datetime import datetime, timezone, tzinfo
from typing import Optional


class InvalidDateError(ValueError):
    """A timestamp string could not be parsed."""
    pass


def parse_timestamp(date_string: str) -> datetime:
    """
    Parse an ISO-8601 timestamp.

    Raises:
        InvalidDateError: If the string is not a valid timestamp
    """
    try:
        return datetime.fromisoformat(date_string)
    except (TypeError, ValueError):
        raise InvalidDateError(f"Invalid date: {date_string!r}")


def to_local(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Express a datetime in the display time zone.

    Naive values are taken to already be in that zone. With tz=None the
    display zone is the runtime's local time zone.
    """
    if moment.tzinfo is None:
        return moment if tz is None else moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def to_iso_timestamp(moment: datetime) -> str:
    """Render as UTC with millisecond precision, e.g. 2024-03-05T10:15:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_short(date_string: str, tz: Optional[tzinfo] = None) -> str:
    """
    Format a stored timestamp as DD/MM/YY.

    Raises:
        InvalidDateError: If the string is not a valid timestamp
    """
    local = to_local(parse_timestamp(date_string), tz)
    return f"{local.day:02d}/{local.month:02d}/{local.year % 100:02d}"


def format_amount(amount: float, symbol: str = "₹") -> str:
    """Whole amounts drop the decimal part: 150.0 -> '₹150', 12.5 -> '₹12.5'."""
    if float(amount).is_integer():
        return f"{symbol}{int(amount)}"
    return f"{symbol}{amount!r}"
