"""US-English display forms for dates and timestamps."""

from __future__ import annotations

from datetime import date, datetime

__all__ = ["format_display_date", "format_display_datetime"]


def format_display_date(value: date) -> str:
    """Return ``M/D/YYYY`` without zero padding, e.g. ``3/1/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def format_display_datetime(value: datetime) -> str:
    """Return the long form ``M/D/YYYY, H:MM:SS AM``.

    The timestamp is rendered in its own timezone; no conversion happens.
    """
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{format_display_date(value.date())}, "
        f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
    )
