"""Common clock helpers shared across models."""

from datetime import datetime
from zoneinfo import ZoneInfo

DISPLAY_TIMEZONE = "America/Chicago"


def zoned_now(tz_name: str = DISPLAY_TIMEZONE) -> datetime:
    return datetime.now(ZoneInfo(tz_name))


def locale_timestamp(dt: datetime) -> str:
    """Render a datetime the way en-US toLocaleString does.

    E.g. "10/19/2026, 5:27:03 AM". Meant for display, not parsing.
    """
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )


def display_now(tz_name: str = DISPLAY_TIMEZONE) -> str:
    return locale_timestamp(zoned_now(tz_name))
