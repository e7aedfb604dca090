from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_feed_timestamp(value: str) -> datetime:
    """Parse a ThingSpeak ``created_at`` value (``2024-01-15T12:30:00Z``) as aware UTC."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_zone(value: datetime, tz_name: str) -> datetime:
    return value.astimezone(ZoneInfo(tz_name))


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")


def weekday_name(value: date) -> str:
    return value.strftime("%A")


def weekday_abbr(value: date) -> str:
    return value.strftime("%a")


def hour_label(hour: int) -> str:
    """12-hour label used on the hourly chart (``7AM``, ``12PM``, ``9PM``)."""
    display = hour - 12 if hour > 12 else hour
    suffix = "PM" if hour >= 12 else "AM"
    return f"{display}{suffix}"


def today_local(tz_name: str = "UTC") -> date:
    """Current calendar date in ``tz_name``, the zone records are dated in.

    Kept as a function so tests can patch the clock.
    """
    return datetime.now(ZoneInfo(tz_name)).date()


def yesterday_of(day: date) -> date:
    return day - timedelta(days=1)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
