"""Inference rules shared by every field mapping.

Bad or missing values fall back to defaults instead of raising, so one odd
sample never breaks the dashboard.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_time, parse_iso_date, to_zone, weekday_name
from ..common.parsing import clean_field
from ..core.constants import DEFAULT_MESS_HALL, MESS_HALLS, SUCCESS_MARKERS
from ..core.enums import MealTime, ScanStatus
from ..telemetry.model import FeedEntry
from .model import ScanRecord

# (first hour, end hour exclusive, meal)
MEAL_WINDOWS = (
    (7, 10, MealTime.BREAKFAST),
    (12, 15, MealTime.LUNCH),
    (16, 19, MealTime.SNACKS),
    (19, 22, MealTime.DINNER),
)

_TIME = re.compile(r"^(\d{1,2}):(\d{2})")


def meal_from_label(label: str) -> MealTime:
    text = label.lower()
    if "lunch" in text:
        return MealTime.LUNCH
    if "dinner" in text:
        return MealTime.DINNER
    if "snack" in text:
        return MealTime.SNACKS
    return MealTime.BREAKFAST


def meal_from_hour(hour: int) -> MealTime:
    for start, end, meal in MEAL_WINDOWS:
        if start <= hour < end:
            return meal
    # Gaps between services belong to the service before them.
    meal = MealTime.BREAKFAST
    for start, _end, window_meal in MEAL_WINDOWS:
        if hour >= start:
            meal = window_meal
    return meal


def resolve_hall(raw: Optional[str]) -> int:
    text = clean_field(raw)
    if text is None:
        return DEFAULT_MESS_HALL
    try:
        hall = int(float(text))
    except (ValueError, OverflowError):
        return DEFAULT_MESS_HALL
    return hall if hall in MESS_HALLS else DEFAULT_MESS_HALL


def resolve_status(raw: Optional[str]) -> ScanStatus:
    text = (clean_field(raw) or "").upper()
    if any(marker in text for marker in SUCCESS_MARKERS):
        return ScanStatus.SUCCESS
    return ScanStatus.PENDING


def normalize_time(raw: Optional[str]) -> Optional[str]:
    """``8:5``-style input is rejected; ``8:30`` / ``08:30:12`` become ``08:30``."""
    text = clean_field(raw)
    if text is None:
        return None
    match = _TIME.match(text)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return f"{hour:02d}:{minute:02d}"


def _explicit_date(raw: Optional[str]) -> Optional[date]:
    text = clean_field(raw)
    if text is None:
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def build_scan_record(
    entry: FeedEntry,
    *,
    record_id: str,
    uid: Optional[str],
    tz: str,
    status: Optional[str] = None,
    date_raw: Optional[str] = None,
    time_raw: Optional[str] = None,
    day_raw: Optional[str] = None,
    meal_raw: Optional[str] = None,
    hall_raw: Optional[str] = None,
    default_status: ScanStatus = ScanStatus.PENDING,
) -> Optional[ScanRecord]:
    uid = clean_field(uid)
    if uid is None:
        return None

    local: datetime = to_zone(entry.created_at, tz)
    day_value = _explicit_date(date_raw) or local.date()
    time_value = normalize_time(time_raw) or format_time(local)

    label = clean_field(meal_raw)
    if label is not None:
        meal = meal_from_label(label)
    else:
        meal = meal_from_hour(int(time_value[:2]))

    status_value = resolve_status(status) if clean_field(status) is not None else default_status

    return ScanRecord(
        id=record_id,
        uid=uid,
        date=format_date(day_value),
        day=clean_field(day_raw) or weekday_name(day_value),
        time=time_value,
        meal_time=meal,
        mess_hall_no=resolve_hall(hall_raw),
        status=status_value,
    )


def record_id_for(entry: FeedEntry, suffix: Optional[str] = None) -> str:
    base = str(entry.entry_id) if entry.entry_id is not None else entry.created_at.strftime("%Y%m%d%H%M%S")
    return f"{base}-{suffix}" if suffix else base
