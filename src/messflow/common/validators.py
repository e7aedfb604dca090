from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.constants import MESS_HALLS
from ..core.enums import MealTime
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hhmm(value: str, field_name: str) -> str:
    value = (value or "").strip()
    if not _HHMM.match(value):
        raise ValidationError(f"{field_name} must be a time in HH:MM format")
    return value


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError as exc:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format") from exc


def optional_meal(value: Optional[str]) -> Optional[str]:
    if not value or value == "All":
        return None
    allowed = {m.value for m in MealTime}
    if value not in allowed:
        raise ValidationError(f"Unknown meal type: {value}")
    return value


def optional_hall(value: Optional[str]) -> Optional[str]:
    if not value or value == "All":
        return None
    try:
        hall = int(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown mess hall: {value}") from exc
    if hall not in MESS_HALLS:
        raise ValidationError(f"Unknown mess hall: {value}")
    return str(hall)
