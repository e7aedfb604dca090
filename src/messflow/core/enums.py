from __future__ import annotations

from enum import Enum


class MealTime(str, Enum):
    """Meal service a scan is attributed to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACKS = "Snacks"


class ScanStatus(str, Enum):
    """Outcome reported by the reader for a scan."""

    SUCCESS = "success"
    PENDING = "pending"


class FieldMappingKind(str, Enum):
    """How the channel's field1..field8 are interpreted."""

    SCAN = "scan"
    POSITIONAL = "positional"
    COUNTS = "counts"
