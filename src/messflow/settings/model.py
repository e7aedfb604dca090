from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MealTiming:
    meal: str
    start: str
    end: str


@dataclass(frozen=True)
class HallConfig:
    hall_id: int
    name: str
    capacity: int


@dataclass(frozen=True)
class NotificationPrefs:
    low_attendance: bool = True
    unusual_activity: bool = True
    daily_report: bool = False


@dataclass(frozen=True)
class MessSettings:
    """Settings form state. Lives only as long as the request that built it."""

    meal_timings: tuple[MealTiming, ...]
    halls: tuple[HallConfig, ...]
    notifications: NotificationPrefs
