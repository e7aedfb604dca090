from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..records.model import ScanRecord


@dataclass(frozen=True)
class DailyStat:
    date: str
    total: int = 0
    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0
    snacks: int = 0


@dataclass(frozen=True)
class MealCount:
    meal: str
    count: int


@dataclass(frozen=True)
class HourlyStat:
    hour: str
    count: int


@dataclass(frozen=True)
class HallStat:
    hall: str
    count: int
    percentage: int


@dataclass(frozen=True)
class PercentageChange:
    value: int
    is_positive: bool


@dataclass(frozen=True)
class AnalyticsSummary:
    total: int
    unique_students: int
    success_rate: int
    date_range: str


@dataclass(frozen=True)
class RecordFilter:
    """Analytics filters. ``None``, empty and ``"All"`` mean "no constraint"."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    meal_type: Optional[str] = None
    mess_hall: Optional[str] = None
    uid: Optional[str] = None


@dataclass(frozen=True)
class Page:
    items: list[ScanRecord] = field(default_factory=list)
    page: int = 1
    per_page: int = 20
    total: int = 0

    @property
    def total_pages(self) -> int:
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def first_index(self) -> int:
        return (self.page - 1) * self.per_page + 1 if self.total else 0

    @property
    def last_index(self) -> int:
        return min(self.page * self.per_page, self.total)
