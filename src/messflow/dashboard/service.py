from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Callable, Optional

from ..analytics.aggregations import (
    hall_distribution,
    hourly_data,
    meal_wise_data,
    percentage_change,
    recent_scans,
    today_stats,
    weekly_trend,
    yesterday_stats,
)
from ..analytics.model import DailyStat, HallStat, HourlyStat, MealCount, PercentageChange
from ..core.constants import DEFAULT_RECENT_SCANS
from ..records.model import ScanRecord
from ..records.service import ScanRecordService
from ..telemetry.model import TelemetrySnapshot


@dataclass(frozen=True)
class StatCard:
    title: str
    value: int
    trend: PercentageChange


@dataclass(frozen=True)
class DashboardData:
    snapshot: TelemetrySnapshot
    today: DailyStat
    yesterday: DailyStat
    cards: list[StatCard]
    meals: list[MealCount]
    hourly: list[HourlyStat]
    halls: list[HallStat]
    weekly: list[DailyStat]
    recent: list[ScanRecord]

    def to_dict(self) -> dict:
        return {
            "today": asdict(self.today),
            "yesterday": asdict(self.yesterday),
            "cards": [
                {"title": c.title, "value": c.value, "trend": asdict(c.trend)}
                for c in self.cards
            ],
            "meals": [asdict(m) for m in self.meals],
            "hourly": [asdict(h) for h in self.hourly],
            "halls": [asdict(h) for h in self.halls],
            "weekly": [asdict(w) for w in self.weekly],
            "loading": self.snapshot.loading,
            "error": self.snapshot.error,
        }


class DashboardService:
    def __init__(
        self,
        records: ScanRecordService,
        *,
        clock: Optional[Callable[[], date]] = None,
        recent_limit: int = DEFAULT_RECENT_SCANS,
    ):
        self._records = records
        self._clock = clock or records.today
        self._recent_limit = int(recent_limit)

    def build(self, *, today: Optional[date] = None) -> DashboardData:
        today = today or self._clock()
        snapshot = self._records.snapshot()
        records = self._records.records(snapshot)

        t = today_stats(records, today)
        y = yesterday_stats(records, today)
        cards = [
            StatCard("Total Attendance Today", t.total, percentage_change(t.total, y.total)),
            StatCard("Breakfast", t.breakfast, percentage_change(t.breakfast, y.breakfast)),
            StatCard("Lunch", t.lunch, percentage_change(t.lunch, y.lunch)),
            StatCard("Dinner", t.dinner, percentage_change(t.dinner, y.dinner)),
        ]

        return DashboardData(
            snapshot=snapshot,
            today=t,
            yesterday=y,
            cards=cards,
            meals=meal_wise_data(records, today),
            hourly=hourly_data(records, today),
            halls=hall_distribution(records, today),
            weekly=weekly_trend(records, today),
            recent=recent_scans(records, self._recent_limit),
        )
