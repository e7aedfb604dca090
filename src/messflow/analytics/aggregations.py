"""Pure aggregations over scan records.

Every function takes the full record set plus an optional reference day and
recomputes from scratch; nothing here is cached.
"""
from __future__ import annotations

import math
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_date, hour_label, today_local, weekday_abbr, yesterday_of
from ..core.constants import DEFAULT_RECENT_SCANS, DEFAULT_TREND_DAYS, MESS_HALLS, SERVICE_FIRST_HOUR, SERVICE_LAST_HOUR
from ..core.enums import MealTime, ScanStatus
from ..records.model import ScanRecord
from .model import AnalyticsSummary, DailyStat, HallStat, HourlyStat, MealCount, PercentageChange


def records_on(records: Iterable[ScanRecord], day: date) -> list[ScanRecord]:
    key = format_date(day)
    return [r for r in records if r.date == key]


def _meal_counts(records: Iterable[ScanRecord]) -> Counter:
    return Counter(r.meal_time for r in records)


def daily_stats(records: Sequence[ScanRecord], day: date, *, label: Optional[str] = None) -> DailyStat:
    day_records = records_on(records, day)
    counts = _meal_counts(day_records)
    return DailyStat(
        date=label if label is not None else format_date(day),
        total=len(day_records),
        breakfast=counts[MealTime.BREAKFAST],
        lunch=counts[MealTime.LUNCH],
        dinner=counts[MealTime.DINNER],
        snacks=counts[MealTime.SNACKS],
    )


def today_stats(records: Sequence[ScanRecord], today: Optional[date] = None) -> DailyStat:
    return daily_stats(records, today or today_local())


def yesterday_stats(records: Sequence[ScanRecord], today: Optional[date] = None) -> DailyStat:
    return daily_stats(records, yesterday_of(today or today_local()))


def meal_wise_data(records: Sequence[ScanRecord], today: Optional[date] = None) -> list[MealCount]:
    counts = _meal_counts(records_on(records, today or today_local()))
    return [MealCount(meal=m.value, count=counts[m]) for m in MealTime]


def hourly_data(records: Sequence[ScanRecord], today: Optional[date] = None) -> list[HourlyStat]:
    per_hour = Counter(r.hour for r in records_on(records, today or today_local()))
    return [
        HourlyStat(hour=hour_label(h), count=per_hour[f"{h:02d}"])
        for h in range(SERVICE_FIRST_HOUR, SERVICE_LAST_HOUR + 1)
    ]


def _split_percentages(counts: Sequence[int]) -> list[int]:
    """Largest-remainder rounding so the shares add up to exactly 100."""
    total = sum(counts)
    if total == 0:
        even = [100 // len(counts)] * len(counts)
        even[-1] += 100 - sum(even)
        return even

    exact = [c * 100 / total for c in counts]
    shares = [int(x) for x in exact]
    leftover = 100 - sum(shares)
    by_remainder = sorted(range(len(counts)), key=lambda i: (-(exact[i] - shares[i]), i))
    for i in by_remainder[:leftover]:
        shares[i] += 1
    return shares


def hall_distribution(records: Sequence[ScanRecord], today: Optional[date] = None) -> list[HallStat]:
    per_hall = Counter(r.mess_hall_no for r in records_on(records, today or today_local()))
    counts = [per_hall[h] for h in MESS_HALLS]
    shares = _split_percentages(counts)
    return [
        HallStat(hall=f"Hall {hall}", count=count, percentage=share)
        for hall, count, share in zip(MESS_HALLS, counts, shares)
    ]


def weekly_trend(
    records: Sequence[ScanRecord],
    today: Optional[date] = None,
    *,
    days: int = DEFAULT_TREND_DAYS,
) -> list[DailyStat]:
    today = today or today_local()
    out = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        out.append(daily_stats(records, day, label=weekday_abbr(day)))
    return out


def percentage_change(current: int, previous: int) -> PercentageChange:
    if previous == 0:
        return PercentageChange(value=0, is_positive=True)
    change = (current - previous) / previous * 100
    return PercentageChange(value=abs(_round_half_up(change)), is_positive=change >= 0)


def _round_half_up(value: float) -> int:
    # 2.5 -> 3, -2.5 -> -2
    return math.floor(value + 0.5)


def recent_scans(records: Sequence[ScanRecord], limit: int = DEFAULT_RECENT_SCANS) -> list[ScanRecord]:
    return list(records[:limit])


def peak_hours(records: Iterable[ScanRecord]) -> list[HourlyStat]:
    per_hour = Counter(r.hour for r in records)
    return [HourlyStat(hour=f"{h}:00", count=per_hour[h]) for h in sorted(per_hour, key=int)]


def summarize(records: Sequence[ScanRecord]) -> AnalyticsSummary:
    """Summary cards for the analytics page; ``records`` is newest first."""
    total = len(records)
    if not total:
        return AnalyticsSummary(total=0, unique_students=0, success_rate=0, date_range="N/A")

    successes = sum(1 for r in records if r.status == ScanStatus.SUCCESS)
    return AnalyticsSummary(
        total=total,
        unique_students=len({r.uid for r in records}),
        success_rate=_round_half_up(successes / total * 100),
        date_range=f"{records[-1].date[5:]} - {records[0].date[5:]}",
    )
