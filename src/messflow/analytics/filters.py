from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_date
from ..common.validators import optional_hall, optional_iso_date, optional_meal
from ..core.constants import DEFAULT_PAGE_SIZE
from ..records.model import ScanRecord
from .model import Page, RecordFilter


def _active(value: Optional[str]) -> bool:
    return bool(value) and value != "All"


def filter_records(records: Iterable[ScanRecord], filters: RecordFilter) -> list[ScanRecord]:
    date_from = format_date(filters.date_from) if filters.date_from else None
    date_to = format_date(filters.date_to) if filters.date_to else None
    uid = filters.uid.lower() if filters.uid else None

    out = []
    for r in records:
        if date_from and r.date < date_from:
            continue
        if date_to and r.date > date_to:
            continue
        if _active(filters.meal_type) and r.meal_time.value != filters.meal_type:
            continue
        if _active(filters.mess_hall) and str(r.mess_hall_no) != str(filters.mess_hall).strip():
            continue
        if uid and uid not in r.uid.lower():
            continue
        out.append(r)
    return out


def search_records(records: Sequence[ScanRecord], term: Optional[str]) -> list[ScanRecord]:
    """Live-feed search: UID or meal (case-insensitive), or a time substring."""
    if not term:
        return list(records)
    needle = term.lower()
    return [
        r
        for r in records
        if needle in r.uid.lower() or needle in r.meal_time.value.lower() or term in r.time
    ]


def paginate(records: Sequence[ScanRecord], page: int = 1, per_page: int = DEFAULT_PAGE_SIZE) -> Page:
    total = len(records)
    last_page = max((total + per_page - 1) // per_page, 1)
    page = min(max(int(page), 1), last_page)
    start = (page - 1) * per_page
    return Page(items=list(records[start:start + per_page]), page=page, per_page=per_page, total=total)


def filter_from_args(args) -> RecordFilter:
    """Build a RecordFilter from request query args; raises ValidationError."""
    return RecordFilter(
        date_from=optional_iso_date(args.get("date_from"), "From date"),
        date_to=optional_iso_date(args.get("date_to"), "To date"),
        meal_type=optional_meal(args.get("meal_type")),
        mess_hall=optional_hall(args.get("mess_hall")),
        uid=(args.get("uid") or "").strip() or None,
    )
