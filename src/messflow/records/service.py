from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_RECENT_SCANS
from ..telemetry.model import FeedEntry, TelemetrySnapshot
from ..telemetry.poller import FeedPoller
from .mapping.base import FieldMapping
from .mapping.scan_mapping import ScanFieldMapping
from .model import ScanRecord


def sort_records(records: Iterable[ScanRecord]) -> list[ScanRecord]:
    """Newest first: date descending, then time descending."""
    return sorted(records, key=lambda r: (r.date, r.time), reverse=True)


def feeds_to_scan_records(
    entries: Sequence[FeedEntry],
    *,
    mapping: Optional[FieldMapping] = None,
    tz: str = "UTC",
) -> list[ScanRecord]:
    """Normalize raw feed entries into scan records.

    Entries without a student identifier are dropped; the result is sorted
    newest first.
    """
    mapping = mapping or ScanFieldMapping()
    records: list[ScanRecord] = []
    for entry in entries:
        records.extend(mapping.to_records(entry, tz=tz))
    return sort_records(records)


class ScanRecordService:
    """Turns the poller's current snapshot into scan records on demand."""

    def __init__(self, poller: FeedPoller, *, mapping: Optional[FieldMapping] = None, tz: str = "UTC"):
        self._poller = poller
        self._mapping = mapping or ScanFieldMapping()
        self._tz = tz

    @property
    def mapping(self) -> FieldMapping:
        return self._mapping

    @property
    def tz(self) -> str:
        return self._tz

    def today(self) -> date:
        """Today in the zone records are dated in."""
        return today_local(self._tz)

    def snapshot(self) -> TelemetrySnapshot:
        return self._poller.snapshot()

    def refresh(self) -> bool:
        return self._poller.refetch()

    def records(self, snapshot: Optional[TelemetrySnapshot] = None) -> list[ScanRecord]:
        snapshot = snapshot or self._poller.snapshot()
        return feeds_to_scan_records(snapshot.feeds, mapping=self._mapping, tz=self._tz)

    def recent(self, limit: int = DEFAULT_RECENT_SCANS, snapshot: Optional[TelemetrySnapshot] = None) -> list[ScanRecord]:
        return self.records(snapshot)[:limit]
