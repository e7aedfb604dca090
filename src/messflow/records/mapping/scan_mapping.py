from __future__ import annotations

from ...core.enums import FieldMappingKind
from ...telemetry.model import FeedEntry
from ..model import ScanRecord
from ..rules import build_scan_record, record_id_for
from .base import FieldMapping


class ScanFieldMapping(FieldMapping):
    """One scan per entry: field1 UID, field2 status, field3 date, field4 time,
    field5 meal label, field6 hall, field7 day."""

    kind = FieldMappingKind.SCAN.value

    def to_records(self, entry: FeedEntry, *, tz: str) -> list[ScanRecord]:
        record = build_scan_record(
            entry,
            record_id=record_id_for(entry),
            uid=entry.field1,
            tz=tz,
            status=entry.field2,
            date_raw=entry.field3,
            time_raw=entry.field4,
            meal_raw=entry.field5,
            hall_raw=entry.field6,
            day_raw=entry.field7,
        )
        return [record] if record else []
