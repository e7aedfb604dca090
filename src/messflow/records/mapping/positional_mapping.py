from __future__ import annotations

from ...core.enums import FieldMappingKind
from ...telemetry.model import FeedEntry
from ..model import ScanRecord
from ..rules import build_scan_record, record_id_for
from .base import FieldMapping


class PositionalFieldMapping(FieldMapping):
    """Fields in upload-template column order:
    UID, Date, Day, Time, Meal_Time, Mess_Hall_No, then status in field7."""

    kind = FieldMappingKind.POSITIONAL.value

    def to_records(self, entry: FeedEntry, *, tz: str) -> list[ScanRecord]:
        record = build_scan_record(
            entry,
            record_id=record_id_for(entry),
            uid=entry.field1,
            tz=tz,
            date_raw=entry.field2,
            day_raw=entry.field3,
            time_raw=entry.field4,
            meal_raw=entry.field5,
            hall_raw=entry.field6,
            status=entry.field7,
        )
        return [record] if record else []
