from __future__ import annotations

from ...common.parsing import parse_count
from ...core.enums import FieldMappingKind, MealTime, ScanStatus
from ...telemetry.model import FeedEntry
from ..model import ScanRecord
from ..rules import build_scan_record, record_id_for
from .base import FieldMapping

MEAL_FIELDS = (
    (1, MealTime.BREAKFAST),
    (2, MealTime.LUNCH),
    (3, MealTime.DINNER),
    (4, MealTime.SNACKS),
)
HALL_FIELDS = ((5, 1), (6, 2), (7, 3))

# Synthetic records produced from one entry, across all meal counters.
MAX_RECORDS_PER_ENTRY = 2000


class CountsFieldMapping(FieldMapping):
    """Each entry carries running counters instead of a single scan.

    field1..field4 are breakfast/lunch/dinner/snacks counts and field5..field7
    the per-hall counts. Every counted scan becomes one synthetic record; halls
    are handed out in order and any scan beyond the hall counters lands in the
    default hall. At most MAX_RECORDS_PER_ENTRY records come out of one entry,
    filled in meal order.
    """

    kind = FieldMappingKind.COUNTS.value

    def to_records(self, entry: FeedEntry, *, tz: str) -> list[ScanRecord]:
        halls: list[int] = []
        for index, hall in HALL_FIELDS:
            halls.extend([hall] * min(parse_count(entry.get_field(index)), MAX_RECORDS_PER_ENTRY - len(halls)))

        uid = f"AGG{entry.entry_id}" if entry.entry_id is not None else "AGG"
        records: list[ScanRecord] = []
        for index, meal in MEAL_FIELDS:
            count = min(parse_count(entry.get_field(index)), MAX_RECORDS_PER_ENTRY - len(records))
            for n in range(count):
                position = len(records)
                record = build_scan_record(
                    entry,
                    record_id=record_id_for(entry, f"{meal.value}-{n}"),
                    uid=uid,
                    tz=tz,
                    meal_raw=meal.value,
                    hall_raw=str(halls[position]) if position < len(halls) else None,
                    default_status=ScanStatus.SUCCESS,
                )
                if record:
                    records.append(record)
        return records
