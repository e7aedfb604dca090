from collections import Counter

import pytest

from messflow.core.enums import MealTime, ScanStatus
from messflow.core.exceptions import ValidationError
from messflow.records.factory import FieldMappingFactory
from messflow.records.mapping.counts_mapping import MAX_RECORDS_PER_ENTRY, CountsFieldMapping
from messflow.records.mapping.positional_mapping import PositionalFieldMapping
from messflow.records.mapping.scan_mapping import ScanFieldMapping
from messflow.records.service import feeds_to_scan_records
from messflow.telemetry.model import FeedEntry


def test_factory_picks_mapping_by_name():
    factory = FieldMappingFactory()

    assert isinstance(factory.for_kind("scan"), ScanFieldMapping)
    assert isinstance(factory.for_kind(" Positional "), PositionalFieldMapping)
    assert isinstance(factory.for_kind("counts"), CountsFieldMapping)


def test_factory_rejects_unknown_mapping():
    with pytest.raises(ValidationError):
        FieldMappingFactory().for_kind("legacy")


def test_positional_mapping_follows_template_columns():
    feed = [
        FeedEntry.from_dict(
            {
                "created_at": "2024-01-15T23:59:00Z",
                "entry_id": 5,
                "field1": "UID0002",
                "field2": "2024-01-15",
                "field3": "Monday",
                "field4": "12:45",
                "field5": "Lunch",
                "field6": "2",
                "field7": "SUCCESS",
            }
        )
    ]

    r = feeds_to_scan_records(feed, mapping=PositionalFieldMapping())[0]

    assert (r.uid, r.date, r.day, r.time) == ("UID0002", "2024-01-15", "Monday", "12:45")
    assert r.meal_time == MealTime.LUNCH
    assert r.mess_hall_no == 2
    assert r.status == ScanStatus.SUCCESS


def test_counts_mapping_expands_counters():
    feed = [
        FeedEntry.from_dict(
            {
                "created_at": "2024-01-15T13:00:00Z",
                "entry_id": 9,
                "field1": "2",
                "field2": "1",
                "field3": "",
                "field4": "null",
                "field5": "1",
                "field6": "abc",
                "field7": "1",
            }
        )
    ]

    records = feeds_to_scan_records(feed, mapping=CountsFieldMapping())

    meals = sorted(r.meal_time.value for r in records)
    assert meals == ["Breakfast", "Breakfast", "Lunch"]
    assert sorted(r.mess_hall_no for r in records) == [1, 1, 3]
    assert all(r.status == ScanStatus.SUCCESS for r in records)
    assert len({r.id for r in records}) == 3


def test_counts_mapping_with_no_counts_yields_nothing():
    feed = [FeedEntry.from_dict({"created_at": "2024-01-15T13:00:00Z", "entry_id": 1})]

    assert feeds_to_scan_records(feed, mapping=CountsFieldMapping()) == []


def test_counts_mapping_caps_records_per_entry():
    feed = [
        FeedEntry.from_dict(
            {
                "created_at": "2024-01-15T13:00:00Z",
                "entry_id": 3,
                "field1": "1500",
                "field2": "1500",
                "field3": "1500",
                "field4": "1500",
                "field5": "9999",
            }
        )
    ]

    records = feeds_to_scan_records(feed, mapping=CountsFieldMapping())

    assert len(records) == MAX_RECORDS_PER_ENTRY
    meals = Counter(r.meal_time for r in records)
    assert meals[MealTime.BREAKFAST] == 1500
    assert meals[MealTime.LUNCH] == MAX_RECORDS_PER_ENTRY - 1500
    assert meals[MealTime.DINNER] == 0
    assert {r.mess_hall_no for r in records} == {1}
