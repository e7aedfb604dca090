import pytest

from messflow.core.exceptions import ValidationError
from messflow.settings.service import SettingsService


def test_defaults_match_mess_schedule():
    s = SettingsService().defaults()

    assert [(t.meal, t.start, t.end) for t in s.meal_timings] == [
        ("breakfast", "07:00", "09:30"),
        ("lunch", "12:00", "14:30"),
        ("snacks", "16:00", "18:00"),
        ("dinner", "19:00", "21:30"),
    ]
    assert [h.capacity for h in s.halls] == [3000, 2500, 1500]
    assert s.notifications.daily_report is False


def test_apply_form_reads_submitted_values():
    form = {
        "breakfast_start": "06:30",
        "breakfast_end": "09:00",
        "hall_2_name": "East Wing",
        "hall_2_capacity": "abc",
        "daily_report": "on",
    }

    s = SettingsService().apply_form(form)

    assert s.meal_timings[0].start == "06:30"
    assert s.meal_timings[1].start == "12:00"
    assert s.halls[1].name == "East Wing"
    assert s.halls[1].capacity == 0
    assert s.notifications.daily_report is True
    assert s.notifications.low_attendance is False


@pytest.mark.parametrize(
    "form",
    [
        {"lunch_start": "25:00"},
        {"dinner_start": "21:00", "dinner_end": "19:00"},
        {"hall_1_name": "   "},
    ],
)
def test_apply_form_rejects_invalid_values(form):
    with pytest.raises(ValidationError):
        SettingsService().apply_form(form)
