from __future__ import annotations

from ..common.parsing import parse_int_or_zero
from ..common.validators import require_hhmm, require_non_empty
from ..core.exceptions import ValidationError
from .model import HallConfig, MealTiming, MessSettings, NotificationPrefs

DEFAULT_MEAL_TIMINGS = (
    MealTiming("breakfast", "07:00", "09:30"),
    MealTiming("lunch", "12:00", "14:30"),
    MealTiming("snacks", "16:00", "18:00"),
    MealTiming("dinner", "19:00", "21:30"),
)

DEFAULT_HALLS = (
    HallConfig(1, "Main Hall", 3000),
    HallConfig(2, "North Wing", 2500),
    HallConfig(3, "South Wing", 1500),
)

_TRUTHY = {"on", "true", "1", "yes"}


class SettingsService:
    """Builds and validates the settings form; nothing is persisted."""

    def defaults(self) -> MessSettings:
        return MessSettings(
            meal_timings=DEFAULT_MEAL_TIMINGS,
            halls=DEFAULT_HALLS,
            notifications=NotificationPrefs(),
        )

    def apply_form(self, form) -> MessSettings:
        base = self.defaults()

        timings = []
        for t in base.meal_timings:
            label = t.meal.capitalize()
            start = require_hhmm(form.get(f"{t.meal}_start", t.start), f"{label} start")
            end = require_hhmm(form.get(f"{t.meal}_end", t.end), f"{label} end")
            if start >= end:
                raise ValidationError(f"{label} must start before it ends")
            timings.append(MealTiming(t.meal, start, end))

        halls = []
        for h in base.halls:
            name = require_non_empty(form.get(f"hall_{h.hall_id}_name", h.name), f"Hall {h.hall_id} name")
            capacity = max(parse_int_or_zero(form.get(f"hall_{h.hall_id}_capacity", h.capacity)), 0)
            halls.append(HallConfig(h.hall_id, name, capacity))

        notifications = NotificationPrefs(
            low_attendance=self._flag(form, "low_attendance"),
            unusual_activity=self._flag(form, "unusual_activity"),
            daily_report=self._flag(form, "daily_report"),
        )
        return MessSettings(meal_timings=tuple(timings), halls=tuple(halls), notifications=notifications)

    @staticmethod
    def _flag(form, key: str) -> bool:
        return str(form.get(key, "")).strip().lower() in _TRUTHY
