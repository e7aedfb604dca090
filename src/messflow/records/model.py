from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import MealTime, ScanStatus


@dataclass(frozen=True)
class ScanRecord:
    """A single student scan at a mess hall, derived from one feed entry."""

    id: str
    uid: str
    date: str
    day: str
    time: str
    meal_time: MealTime
    mess_hall_no: int
    status: ScanStatus

    @property
    def hour(self) -> str:
        return self.time.split(":")[0]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "uid": self.uid,
            "date": self.date,
            "day": self.day,
            "time": self.time,
            "meal_time": self.meal_time.value,
            "mess_hall_no": self.mess_hall_no,
            "status": self.status.value,
        }
