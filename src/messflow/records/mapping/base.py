from __future__ import annotations

from abc import ABC, abstractmethod

from ...telemetry.model import FeedEntry
from ..model import ScanRecord


class FieldMapping(ABC):
    """Strategy Pattern: how a channel's positional fields become scan records."""

    kind: str = ""

    @abstractmethod
    def to_records(self, entry: FeedEntry, *, tz: str) -> list[ScanRecord]:
        raise NotImplementedError
