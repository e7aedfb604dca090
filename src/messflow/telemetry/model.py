from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_feed_timestamp

logger = logging.getLogger(__name__)

FIELD_NAMES = tuple(f"field{i}" for i in range(1, 9))
_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, OverflowError)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class FeedEntry:
    """One sample pushed to the channel by the mess reader."""

    created_at: datetime
    entry_id: Optional[int] = None
    field1: Optional[str] = None
    field2: Optional[str] = None
    field3: Optional[str] = None
    field4: Optional[str] = None
    field5: Optional[str] = None
    field6: Optional[str] = None
    field7: Optional[str] = None
    field8: Optional[str] = None

    def get_field(self, index: int) -> Optional[str]:
        return getattr(self, f"field{index}")

    @classmethod
    def from_dict(cls, payload: dict) -> "FeedEntry":
        entry_id = payload.get("entry_id")
        return cls(
            created_at=parse_feed_timestamp(str(payload["created_at"])),
            entry_id=int(entry_id) if entry_id is not None else None,
            **{name: _as_text(payload.get(name)) for name in FIELD_NAMES},
        )

    def to_dict(self) -> dict:
        data = {
            "created_at": self.created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "entry_id": self.entry_id,
        }
        data.update({name: getattr(self, name) for name in FIELD_NAMES})
        return data


@dataclass(frozen=True)
class ChannelInfo:
    channel_id: int
    name: str = ""
    description: str = ""
    field_labels: dict[str, str] = field(default_factory=dict)
    last_entry_id: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "ChannelInfo":
        labels = {name: str(payload[name]) for name in FIELD_NAMES if payload.get(name)}
        last = payload.get("last_entry_id")
        return cls(
            channel_id=int(payload.get("id") or 0),
            name=str(payload.get("name") or ""),
            description=str(payload.get("description") or ""),
            field_labels=labels,
            last_entry_id=int(last) if last is not None else None,
        )


@dataclass(frozen=True)
class FeedResponse:
    channel: ChannelInfo
    feeds: list[FeedEntry]

    @classmethod
    def from_dict(cls, payload: dict) -> "FeedResponse":
        feeds = []
        for item in payload.get("feeds") or []:
            try:
                feeds.append(FeedEntry.from_dict(item))
            except _DECODE_ERRORS as exc:
                logger.warning("skipping undecodable feed entry %r: %s", item, exc)
        try:
            channel = ChannelInfo.from_dict(payload.get("channel") or {})
        except _DECODE_ERRORS as exc:
            logger.warning("ignoring undecodable channel metadata: %s", exc)
            channel = ChannelInfo(channel_id=0)
        return cls(
            channel=channel,
            feeds=feeds,
        )


@dataclass(frozen=True)
class TelemetrySnapshot:
    """Read-model of the poller state handed to page controllers."""

    latest: Optional[FeedEntry] = None
    feeds: tuple[FeedEntry, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    last_updated: Optional[datetime] = None

    @property
    def has_data(self) -> bool:
        return bool(self.feeds)

    def to_dict(self) -> dict:
        return {
            "latest": self.latest.to_dict() if self.latest else None,
            "feeds": [f.to_dict() for f in self.feeds],
            "loading": self.loading,
            "error": self.error,
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
        }
