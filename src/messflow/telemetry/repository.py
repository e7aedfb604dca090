from __future__ import annotations

from typing import Protocol

from .model import FeedResponse


class FeedSource(Protocol):
    def fetch_feeds(self, results: int) -> FeedResponse:
        """Return the latest ``results`` entries; raise TelemetryError on failure."""

        raise NotImplementedError
