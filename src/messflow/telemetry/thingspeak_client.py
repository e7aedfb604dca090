from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from ..core.exceptions import TelemetryError
from .model import FeedResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThingSpeakConfig:
    base_url: str
    channel_id: str
    api_key: str
    timeout_seconds: float = 10.0


class ThingSpeakClient:
    """Reads channel feeds from the ThingSpeak REST API."""

    def __init__(self, config: ThingSpeakConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def feeds_url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/channels/{self._config.channel_id}/feeds.json"

    def fetch_feeds(self, results: int) -> FeedResponse:
        params = {"api_key": self._config.api_key, "results": int(results)}
        try:
            response = self._session.get(self.feeds_url, params=params, timeout=self._config.timeout_seconds)
        except requests.RequestException as exc:
            raise TelemetryError(f"Failed to fetch ThingSpeak data: {exc}") from exc

        if not response.ok:
            raise TelemetryError(f"HTTP error! status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise TelemetryError("ThingSpeak returned an invalid JSON body") from exc

        if not isinstance(payload, dict):
            raise TelemetryError("ThingSpeak returned an unexpected payload")

        try:
            parsed = FeedResponse.from_dict(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise TelemetryError(f"ThingSpeak feed could not be decoded: {exc}") from exc

        logger.debug("fetched %d feed entries from channel %s", len(parsed.feeds), self._config.channel_id)
        return parsed
