from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..core.exceptions import TelemetryError
from .model import TelemetrySnapshot
from .repository import FeedSource

logger = logging.getLogger(__name__)


class FeedPoller:
    """Scheduled refetch of the channel feed.

    One background thread fetches immediately and then every ``interval_seconds``
    until :meth:`stop`. A refetch that fires while another one is still running
    is skipped, so responses never race each other. Readers only ever see an
    immutable :class:`TelemetrySnapshot`; a failed fetch keeps the previous feeds
    and only updates ``error``.
    """

    def __init__(
        self,
        source: FeedSource,
        *,
        results: int = 2,
        interval_seconds: float = 15.0,
        clock: Callable = now_utc,
    ):
        self._source = source
        self._results = int(results)
        self._interval = float(interval_seconds)
        self._clock = clock

        self._snapshot = TelemetrySnapshot()
        self._state_lock = threading.Lock()
        self._in_flight = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def snapshot(self) -> TelemetrySnapshot:
        with self._state_lock:
            return self._snapshot

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="messflow-feed-poller", daemon=True)
        self._thread.start()
        logger.info("feed poller started (every %.0fs, %d results)", self._interval, self._results)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logger.info("feed poller stopped")

    def refetch(self) -> bool:
        """Fetch once. Returns False if a fetch was already in flight."""
        if not self._in_flight.acquire(blocking=False):
            logger.debug("refetch skipped: previous fetch still in flight")
            return False
        try:
            self._update(loading=True, error=None)
            try:
                response = self._source.fetch_feeds(self._results)
                if not response.feeds:
                    raise TelemetryError("No feeds found in response")
            except TelemetryError as exc:
                logger.warning("ThingSpeak fetch error: %s", exc)
                self._update(loading=False, error=str(exc))
                return True

            feeds = tuple(response.feeds)
            self._update(
                latest=feeds[-1],
                feeds=feeds,
                loading=False,
                error=None,
                last_updated=self._clock(),
            )
            return True
        finally:
            self._in_flight.release()

    def _update(self, **changes) -> None:
        with self._state_lock:
            self._snapshot = replace(self._snapshot, **changes)

    def _run(self) -> None:
        self._safe_refetch()
        while not self._stop_event.wait(self._interval):
            self._safe_refetch()

    def _safe_refetch(self) -> None:
        try:
            self.refetch()
        except Exception:
            # Keep the schedule alive; the next tick retries.
            logger.exception("unexpected error while polling ThingSpeak")
            self._update(loading=False, error="Failed to fetch ThingSpeak data")
