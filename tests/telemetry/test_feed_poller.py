import threading
import time
from datetime import datetime, timezone

from messflow.core.exceptions import TelemetryError
from messflow.telemetry.model import ChannelInfo, FeedEntry, FeedResponse
from messflow.telemetry.poller import FeedPoller

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def response(*uids):
    feeds = [
        FeedEntry.from_dict({"created_at": "2024-01-15T12:30:00Z", "entry_id": i, "field1": uid})
        for i, uid in enumerate(uids, start=1)
    ]
    return FeedResponse(channel=ChannelInfo(channel_id=1), feeds=feeds)


class ScriptedSource:
    """Returns queued responses (or raises queued errors) in order."""

    def __init__(self, *outcomes):
        self._outcomes = list(outcomes)
        self._last = None
        self.calls = 0

    def fetch_feeds(self, results):
        self.calls += 1
        outcome = self._outcomes.pop(0) if self._outcomes else self._last
        self._last = outcome
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_initial_snapshot_is_loading_without_data():
    snap = FeedPoller(ScriptedSource()).snapshot()

    assert snap.loading is True
    assert snap.has_data is False
    assert snap.latest is None


def test_refetch_exposes_latest_and_window():
    poller = FeedPoller(ScriptedSource(response("A", "B")), clock=lambda: FIXED_NOW)

    assert poller.refetch() is True
    snap = poller.snapshot()

    assert snap.loading is False
    assert snap.error is None
    assert [f.field1 for f in snap.feeds] == ["A", "B"]
    assert snap.latest.field1 == "B"
    assert snap.last_updated == FIXED_NOW


def test_failure_keeps_previous_data():
    poller = FeedPoller(ScriptedSource(response("A"), TelemetryError("HTTP error! status: 500")))
    poller.refetch()

    poller.refetch()
    snap = poller.snapshot()

    assert snap.error == "HTTP error! status: 500"
    assert snap.loading is False
    assert [f.field1 for f in snap.feeds] == ["A"]


def test_empty_feed_is_an_error():
    poller = FeedPoller(ScriptedSource(FeedResponse(channel=ChannelInfo(channel_id=1), feeds=[])))

    poller.refetch()

    assert poller.snapshot().error == "No feeds found in response"


def test_success_clears_previous_error():
    poller = FeedPoller(ScriptedSource(TelemetryError("down"), response("A")))
    poller.refetch()

    poller.refetch()

    assert poller.snapshot().error is None


class BlockingSource:
    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def fetch_feeds(self, results):
        self.calls += 1
        self.started.set()
        self.release.wait(5)
        return response("A")


def test_overlapping_refetch_is_skipped():
    source = BlockingSource()
    poller = FeedPoller(source)
    worker = threading.Thread(target=poller.refetch)
    worker.start()
    assert source.started.wait(5)

    skipped = poller.refetch()
    source.release.set()
    worker.join(5)

    assert skipped is False
    assert source.calls == 1
    assert poller.snapshot().has_data


class CountingSource:
    def __init__(self, target):
        self.calls = 0
        self.reached = threading.Event()
        self._target = target

    def fetch_feeds(self, results):
        self.calls += 1
        if self.calls >= self._target:
            self.reached.set()
        return response("A")


def test_start_polls_until_stopped():
    source = CountingSource(target=3)
    poller = FeedPoller(source, interval_seconds=0.01)

    poller.start()
    assert source.reached.wait(5)
    poller.stop(timeout=5)
    calls_after_stop = source.calls
    time.sleep(0.05)

    assert poller.running is False
    assert poller.snapshot().has_data
    assert source.calls == calls_after_stop
