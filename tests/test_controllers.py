from datetime import date

import pytest

from messflow.config import testing as testing_settings
from messflow.container import build_container
from messflow.core.exceptions import TelemetryError
from messflow.main import create_app
from messflow.telemetry.model import ChannelInfo, FeedEntry, FeedResponse


class FakeSource:
    def __init__(self, feeds=None, error=None):
        self.feeds = feeds or []
        self.error = error

    def fetch_feeds(self, results):
        if self.error:
            raise TelemetryError(self.error)
        return FeedResponse(channel=ChannelInfo(channel_id=1), feeds=self.feeds)


FEEDS = [
    FeedEntry.from_dict({"created_at": "2024-01-15T08:30:00Z", "entry_id": 1, "field1": "UID001", "field2": "GRANTED"}),
    FeedEntry.from_dict(
        {"created_at": "2024-01-15T12:30:00Z", "entry_id": 2, "field1": "UID002", "field2": "GRANTED", "field5": "Lunch", "field6": "2"}
    ),
]


def make_client(monkeypatch, source):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(settings=testing_settings, source=source, dashboard_clock=lambda: date(2024, 1, 15))
    app = create_app(container=container)
    return app.test_client(), container


@pytest.fixture
def client(monkeypatch):
    client, container = make_client(monkeypatch, FakeSource(FEEDS))
    container.poller.refetch()
    return client


def test_dashboard_renders_cards_and_feed(client):
    res = client.get("/")

    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Total Attendance Today" in body
    assert "UID002" in body


def test_dashboard_shows_retry_when_first_fetch_fails(monkeypatch):
    client, container = make_client(monkeypatch, FakeSource(error="HTTP error! status: 503"))
    container.poller.refetch()

    body = client.get("/").get_data(as_text=True)

    assert "Retry" in body
    assert "HTTP error! status: 503" in body


def test_manual_refresh_redirects_to_dashboard(monkeypatch):
    source = FakeSource(FEEDS)
    client, container = make_client(monkeypatch, source)

    res = client.post("/refresh")

    assert res.status_code == 302
    assert container.poller.snapshot().has_data


def test_api_feed_and_stats(client):
    feed = client.get("/api/feed").get_json()
    stats = client.get("/api/stats").get_json()

    assert feed["latest"]["field1"] == "UID002"
    assert feed["error"] is None
    assert stats["today"]["total"] == 2
    assert stats["today"]["lunch"] == 1
    assert sum(h["percentage"] for h in stats["halls"]) == 100


def test_recent_scans_search(client):
    rows = client.get("/api/recent-scans?q=lunch").get_json()["rows"]

    assert [r["uid"] for r in rows] == ["UID002"]


def test_chart_png(client):
    res = client.get("/charts/meals.png")

    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert client.get("/charts/nope.png").status_code == 404


def test_analytics_filters_and_export(client):
    page = client.get("/analytics?meal_type=Lunch")
    csv_res = client.get("/analytics/export.csv?meal_type=Breakfast")

    assert page.status_code == 200
    assert "UID002" in page.get_data(as_text=True)
    assert csv_res.mimetype == "text/csv"
    assert csv_res.get_data(as_text=True).split("\n") == [
        "UID,Date,Day,Time,Meal Time,Mess Hall No,Status",
        "UID001,2024-01-15,Monday,08:30,Breakfast,1,success",
    ]


def test_analytics_invalid_filter_is_flashed(client):
    res = client.get("/analytics?mess_hall=9")

    assert res.status_code == 200
    assert "Unknown mess hall" in res.get_data(as_text=True)


def test_analytics_xlsx_export(client):
    res = client.get("/analytics/export.xlsx")

    assert res.status_code == 200
    assert res.data[:2] == b"PK"


def test_upload_template_download(client):
    res = client.get("/upload/template.csv")

    assert res.get_data(as_text=True).startswith("UID,Date,Day,Time,Meal_Time,Mess_Hall_No")
    assert "mess-data-template.csv" in res.headers["Content-Disposition"]


def test_upload_rejects_non_csv(client):
    import io

    res = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"x"), "photo.png", "image/png")},
        content_type="multipart/form-data",
    )

    assert "Please upload a valid CSV file" in res.get_data(as_text=True)


def test_upload_acknowledges_csv(client):
    import io

    res = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"UID,Date\nUID1,2024-01-15\n"), "scans.csv", "text/csv")},
        content_type="multipart/form-data",
    )

    assert "scans.csv has been processed" in res.get_data(as_text=True)


def test_settings_save_and_reject(client):
    ok = client.post("/settings", data={"breakfast_start": "06:45"})
    bad = client.post("/settings", data={"lunch_start": "15:00", "lunch_end": "13:00"})

    assert "Settings saved successfully" in ok.get_data(as_text=True)
    assert 'value="06:45"' in ok.get_data(as_text=True)
    assert "Lunch must start before it ends" in bad.get_data(as_text=True)
