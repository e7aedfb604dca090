from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.service import AnalyticsService
from .dashboard.service import DashboardService
from .records.factory import FieldMappingFactory
from .records.service import ScanRecordService
from .settings.service import SettingsService
from .telemetry.poller import FeedPoller
from .telemetry.repository import FeedSource
from .telemetry.thingspeak_client import ThingSpeakClient, ThingSpeakConfig
from .uploads.service import UploadService


@dataclass(frozen=True)
class Container:
    feed_source: FeedSource
    poller: FeedPoller

    record_service: ScanRecordService
    dashboard_service: DashboardService
    analytics_service: AnalyticsService
    upload_service: UploadService
    settings_service: SettingsService

    live_feed_refresh_seconds: int = 5


def build_container(*, settings, source: Optional[FeedSource] = None, dashboard_clock=None) -> Container:
    """Wire services from a settings module (or any object with the same attributes)."""
    if source is None:
        source = ThingSpeakClient(
            ThingSpeakConfig(
                base_url=str(getattr(settings, "THINGSPEAK_BASE_URL")),
                channel_id=str(getattr(settings, "THINGSPEAK_CHANNEL_ID")),
                api_key=str(getattr(settings, "THINGSPEAK_API_KEY")),
                timeout_seconds=float(getattr(settings, "THINGSPEAK_TIMEOUT_SECONDS", 10.0)),
            )
        )

    poller = FeedPoller(
        source,
        results=int(getattr(settings, "THINGSPEAK_RESULTS", 2)),
        interval_seconds=float(getattr(settings, "POLL_INTERVAL_SECONDS", 15.0)),
    )

    mapping = FieldMappingFactory().for_kind(getattr(settings, "FIELD_MAPPING", "scan"))
    record_service = ScanRecordService(poller, mapping=mapping, tz=str(getattr(settings, "TIMEZONE", "UTC")))

    dashboard_kwargs = {"clock": dashboard_clock} if dashboard_clock else {}

    return Container(
        feed_source=source,
        poller=poller,
        record_service=record_service,
        dashboard_service=DashboardService(record_service, **dashboard_kwargs),
        analytics_service=AnalyticsService(record_service),
        upload_service=UploadService(),
        settings_service=SettingsService(),
        live_feed_refresh_seconds=int(getattr(settings, "LIVE_FEED_REFRESH_SECONDS", 5)),
    )
