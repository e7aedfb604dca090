from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_PAGE_SIZE
from ..records.model import ScanRecord
from ..records.service import ScanRecordService
from .aggregations import peak_hours, summarize
from .export import export_to_csv, export_to_xlsx
from .filters import filter_records, paginate
from .model import AnalyticsSummary, HourlyStat, Page, RecordFilter


@dataclass(frozen=True)
class AnalyticsView:
    filters: RecordFilter
    records: list[ScanRecord]
    page: Page
    summary: AnalyticsSummary
    peak_hours: list[HourlyStat]


class AnalyticsService:
    def __init__(self, records: ScanRecordService, *, per_page: int = DEFAULT_PAGE_SIZE):
        self._records = records
        self._per_page = int(per_page)

    def filtered(self, filters: Optional[RecordFilter] = None) -> list[ScanRecord]:
        return filter_records(self._records.records(), filters or RecordFilter())

    def build_view(self, filters: Optional[RecordFilter] = None, *, page: int = 1) -> AnalyticsView:
        filters = filters or RecordFilter()
        matching = self.filtered(filters)
        return AnalyticsView(
            filters=filters,
            records=matching,
            page=paginate(matching, page, self._per_page),
            summary=summarize(matching),
            peak_hours=peak_hours(matching),
        )

    def export_csv(self, filters: Optional[RecordFilter] = None) -> str:
        return export_to_csv(self.filtered(filters))

    def export_xlsx(self, filters: Optional[RecordFilter] = None):
        return export_to_xlsx(self.filtered(filters))
