from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.constants import CSV_EXPORT_HEADER
from ..records.model import ScanRecord


def _row(r: ScanRecord) -> list:
    return [r.uid, r.date, r.day, r.time, r.meal_time.value, r.mess_hall_no, r.status.value]


def export_to_csv(records: Sequence[ScanRecord]) -> str:
    """Plain comma-joined CSV. Values are not quoted."""
    lines = [",".join(CSV_EXPORT_HEADER)]
    lines.extend(",".join(str(v) for v in _row(r)) for r in records)
    return "\n".join(lines)


def export_to_xlsx(records: Sequence[ScanRecord]) -> io.BytesIO:
    df = pd.DataFrame([_row(r) for r in records], columns=list(CSV_EXPORT_HEADER))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Scans")
    output.seek(0)
    return output
