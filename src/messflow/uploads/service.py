from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import UPLOAD_MAX_BYTES, UPLOAD_TEMPLATE_CSV
from ..core.exceptions import ValidationError

CSV_CONTENT_TYPES = {"text/csv", "application/vnd.ms-excel", "application/csv"}


@dataclass(frozen=True)
class UploadReceipt:
    name: str
    size_kb: str


class UploadService:
    """Accepts a CSV upload for acknowledgement only.

    The file is checked for type and size; its contents are never parsed or
    stored.
    """

    def __init__(self, *, max_bytes: int = UPLOAD_MAX_BYTES):
        self._max_bytes = int(max_bytes)

    def accept(self, filename: Optional[str], content_type: Optional[str], size: int) -> UploadReceipt:
        if not filename:
            raise ValidationError("Please choose a CSV file to upload")

        is_csv_name = filename.lower().endswith(".csv")
        mimetype = (content_type or "").split(";")[0].strip().lower()
        if not is_csv_name or (mimetype and mimetype not in CSV_CONTENT_TYPES and mimetype != "application/octet-stream"):
            raise ValidationError("Please upload a valid CSV file")

        if size > self._max_bytes:
            raise ValidationError(f"File is too large (max {self._max_bytes // (1024 * 1024)}MB)")

        return UploadReceipt(name=filename, size_kb=f"{size / 1024:.2f}")

    def template_csv(self) -> str:
        return UPLOAD_TEMPLATE_CSV
