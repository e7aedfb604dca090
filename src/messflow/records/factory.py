from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import FieldMappingKind
from ..core.exceptions import ValidationError
from .mapping.base import FieldMapping
from .mapping.counts_mapping import CountsFieldMapping
from .mapping.positional_mapping import PositionalFieldMapping
from .mapping.scan_mapping import ScanFieldMapping


@dataclass
class FieldMappingFactory:
    """Factory Pattern: pick the field mapping named in configuration."""

    def for_kind(self, kind: Union[str, FieldMappingKind]) -> FieldMapping:
        try:
            resolved = FieldMappingKind(kind.strip().lower() if isinstance(kind, str) else kind)
        except ValueError as exc:
            raise ValidationError(f"Unknown field mapping: {kind}") from exc

        if resolved == FieldMappingKind.POSITIONAL:
            return PositionalFieldMapping()
        if resolved == FieldMappingKind.COUNTS:
            return CountsFieldMapping()
        return ScanFieldMapping()
