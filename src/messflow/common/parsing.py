from __future__ import annotations

from typing import Any, Optional

from ..core.constants import MISSING_MARKERS


def clean_field(value: Any) -> Optional[str]:
    """Return a stripped string, or None for empty / ``null``-like values."""
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in MISSING_MARKERS:
        return None
    return text


def parse_count(value: Any) -> int:
    """Parse a numeric-like feed field. Anything unusable becomes 0."""
    text = clean_field(value)
    if text is None:
        return 0
    try:
        number = float(text)
    except ValueError:
        return 0
    if number != number or number in (float("inf"), float("-inf")):
        return 0
    return max(int(number), 0)


def parse_int_or_zero(value: Any) -> int:
    text = clean_field(value)
    if text is None:
        return 0
    try:
        return int(text)
    except ValueError:
        return 0
