from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def canonical_date(value) -> date:
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def to_date_key(value: str) -> str:
    """Canonical, delimiter-free key for an ISO date: '2024-01-20' -> '20240120'.

    Keys compare lexicographically in the same order as the dates they encode,
    which the realtime database relies on for key range queries.
    """
    return canonical_date(value).strftime("%Y%m%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_millis(moment: datetime) -> int:
    """Epoch milliseconds, the timestamp format used by realtime records."""
    return int(moment.timestamp() * 1000)
