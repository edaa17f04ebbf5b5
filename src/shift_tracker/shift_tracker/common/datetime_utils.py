from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import TIME_PLACEHOLDER


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _is_ascii_number(value: str) -> bool:
    return value.isascii() and value.isdecimal()


def time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Parse an ``HH:MM`` wall-clock string into minutes since midnight.

    Returns ``None`` for anything that is not a valid same-day time: missing
    value, no colon, non-numeric parts, or hour/minute out of range.
    """
    if not value or not isinstance(value, str):
        return None

    parts = value.strip().split(":")
    if len(parts) != 2:
        return None

    hours, minutes = parts
    # ASCII 0-9 only: isdigit() also accepts characters int() rejects ("²").
    if not _is_ascii_number(hours) or not _is_ascii_number(minutes):
        return None

    h, m = int(hours), int(minutes)
    if h > 23 or m > 59:
        return None
    return h * 60 + m


def minutes_to_time(minutes: Optional[int]) -> str:
    """Format minutes as ``HH:MM`` (``-HH:MM`` when negative).

    Hours are not wrapped at 24, so a projected exit past midnight reads "24:10".
    """
    if minutes is None:
        return TIME_PLACEHOLDER

    sign = "-" if minutes < 0 else ""
    total = abs(int(minutes))
    return f"{sign}{total // 60:02d}:{total % 60:02d}"


def current_clock_minutes(now: Optional[datetime] = None) -> int:
    """Minutes since midnight for ``now`` (defaults to the local wall clock)."""
    now = now or now_local()
    return now.hour * 60 + now.minute
