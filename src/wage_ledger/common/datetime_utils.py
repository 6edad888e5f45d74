from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def at(day: date, moment: time, tz: Optional[tzinfo] = None) -> datetime:
    """Anchor a wall-clock time to a calendar day (in `tz` when given)."""
    return datetime.combine(day, moment, tzinfo=tz)


def whole_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between two instants, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def trailing_window(days: int, *, end: Optional[date] = None) -> tuple[date, date]:
    """Inclusive [start, end] range covering the last `days` days."""
    end = end or today_local()
    return end - timedelta(days=max(int(days), 1) - 1), end
