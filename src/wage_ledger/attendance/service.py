from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .resolver import ShiftFractionResolver

_SYMBOLS = {
    0.0: "-",
    0.5: "/",
    1.0: "X",
    1.5: "X/",
    2.0: "X//",
}


def shift_symbol(points: float, record: Optional[AttendanceRecord] = None) -> str:
    """Register symbol for a day's duty points ('-' while a shift is still open)."""
    if record is not None and record.is_open_shift:
        return "-"
    symbol = _SYMBOLS.get(float(points))
    if symbol is not None:
        return symbol
    return f"{float(points):g}"


def status_label(record: Optional[AttendanceRecord], resolver: ShiftFractionResolver) -> str:
    if record is None:
        return "Absent"
    if record.is_open_shift:
        return "In Progress"
    if record.is_closed:
        points = resolver.resolve(record)
        if points >= 2:
            return "Double Shift"
        if points >= 1.5:
            return "Overtime"
        if points == 1:
            return "Present"
        if points == 0.5:
            return "Half Day"
    if record.status == AttendanceStatus.ABSENT:
        return "Absent"
    return "Unknown"


class AttendanceService:
    def __init__(self, *, resolver: Optional[ShiftFractionResolver] = None):
        self._resolver = resolver or ShiftFractionResolver()

    def open_shifts(self, records: Iterable[AttendanceRecord], *, as_of: date) -> list[AttendanceRecord]:
        """Missing punch-outs from days before `as_of`, oldest first."""
        pending = [r for r in records if r.is_open_shift and r.work_date < as_of]
        pending.sort(key=lambda r: (r.work_date, r.worker_id))
        return pending

    def history_ui(self, records: Iterable[AttendanceRecord], *, limit: int = 15) -> list[dict]:
        rows = sorted(records, key=lambda r: r.work_date, reverse=True)[:limit]
        return [self.to_ui(r) for r in rows]

    def to_ui(self, r: AttendanceRecord) -> dict:
        points = self._resolver.resolve(r)
        return {
            "date": r.work_date.strftime("%Y-%m-%d"),
            "worker_id": r.worker_id,
            "punch_in": r.punch_in_time.strftime("%H:%M") if r.punch_in_time else "-",
            "punch_out": r.punch_out_time.strftime("%H:%M") if r.punch_out_time else "-",
            "points": points,
            "symbol": shift_symbol(points, r),
            "label": status_label(r, self._resolver),
        }
