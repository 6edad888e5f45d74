from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from ..common.validators import require_in_range
from ..core.constants import MAX_DAILY_POINTS
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance at a site on one day."""

    attendance_id: str
    worker_id: str
    site_id: str
    work_date: date
    status: AttendanceStatus
    punch_in_time: Optional[datetime] = None
    punch_out_time: Optional[datetime] = None
    duty_points: Optional[float] = None

    def __post_init__(self):
        if self.duty_points is not None:
            require_in_range(self.duty_points, "duty_points", 0.0, MAX_DAILY_POINTS)

    @property
    def is_closed(self) -> bool:
        return self.punch_in_time is not None and self.punch_out_time is not None

    @property
    def is_open_shift(self) -> bool:
        """Punched in, not yet punched out."""
        return self.punch_in_time is not None and self.punch_out_time is None

    def with_duty_points(self, points: float) -> "AttendanceRecord":
        return replace(self, duty_points=points)
