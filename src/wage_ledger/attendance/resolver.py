from __future__ import annotations

from typing import Optional

from ..core.constants import HALF_DAY_POINTS, PRESENT_POINTS
from ..core.enums import AttendanceStatus
from .calculator.base import DutyPointCalculator
from .calculator.windowed_calculator import WindowedDutyPointCalculator
from .model import AttendanceRecord


class ShiftFractionResolver:
    """Pick the best available labor weight for one attendance record.

    Order: absent -> stored duty points -> punch-based score -> open shift (0)
    -> status default. Legacy records without punches still carry a weight,
    while punch-based records only count once punched out.
    """

    def __init__(self, calculator: Optional[DutyPointCalculator] = None):
        self._calculator = calculator or WindowedDutyPointCalculator()

    @property
    def calculator(self) -> DutyPointCalculator:
        return self._calculator

    def resolve(self, record: AttendanceRecord) -> float:
        if record.status == AttendanceStatus.ABSENT:
            return 0.0

        if record.duty_points is not None:
            return float(record.duty_points)

        if record.is_closed:
            return float(self._calculator.score(record.punch_in_time, record.punch_out_time))

        if record.is_open_shift:
            return 0.0

        return {
            AttendanceStatus.PRESENT: PRESENT_POINTS,
            AttendanceStatus.HALF_DAY: HALF_DAY_POINTS,
        }.get(record.status, 0.0)
