from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ...common.datetime_utils import at, whole_minutes
from ...core import constants as c
from .base import DutyPointCalculator, TimeWindow, WindowScore

DEFAULT_WINDOWS: tuple[TimeWindow, ...] = (
    TimeWindow("Early Morning", c.EARLY_MORNING_START, c.EARLY_MORNING_END, c.WINDOW_POINTS),
    TimeWindow("Morning", c.MORNING_START, c.MORNING_END, c.WINDOW_POINTS),
    # 13:00-14:00 lunch is not scored
    TimeWindow("Afternoon", c.AFTERNOON_START, c.AFTERNOON_END, c.WINDOW_POINTS),
)


class WindowedDutyPointCalculator(DutyPointCalculator):
    """Standard rule: each fixed daily window covered >= threshold earns its points.

    Windows are anchored to the calendar day of check-in, so a shift running
    past midnight is only measured against its first day. Coverage is counted
    in whole minutes and there is no partial credit below the threshold.
    """

    def __init__(
        self,
        windows: Sequence[TimeWindow] = DEFAULT_WINDOWS,
        *,
        threshold: float = c.DEFAULT_COVERAGE_THRESHOLD,
    ):
        self._windows = tuple(windows)
        self._threshold = float(threshold)

    @property
    def windows(self) -> tuple[TimeWindow, ...]:
        return self._windows

    def score(self, check_in: datetime, check_out: datetime) -> float:
        return sum(w.points for w in self.score_windows(check_in, check_out))

    def score_windows(self, check_in: datetime, check_out: datetime) -> list[WindowScore]:
        day = check_in.date()
        out: list[WindowScore] = []

        for window in self._windows:
            win_start = at(day, window.start, check_in.tzinfo)
            win_end = at(day, window.end, check_in.tzinfo)
            win_minutes = whole_minutes(win_start, win_end)

            overlap_start = max(check_in, win_start)
            overlap_end = min(check_out, win_end)

            coverage = 0.0
            if overlap_end > overlap_start and win_minutes > 0:
                coverage = whole_minutes(overlap_start, overlap_end) / win_minutes

            points = window.points if coverage >= self._threshold else 0.0
            out.append(WindowScore(name=window.name, coverage=coverage, points=points))

        return out


_default_calculator = WindowedDutyPointCalculator()


def score(check_in: datetime, check_out: datetime) -> float:
    """Duty points for one interval against the standard windows."""
    return _default_calculator.score(check_in, check_out)
