"""Bulk re-derivation of stored duty points.

Records are written one at a time through an injected persistence call; a
failed write is logged and skipped, never aborting the batch.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

from ..attendance.calculator.base import DutyPointCalculator
from ..attendance.calculator.windowed_calculator import WindowedDutyPointCalculator
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceSnapshot, AttendanceWriter
from ..core.enums import RunnerState
from ..core.exceptions import RecalculationInProgressError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
RefreshCallback = Callable[[], Union[None, Awaitable[None]]]
UpdateOne = Callable[[AttendanceRecord], Awaitable[Any]]
FetchRecords = Callable[[], Union[Iterable[AttendanceRecord], Awaitable[Iterable[AttendanceRecord]]]]


@dataclass(frozen=True)
class RecalculationResult:
    total: int
    updated: int
    failed_ids: tuple[str, ...] = ()

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


@dataclass(frozen=True)
class RecalculationStatus:
    state: RunnerState = RunnerState.IDLE
    done: int = 0
    total: int = 0


def eligible_records(records: Iterable[AttendanceRecord], start: date, end: date) -> list[AttendanceRecord]:
    """Closed shifts dated within [start, end], in date order."""
    picked = [r for r in records if start <= r.work_date <= end and r.is_closed]
    picked.sort(key=lambda r: (r.work_date, r.attendance_id))
    return picked


async def _resolve(value):
    if inspect.isawaitable(value):
        return await value
    return value


async def run_recalculation(
    start: date,
    end: date,
    *,
    fetch_records: FetchRecords,
    update_one: UpdateOne,
    on_progress: Optional[ProgressCallback] = None,
    refresh: Optional[RefreshCallback] = None,
    calculator: Optional[DutyPointCalculator] = None,
    on_start: Optional[Callable[[int], None]] = None,
) -> RecalculationResult:
    calculator = calculator or WindowedDutyPointCalculator()
    records = eligible_records(await _resolve(fetch_records()), start, end)
    total = len(records)

    if not records:
        logger.info("No closed shifts between %s and %s; nothing to recalculate", start, end)
        return RecalculationResult(total=0, updated=0)

    if on_start is not None:
        on_start(total)
    logger.info("Recalculating duty points for %d record(s) between %s and %s", total, start, end)

    failed: list[str] = []
    for i, record in enumerate(records):
        try:
            points = calculator.score(record.punch_in_time, record.punch_out_time)
            await update_one(record.with_duty_points(points))
        except Exception:
            logger.exception(
                "Failed to update duty points for attendance %s",
                record.attendance_id,
                extra={"record_id": record.attendance_id, "done": i + 1, "total": total},
            )
            failed.append(record.attendance_id)

        if on_progress is not None:
            on_progress(i + 1, total)

    if refresh is not None:
        await _resolve(refresh())

    result = RecalculationResult(total=total, updated=total - len(failed), failed_ids=tuple(failed))
    logger.info("Recalculation finished: %d updated, %d failed", result.updated, result.failed)
    return result


class RecalculationService:
    """Idle -> Running(done/total) -> Idle around run_recalculation().

    There is no cancellation token; cancelling the awaiting task stops the
    batch, skips the refresh and returns the service to Idle.
    """

    def __init__(
        self,
        snapshot: AttendanceSnapshot,
        writer: AttendanceWriter,
        *,
        calculator: Optional[DutyPointCalculator] = None,
        refresh: Optional[RefreshCallback] = None,
    ):
        self._snapshot = snapshot
        self._writer = writer
        self._calculator = calculator or WindowedDutyPointCalculator()
        self._refresh = refresh
        self._status = RecalculationStatus()

    @property
    def status(self) -> RecalculationStatus:
        return self._status

    async def run(self, start: date, end: date, *, on_progress: Optional[ProgressCallback] = None) -> RecalculationResult:
        if self._status.state == RunnerState.RUNNING:
            raise RecalculationInProgressError("A recalculation is already running")

        self._status = RecalculationStatus(state=RunnerState.RUNNING)

        def started(total: int) -> None:
            self._status = RecalculationStatus(state=RunnerState.RUNNING, total=total)

        def progress(done: int, total: int) -> None:
            self._status = RecalculationStatus(state=RunnerState.RUNNING, done=done, total=total)
            if on_progress is not None:
                on_progress(done, total)

        try:
            return await run_recalculation(
                start,
                end,
                fetch_records=self._snapshot.list_records,
                update_one=self._writer.update_one,
                on_progress=progress,
                refresh=self._refresh,
                calculator=self._calculator,
                on_start=started,
            )
        finally:
            self._status = RecalculationStatus()
