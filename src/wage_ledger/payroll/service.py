from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.resolver import ShiftFractionResolver
from ..common.validators import to_money
from ..workers.model import Worker


@dataclass(frozen=True)
class LaborReport:
    rows: list[dict]
    summary: list[dict]


class WageReportService:
    """Per-worker labor value over a date range.

    Uses the same resolver as the ledger so both views cost a day identically.
    """

    def __init__(self, *, resolver: Optional[ShiftFractionResolver] = None):
        self._resolver = resolver or ShiftFractionResolver()

    def build_labor_report(
        self,
        *,
        start: date,
        end: date,
        attendance: Iterable[AttendanceRecord],
        workers: Iterable[Worker],
        team_id: Optional[str] = None,
    ) -> LaborReport:
        by_id = {w.worker_id: w for w in workers if team_id is None or w.team_id == team_id}

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in sorted(attendance, key=lambda x: (x.work_date, x.worker_id)):
            if not (start <= r.work_date <= end):
                continue
            worker = by_id.get(r.worker_id)
            if worker is None:
                continue

            shifts = self._resolver.resolve(r)
            cost = to_money(shifts) * worker.daily_wage

            out_rows.append(
                {
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "worker_id": worker.worker_id,
                    "name": worker.name or worker.worker_id,
                    "team_id": worker.team_id,
                    "shifts": shifts,
                    "cost": cost,
                }
            )

            s = summary_map.get(worker.worker_id)
            if not s:
                s = {
                    "worker_id": worker.worker_id,
                    "name": worker.name or worker.worker_id,
                    "daily_wage": worker.daily_wage,
                    "total_shifts": 0.0,
                    "total_earned": Decimal("0"),
                }
                summary_map[worker.worker_id] = s
            s["total_shifts"] += shifts
            s["total_earned"] += cost

        summary = list(summary_map.values())
        summary.sort(key=lambda x: (-x["total_earned"], x["worker_id"]))
        return LaborReport(rows=out_rows, summary=summary)
