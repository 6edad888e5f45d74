from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.resolver import ShiftFractionResolver
from ..common.validators import to_money
from ..workers.model import Worker
from .model import LaborCredit, ManualEntry, ManualTransaction, MergedTransaction


def labor_cost_by_date(
    team_id: str,
    attendance: Iterable[AttendanceRecord],
    workers: Iterable[Worker],
    *,
    resolver: Optional[ShiftFractionResolver] = None,
) -> dict[date, Decimal]:
    """Sum of shift fraction x daily wage per date for one team's workers.

    Records of workers absent from the snapshot contribute nothing.
    """
    resolver = resolver or ShiftFractionResolver()
    team_workers = {w.worker_id: w for w in workers if w.team_id == team_id}

    buckets: dict[date, Decimal] = defaultdict(Decimal)
    for record in attendance:
        worker = team_workers.get(record.worker_id)
        if worker is None:
            continue

        fraction = resolver.resolve(record)
        if fraction <= 0:
            continue

        buckets[record.work_date] += to_money(fraction) * worker.daily_wage

    return {d: total for d, total in buckets.items() if total > 0}


def aggregate(
    team_id: str,
    manual_transactions: Iterable[ManualTransaction],
    attendance: Iterable[AttendanceRecord],
    workers: Iterable[Worker],
    *,
    resolver: Optional[ShiftFractionResolver] = None,
) -> list[MergedTransaction]:
    """Manual transactions of the team plus one labor credit per worked date.

    Order is unspecified; sorting belongs to reconcile().
    """
    merged: list[MergedTransaction] = [ManualEntry(t) for t in manual_transactions if t.team_id == team_id]

    costs = labor_cost_by_date(team_id, attendance, workers, resolver=resolver)
    merged.extend(LaborCredit(tx_date=d, amount=amount) for d, amount in costs.items())
    return merged
