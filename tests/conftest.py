from __future__ import annotations

import itertools
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from wage_ledger.attendance.model import AttendanceRecord
from wage_ledger.core.enums import AttendanceStatus, TransactionKind
from wage_ledger.ledger.model import ManualTransaction
from wage_ledger.workers.model import Worker

DAY = date(2026, 3, 2)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 8, 0, 0)


@pytest.fixture
def make_record():
    ids = itertools.count(1)

    def _make(
        *,
        worker_id: str = "w1",
        work_date: date = DAY,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        punch_in: Optional[datetime] = None,
        punch_out: Optional[datetime] = None,
        duty_points: Optional[float] = None,
        site_id: str = "site-1",
    ) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_id=f"a{next(ids)}",
            worker_id=worker_id,
            site_id=site_id,
            work_date=work_date,
            status=status,
            punch_in_time=punch_in,
            punch_out_time=punch_out,
            duty_points=duty_points,
        )

    return _make


@pytest.fixture
def make_tx():
    ids = itertools.count(1)

    def _make(
        *,
        amount,
        kind: TransactionKind = TransactionKind.DEBIT,
        tx_date: date = DAY,
        team_id: str = "t1",
        description: str = "",
        transaction_id: Optional[str] = None,
    ) -> ManualTransaction:
        return ManualTransaction(
            transaction_id=transaction_id or f"m{next(ids)}",
            team_id=team_id,
            tx_date=tx_date,
            amount=amount,
            kind=kind,
            description=description,
        )

    return _make


@pytest.fixture
def team_workers() -> list[Worker]:
    return [
        Worker(worker_id="w1", team_id="t1", daily_wage=Decimal("800"), name="Ravi"),
        Worker(worker_id="w2", team_id="t1", daily_wage=Decimal("600"), name="Anil"),
        Worker(worker_id="w3", team_id="t2", daily_wage=Decimal("700"), name="Suresh"),
    ]
