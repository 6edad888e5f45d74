from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal

from wage_ledger.core.enums import AttendanceStatus
from wage_ledger.payroll.service import WageReportService

DAY = date(2026, 3, 2)


def at(hh: int, *, day: date = DAY) -> datetime:
    return datetime.combine(day, time(hh))


def test_report_totals_per_worker(make_record, team_workers):
    attendance = [
        make_record(worker_id="w1", punch_in=at(6), punch_out=at(18)),
        make_record(worker_id="w2", status=AttendanceStatus.HALF_DAY),
        make_record(worker_id="w1", work_date=DAY + timedelta(days=1)),
        make_record(worker_id="w2", work_date=DAY + timedelta(days=1), status=AttendanceStatus.ABSENT),
    ]

    report = WageReportService().build_labor_report(
        start=DAY, end=DAY + timedelta(days=6), attendance=attendance, workers=team_workers, team_id="t1"
    )

    assert [s["worker_id"] for s in report.summary] == ["w1", "w2"]
    assert report.summary[0]["total_shifts"] == 2.5
    assert report.summary[0]["total_earned"] == Decimal("2000")
    assert report.summary[1]["total_shifts"] == 0.5
    assert report.summary[1]["total_earned"] == Decimal("300")
    assert len(report.rows) == 4
    assert report.rows[0]["work_date"] == "2026-03-02"


def test_report_respects_date_range_and_team(make_record, team_workers):
    attendance = [
        make_record(worker_id="w1", work_date=DAY - timedelta(days=1)),
        make_record(worker_id="w3"),
        make_record(worker_id="w1"),
    ]

    report = WageReportService().build_labor_report(
        start=DAY, end=DAY, attendance=attendance, workers=team_workers, team_id="t1"
    )

    assert [r["worker_id"] for r in report.rows] == ["w1"]
    assert report.summary[0]["name"] == "Ravi"


def test_report_without_team_filter_covers_everyone(make_record, team_workers):
    attendance = [make_record(worker_id="w1"), make_record(worker_id="w3")]

    report = WageReportService().build_labor_report(start=DAY, end=DAY, attendance=attendance, workers=team_workers)

    assert {s["worker_id"] for s in report.summary} == {"w1", "w3"}
