from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calculator.windowed_calculator import WindowedDutyPointCalculator
from .attendance.repository import AttendanceSnapshot, AttendanceWriter
from .attendance.resolver import ShiftFractionResolver
from .attendance.service import AttendanceService
from .config import load_settings
from .ledger.service import LedgerService
from .logging_config import setup_logging
from .payroll.service import WageReportService
from .recalculation.service import RecalculationService, RefreshCallback


@dataclass(frozen=True)
class Container:
    calculator: WindowedDutyPointCalculator
    resolver: ShiftFractionResolver

    attendance_service: AttendanceService
    ledger_service: LedgerService
    wage_report_service: WageReportService

    def recalculation_service(
        self,
        snapshot: AttendanceSnapshot,
        writer: AttendanceWriter,
        *,
        refresh: Optional[RefreshCallback] = None,
    ) -> RecalculationService:
        return RecalculationService(snapshot, writer, calculator=self.calculator, refresh=refresh)


def build_container(*, settings=None, configure_logging: bool = False) -> Container:
    if settings is None:
        settings = load_settings()

    if configure_logging:
        setup_logging(
            level=getattr(settings, "LOG_LEVEL", "INFO"),
            json_output=bool(getattr(settings, "LOG_JSON", False)),
        )

    calculator = WindowedDutyPointCalculator(threshold=float(getattr(settings, "COVERAGE_THRESHOLD", 0.80)))
    resolver = ShiftFractionResolver(calculator)

    return Container(
        calculator=calculator,
        resolver=resolver,
        attendance_service=AttendanceService(resolver=resolver),
        ledger_service=LedgerService(resolver=resolver, statement_days=int(getattr(settings, "STATEMENT_DAYS", 14))),
        wage_report_service=WageReportService(resolver=resolver),
    )
