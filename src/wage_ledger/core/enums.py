from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the data layer."""

    PRESENT = "PRESENT"
    HALF_DAY = "HALF_DAY"
    ABSENT = "ABSENT"


class TransactionKind(str, Enum):
    """Direction of a ledger transaction.

    DEBIT increases what the team owes (cash advanced),
    CREDIT decreases it (settlement or labor earned).
    """

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class RunnerState(str, Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
