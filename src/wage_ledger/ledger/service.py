from __future__ import annotations

import logging
from datetime import date
from threading import Lock
from typing import Any, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.resolver import ShiftFractionResolver
from ..common.datetime_utils import trailing_window
from ..core.constants import DEFAULT_STATEMENT_DAYS
from ..core.enums import TransactionKind
from ..workers.model import Worker
from .aggregator import aggregate
from .model import LedgerStatement, ManualTransaction, MergedTransaction, require_manual
from .reconciliation import reconcile

logger = logging.getLogger(__name__)


class LedgerService:
    """Team cash ledger: manual transactions reconciled against labor earned.

    Snapshots are treated as immutable. The last statement is reused when the
    same snapshot objects and window are requested again.
    """

    def __init__(
        self,
        *,
        resolver: Optional[ShiftFractionResolver] = None,
        statement_days: int = DEFAULT_STATEMENT_DAYS,
    ):
        self._resolver = resolver or ShiftFractionResolver()
        self._statement_days = int(statement_days)
        self._cache_lock = Lock()
        # (inputs kept alive so their ids stay unique, key, statement)
        self._cache: Optional[tuple[tuple[Any, ...], tuple, LedgerStatement]] = None

    def build_statement(
        self,
        team_id: str,
        manual_transactions: Sequence[ManualTransaction],
        attendance: Sequence[AttendanceRecord],
        workers: Sequence[Worker],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> LedgerStatement:
        if start is None or end is None:
            default_start, default_end = trailing_window(self._statement_days, end=end)
            start = start or default_start
            end = end or default_end

        inputs = (manual_transactions, attendance, workers)
        key = (team_id, start, end, id(manual_transactions), id(attendance), id(workers))

        with self._cache_lock:
            if self._cache is not None and self._cache[1] == key:
                return self._cache[2]

        merged = aggregate(team_id, manual_transactions, attendance, workers, resolver=self._resolver)
        statement = reconcile(merged, start, end)
        logger.debug(
            "ledger team=%s %s..%s entries=%d closing=%s",
            team_id, start, end, len(statement.entries), statement.closing_balance,
        )

        with self._cache_lock:
            self._cache = (inputs, key, statement)
        return statement

    def editable_transaction(self, entry: MergedTransaction) -> ManualTransaction:
        return require_manual(entry)

    def to_rows(self, statement: LedgerStatement) -> list[dict]:
        """Display rows: opening balance, one row per entry, closing balance."""
        rows: list[dict] = [
            {
                "date": statement.start.strftime("%Y-%m-%d"),
                "description": "Opening Balance b/f",
                "debit": "",
                "credit": "",
                "balance": statement.opening_balance,
                "editable": False,
            }
        ]

        for e in statement.entries:
            tx = e.transaction
            rows.append(
                {
                    "date": tx.tx_date.strftime("%Y-%m-%d"),
                    "description": tx.description or "Payment",
                    "debit": tx.amount if tx.kind == TransactionKind.DEBIT else "",
                    "credit": tx.amount if tx.kind == TransactionKind.CREDIT else "",
                    "balance": e.running_balance,
                    "editable": e.is_manual,
                }
            )

        rows.append(
            {
                "date": statement.end.strftime("%Y-%m-%d"),
                "description": "Closing Balance",
                "debit": statement.total_debit,
                "credit": statement.total_credit,
                "balance": statement.closing_balance,
                "editable": False,
            }
        )
        return rows
