from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from ..core.enums import TransactionKind
from .model import (
    ZERO,
    LedgerEntry,
    LedgerStatement,
    ManualEntry,
    MergedTransaction,
    signed_amount,
)


def chronological_key(tx: MergedTransaction) -> tuple:
    """Date first; on the same date manual entries precede the labor credit.

    Manual entries sharing a date are ordered by transaction id, so the result
    never depends on input order.
    """
    if isinstance(tx, ManualEntry):
        return (tx.tx_date, 0, str(tx.ref.transaction_id))
    return (tx.tx_date, 1, "")


def reconcile(transactions: Iterable[MergedTransaction], start: date, end: date) -> LedgerStatement:
    ordered = sorted(transactions, key=chronological_key)

    opening = sum((signed_amount(t) for t in ordered if t.tx_date < start), ZERO)
    within = [t for t in ordered if start <= t.tx_date <= end]

    running = opening
    entries: list[LedgerEntry] = []
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO

    for tx in within:
        running += signed_amount(tx)
        entries.append(LedgerEntry(transaction=tx, running_balance=running))
        if tx.kind == TransactionKind.DEBIT:
            total_debit += tx.amount
        else:
            total_credit += tx.amount

    return LedgerStatement(
        start=start,
        end=end,
        entries=tuple(entries),
        opening_balance=opening,
        closing_balance=running,
        total_debit=total_debit,
        total_credit=total_credit,
    )
