"""Ledger shapes.

A merged transaction is either a ``ManualEntry`` (wraps a persisted
``ManualTransaction`` and can be edited) or a ``LaborCredit`` (derived from
attendance, recomputed on every query, no identity).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Union

from ..common.validators import require_non_empty, require_positive
from ..core.constants import LABOR_DESCRIPTION, LABOR_SOURCE
from ..core.enums import TransactionKind
from ..core.exceptions import ImmutableEntryError

ZERO = Decimal("0")


@dataclass(frozen=True)
class ManualTransaction:
    """Cash advanced to a team (DEBIT) or a settlement received (CREDIT)."""

    transaction_id: str
    team_id: str
    tx_date: date
    amount: Decimal
    kind: TransactionKind
    description: str = ""

    def __post_init__(self):
        require_non_empty(self.transaction_id, "transaction_id")
        object.__setattr__(self, "amount", require_positive(self.amount, "amount"))
        object.__setattr__(self, "kind", TransactionKind(self.kind))


@dataclass(frozen=True)
class ManualEntry:
    ref: ManualTransaction

    @property
    def tx_date(self) -> date:
        return self.ref.tx_date

    @property
    def amount(self) -> Decimal:
        return self.ref.amount

    @property
    def kind(self) -> TransactionKind:
        return self.ref.kind

    @property
    def description(self) -> str:
        return self.ref.description


@dataclass(frozen=True)
class LaborCredit:
    """Labor value earned by a team on one date."""

    tx_date: date
    amount: Decimal
    kind: TransactionKind = field(default=TransactionKind.CREDIT, init=False)
    source: str = field(default=LABOR_SOURCE, init=False)
    description: str = field(default=LABOR_DESCRIPTION, init=False)


MergedTransaction = Union[ManualEntry, LaborCredit]


def signed_amount(tx: MergedTransaction) -> Decimal:
    """+amount for DEBIT, -amount for CREDIT."""
    return tx.amount if tx.kind == TransactionKind.DEBIT else -tx.amount


def require_manual(tx: MergedTransaction) -> ManualTransaction:
    """Return the persisted transaction behind an entry, refusing derived rows."""
    if isinstance(tx, ManualEntry):
        return tx.ref
    raise ImmutableEntryError(f"Labor credit for {tx.tx_date.isoformat()} is derived from attendance and cannot be edited")


@dataclass(frozen=True)
class LedgerEntry:
    transaction: MergedTransaction
    running_balance: Decimal

    @property
    def tx_date(self) -> date:
        return self.transaction.tx_date

    @property
    def is_manual(self) -> bool:
        return isinstance(self.transaction, ManualEntry)


@dataclass(frozen=True)
class LedgerStatement:
    start: date
    end: date
    entries: tuple[LedgerEntry, ...] = ()
    opening_balance: Decimal = ZERO
    closing_balance: Decimal = ZERO
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO
