"""Conversion of legacy advance rows into typed manual transactions.

Older rows marked settlements with a ``[SETTLEMENT]`` tag inside the notes
text. The tag is read once here; everything downstream uses ``kind``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.validators import Number
from ..core.enums import TransactionKind
from .model import ManualTransaction

SETTLEMENT_MARKER = "[SETTLEMENT]"


def from_legacy_advance(
    *,
    transaction_id: str,
    team_id: str,
    tx_date: date,
    amount: Number,
    notes: Optional[str] = None,
) -> ManualTransaction:
    text = notes or ""
    is_settlement = SETTLEMENT_MARKER in text
    description = text.replace(SETTLEMENT_MARKER, "").strip()

    return ManualTransaction(
        transaction_id=transaction_id,
        team_id=team_id,
        tx_date=tx_date,
        amount=amount,
        kind=TransactionKind.CREDIT if is_settlement else TransactionKind.DEBIT,
        description=description,
    )
