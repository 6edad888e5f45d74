from datetime import date

import pytest

from wage_ledger.core.enums import TransactionKind
from wage_ledger.core.exceptions import ValidationError
from wage_ledger.ledger.migration import from_legacy_advance
from wage_ledger.ledger.model import ManualTransaction


def test_settlement_marker_becomes_credit():
    tx = from_legacy_advance(
        transaction_id="adv-1",
        team_id="t1",
        tx_date=date(2026, 2, 10),
        amount="1500",
        notes="[SETTLEMENT] paid back in cash",
    )

    assert tx.kind == TransactionKind.CREDIT
    assert tx.description == "paid back in cash"


def test_plain_notes_are_an_advance():
    tx = from_legacy_advance(transaction_id="adv-2", team_id="t1", tx_date=date(2026, 2, 11), amount=800, notes=None)

    assert tx.kind == TransactionKind.DEBIT
    assert tx.description == ""


@pytest.mark.parametrize("amount", [0, -10, "abc"])
def test_manual_transaction_requires_positive_amount(amount):
    with pytest.raises(ValidationError):
        ManualTransaction(
            transaction_id="x",
            team_id="t1",
            tx_date=date(2026, 2, 11),
            amount=amount,
            kind=TransactionKind.DEBIT,
        )


def test_kind_accepts_stored_string():
    tx = ManualTransaction(transaction_id="x", team_id="t1", tx_date=date(2026, 2, 11), amount=1, kind="CREDIT")
    assert tx.kind is TransactionKind.CREDIT
