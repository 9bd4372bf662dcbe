"""Transaction model for the ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.formatting import format_transaction
from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """One balance-changing event on an account."""

    account_number: str
    kind: TransactionKind
    amount: Decimal  # magnitude moved, always positive
    balance_after: Decimal  # owning account's balance right after this event
    timestamp: datetime

    def __str__(self) -> str:
        return format_transaction(self)
