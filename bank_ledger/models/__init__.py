"""Domain models for the ledger."""

from bank_ledger.models.account import Account, to_amount
from bank_ledger.models.enums import AccountKind, TransactionKind, WithdrawalResult
from bank_ledger.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountKind",
    "Transaction",
    "TransactionKind",
    "WithdrawalResult",
    "to_amount",
]
