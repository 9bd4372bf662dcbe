"""Text rendering of ledger values for the console."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bank_ledger.models.account import Account
    from bank_ledger.models.transaction import Transaction

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_amount(value: Decimal) -> str:
    """Render a money value with exactly two fractional digits."""
    return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS``."""
    return value.strftime(TIMESTAMP_FORMAT)


def format_transaction(transaction: Transaction) -> str:
    return (
        f"[{format_timestamp(transaction.timestamp)}] "
        f"{transaction.kind.value}: {format_amount(transaction.amount)} | "
        f"Balance after: {format_amount(transaction.balance_after)}"
    )


def format_account(account: Account) -> str:
    """Render the multi-line account information block."""
    return (
        f"Account Holder: {account.holder_name}\n"
        f"Account Number: {account.account_number}\n"
        f"Account Balance: {format_amount(account.balance)}"
    )


def format_account_brief(account: Account) -> str:
    return f"{account.holder_name} | {account.account_number} | {format_amount(account.balance)}"
