"""Enumeration types for ledger entities."""

from enum import Enum

from bank_ledger.exceptions import InvalidAccountKindError


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"

    @property
    def tag(self) -> str:
        """One-character suffix used in account numbers."""
        return self.value[0]

    @classmethod
    def from_tag(cls, tag: str) -> "AccountKind":
        """Resolve a kind from its tag letter (case-insensitive).

        Raises
        ------
        InvalidAccountKindError
            If ``tag`` matches no kind.
        """
        normalized = tag.strip().upper()
        for kind in cls:
            if kind.tag == normalized:
                return kind
        raise InvalidAccountKindError(f"Unknown account kind tag: {tag!r}")


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class WithdrawalResult(str, Enum):
    COMPLETED = "COMPLETED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
