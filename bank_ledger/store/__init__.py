"""In-memory stores for ledger entities."""

from bank_ledger.store.registry import AccountRegistry

__all__ = ["AccountRegistry"]
