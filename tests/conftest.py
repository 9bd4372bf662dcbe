"""Pytest configuration and fixtures."""

import random
from datetime import datetime

import pytest

from bank_ledger.generators.identifier import AccountNumberGenerator
from bank_ledger.models import Account, AccountKind
from bank_ledger.store.registry import AccountRegistry

FIXED_TIME = datetime(2024, 3, 15, 9, 30, 5)


class ScriptedRandom:
    """Random source returning a fixed sequence from ``randrange``."""

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        return self.values.pop(0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same moment."""
    return lambda: FIXED_TIME


@pytest.fixture
def registry(seed: int, fixed_clock) -> AccountRegistry:
    """Create a fresh registry for each test."""
    generator = AccountNumberGenerator(rng=random.Random(seed))
    return AccountRegistry(generator=generator, clock=fixed_clock)


@pytest.fixture
def account(fixed_clock) -> Account:
    """Create a sample savings account with no activity."""
    return Account(
        account_number="40037720001234S",
        holder_name="Alice",
        kind=AccountKind.SAVINGS,
        clock=fixed_clock,
    )
