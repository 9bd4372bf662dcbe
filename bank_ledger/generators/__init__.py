"""Account number and demo data generators."""

from bank_ledger.generators.demo import DemoAccountGenerator
from bank_ledger.generators.identifier import AccountNumberGenerator

__all__ = ["AccountNumberGenerator", "DemoAccountGenerator"]
