"""Demo account generator for populating a fresh registry."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountKind

if TYPE_CHECKING:
    from bank_ledger.store.registry import AccountRegistry

logger = get_logger(__name__)


class DemoAccountGenerator(BaseGenerator):
    """Generate demo accounts with a short transaction history.

    Accounts are created through ``AccountRegistry.create_account`` and
    funded through ``deposit``/``withdraw``, so generated data obeys the
    same rules as interactive use:
    - SAVINGS: ~60% of accounts
    - CURRENT: ~40% of accounts
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.60, 0.40]

    def populate(
        self,
        registry: AccountRegistry,
        count: int,
        max_transactions: int = 5,
    ) -> list[Account]:
        """Create ``count`` demo accounts in ``registry``.

        Parameters
        ----------
        registry : AccountRegistry
            Registry receiving the accounts.
        count : int
            Number of accounts to create.
        max_transactions : int
            Upper bound on transactions applied to each account.

        Returns
        -------
        list[Account]
            The created accounts, in creation order.
        """
        accounts = []
        for _ in range(count):
            kind = self.rng.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
            account = registry.create_account(self.fake.name(), kind)
            self._apply_activity(account, self.rng.randint(0, max_transactions))
            accounts.append(account)

        logger.info("Seeded %d demo accounts", len(accounts))
        return accounts

    def _apply_activity(self, account: Account, num_transactions: int) -> None:
        """Apply deposits and withdrawals, opening with a deposit."""
        for i in range(num_transactions):
            amount = Decimal(self.rng.randint(100, 500_000)) / 100
            if i == 0 or self.rng.random() < 0.6:
                account.deposit(amount)
            else:
                # Refused withdrawals are part of realistic activity
                account.withdraw(amount)
