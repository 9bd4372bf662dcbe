"""In-memory account registry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import AccountNotFoundError, InvalidNameError
from bank_ledger.generators.identifier import AccountNumberGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountKind

logger = get_logger(__name__)


@dataclass
class AccountRegistry:
    """In-memory store of accounts keyed by account number."""

    generator: AccountNumberGenerator = field(default_factory=AccountNumberGenerator)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False)

    accounts: dict[str, Account] = field(default_factory=dict)

    # Every number handed out, consulted only when generating new ones
    _issued: set[str] = field(default_factory=set, repr=False)

    @classmethod
    def from_config(cls, config: LedgerConfig) -> "AccountRegistry":
        """Create an empty registry using the configured prefix and seed."""
        return cls(generator=AccountNumberGenerator(prefix=config.bank_prefix, seed=config.seed))

    def create_account(self, holder_name: str, kind: AccountKind | str) -> Account:
        """Open a new account with a zero balance.

        Parameters
        ----------
        holder_name : str
            Account holder's name; surrounding whitespace is dropped.
        kind : AccountKind | str
            Account kind, or its tag letter ("S" / "C").

        Returns
        -------
        Account
            The registered account.

        Raises
        ------
        InvalidNameError
            If the name is empty after trimming.
        InvalidAccountKindError
            If ``kind`` is not a known kind or tag.
        """
        name = holder_name.strip()
        if not name:
            raise InvalidNameError("Name cannot be empty")
        if not isinstance(kind, AccountKind):
            kind = AccountKind.from_tag(kind)

        account_number = self.generator.generate(kind, self._issued)
        account = Account(
            account_number=account_number,
            holder_name=name,
            kind=kind,
            clock=self.clock,
        )
        self.accounts[account_number] = account
        self._issued.add(account_number)

        logger.info(
            "Created %s account %s",
            kind.value.lower(),
            account_number,
            extra={"account_number": account_number, "kind": kind.value},
        )
        return account

    def find(self, account_number: str) -> Account | None:
        """Return the account with exactly this number, or None."""
        return self.accounts.get(account_number.strip())

    def get(self, account_number: str) -> Account:
        """Return the account with this number.

        Raises
        ------
        AccountNotFoundError
            If no such account exists.
        """
        account = self.find(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return account

    def list_all(self) -> list[Account]:
        """Return all accounts; order is not guaranteed."""
        return list(self.accounts.values())

    def summary(self) -> dict[str, int]:
        """Return account counts per kind and the total transaction count."""
        counts = {kind.value.lower(): 0 for kind in AccountKind}
        transactions = 0
        for account in self.accounts.values():
            counts[account.kind.value.lower()] += 1
            transactions += len(account.transaction_history())
        return {"accounts": len(self.accounts), **counts, "transactions": transactions}

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return isinstance(account_number, str) and self.find(account_number) is not None
