"""Interactive text menu for the ledger.

Usage::

    bank-ledger
    bank-ledger --demo-accounts 5 --seed 42
    python -m bank_ledger.cli --log-level INFO
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, TextIO

from bank_ledger.config import LOG_FORMATS, LedgerConfig
from bank_ledger.exceptions import InvalidAccountKindError, InvalidAmountError, LedgerError
from bank_ledger.formatting import format_account, format_account_brief, format_amount
from bank_ledger.generators.demo import DemoAccountGenerator
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.models import Account, AccountKind, WithdrawalResult
from bank_ledger.store.registry import AccountRegistry

logger = get_logger(__name__)

MENU = """
--- MENU ---
1. Create new account (Savings or Current)
2. Deposit
3. Withdraw
4. Show transaction details for an account
5. Show account information
6. List all accounts (brief)
0. Exit"""


class BankMenu:
    """Menu loop driving an ``AccountRegistry`` from line-based input.

    Parameters
    ----------
    registry : AccountRegistry
        Registry the menu operates on.
    stdin : TextIO
        Source of user input.
    stdout : TextIO
        Destination for prompts and results.
    """

    def __init__(
        self,
        registry: AccountRegistry,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
    ) -> None:
        self.registry = registry
        self.stdin = stdin
        self.stdout = stdout
        self.actions: dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: self.deposit,
            3: self.withdraw,
            4: self.show_transactions,
            5: self.show_account,
            6: self.list_accounts,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        self._print("Welcome to the Simple Bank Ledger")
        try:
            while True:
                self._print(MENU)
                choice = self._read_int("Choose an option: ")
                if choice == 0:
                    break
                action = self.actions.get(choice)
                if action is None:
                    self._print("Invalid option. Try again.")
                    continue
                action()
        except EOFError:
            logger.debug("Input closed, leaving menu")
        self._print("Goodbye!")

    def create_account(self) -> None:
        self._print("\n--- Create Account ---")
        name = self._read_line("Account holder's name: ")
        if not name:
            self._print("Name cannot be empty.")
            return

        while True:
            tag = self._read_line("Account type (S for Savings / C for Current): ")
            try:
                kind = AccountKind.from_tag(tag)
                break
            except InvalidAccountKindError:
                continue

        account = self.registry.create_account(name, kind)
        self._print("Account created successfully!")
        self._print(format_account(account))

    def deposit(self) -> None:
        self._print("\n--- Deposit ---")
        account = self._prompt_account()
        if account is None:
            return

        amount = self._read_decimal("Enter deposit amount: ")
        try:
            account.deposit(amount)
        except InvalidAmountError as e:
            self._print(self._amount_message(amount, e))
            return

        self._print(f"Deposit successful. New balance: {format_amount(account.balance)}")
        self._print_last_transaction(account)

    def withdraw(self) -> None:
        self._print("\n--- Withdraw ---")
        account = self._prompt_account()
        if account is None:
            return

        amount = self._read_decimal("Enter withdrawal amount: ")
        try:
            result = account.withdraw(amount)
        except InvalidAmountError as e:
            self._print(self._amount_message(amount, e))
            return

        if result is WithdrawalResult.INSUFFICIENT_FUNDS:
            self._print("Withdrawal failed: insufficient funds.")
            return

        self._print(f"Withdrawal successful. New balance: {format_amount(account.balance)}")
        self._print_last_transaction(account)

    def show_transactions(self) -> None:
        self._print("\n--- Transaction History ---")
        account = self._prompt_account()
        if account is None:
            return

        history = account.transaction_history()
        if not history:
            self._print("No transactions yet for this account.")
            return
        self._print(f"Transactions for account {account.account_number}:")
        for transaction in history:
            self._print(str(transaction))

    def show_account(self) -> None:
        self._print("\n--- Account Information ---")
        account = self._prompt_account()
        if account is None:
            return
        self._print(format_account(account))

    def list_accounts(self) -> None:
        accounts = self.registry.list_all()
        if not accounts:
            self._print("No accounts yet.")
            return
        self._print("\nAll accounts (brief):")
        for account in accounts:
            self._print(format_account_brief(account))

    # Input helpers

    def _prompt_account(self) -> Account | None:
        number = self._read_line("Enter full account number (15 chars, e.g. 4003772xxxxxxxS/C): ")
        account = self.registry.find(number)
        if account is None:
            self._print("Account not found.")
        return account

    def _print_last_transaction(self, account: Account) -> None:
        self._print("Last transaction:")
        self._print(str(account.last_transaction()))

    @staticmethod
    def _amount_message(amount: Decimal, error: InvalidAmountError) -> str:
        if amount <= 0:
            return "Amount must be greater than zero."
        return f"{error}."

    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        while True:
            line = self._read_line(prompt)
            try:
                return int(line)
            except ValueError:
                self._print("Please enter a valid integer.")

    def _read_decimal(self, prompt: str) -> Decimal:
        while True:
            line = self._read_line(prompt)
            try:
                value = Decimal(line)
            except InvalidOperation:
                value = None
            if value is not None and value.is_finite():
                return value
            self._print("Please enter a valid number.")

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory bank ledger with a text menu")
    parser.add_argument("--seed", type=int, default=None, help="Seed for account number generation")
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: standard)",
    )
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=None,
        help="Number of demo accounts to create at startup (default: 0)",
    )
    parser.add_argument("--bank-prefix", default=None, help="Seven-digit account number prefix")
    return parser


def load_config(args: argparse.Namespace) -> LedgerConfig:
    """Build configuration from the environment, overridden by CLI flags."""
    config = LedgerConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.demo_accounts is not None:
        config.demo.accounts = args.demo_accounts
    if args.bank_prefix is not None:
        config.bank_prefix = args.bank_prefix
    config.validate()
    return config


def main(
    argv: list[str] | None = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except LedgerError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, format_type=config.log_format)
    registry = AccountRegistry.from_config(config)

    if config.demo.accounts:
        generator = DemoAccountGenerator(seed=config.seed, locale=config.demo.locale)
        generator.populate(registry, config.demo.accounts, config.demo.max_transactions)

    BankMenu(registry, stdin=stdin, stdout=stdout).run()
    logger.info("Session ended: %s", registry.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
