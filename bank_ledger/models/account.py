"""Account model and money handling for the ledger."""

from datetime import datetime
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Any, Callable

from bank_ledger.exceptions import InvalidAmountError, InvalidNameError
from bank_ledger.formatting import format_account
from bank_ledger.logging import get_logger
from bank_ledger.models.enums import AccountKind, TransactionKind, WithdrawalResult
from bank_ledger.models.transaction import Transaction

logger = get_logger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_amount(value: Any) -> Decimal:
    """Coerce ``value`` to a positive money amount with cent precision.

    Parameters
    ----------
    value : Any
        Decimal, int, float or numeric string.

    Returns
    -------
    Decimal
        The amount quantized to two fractional digits.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number, is not greater than zero,
        or has sub-cent precision.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Not a valid amount: {value!r}") from None

    if not amount.is_finite():
        raise InvalidAmountError(f"Not a valid amount: {value!r}")
    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than zero")

    try:
        quantized = amount.quantize(CENT)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount out of range: {value!r}") from None
    if quantized != amount:
        raise InvalidAmountError("Amount must have at most two decimal places")
    return quantized


class Account:
    """Bank account holding a balance and its transaction log.

    The balance starts at zero and only changes through ``deposit`` and
    ``withdraw``; each change appends exactly one ``Transaction``.
    ``kind`` is a tag (savings or current) with no behavioral effect.
    Number, holder name and kind are fixed at creation.
    """

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        kind: AccountKind,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        name = holder_name.strip()
        if not name:
            raise InvalidNameError("Name cannot be empty")
        self._account_number = account_number
        self._holder_name = name
        self._kind = kind
        self.clock = clock
        self._balance = ZERO
        self._transactions: list[Transaction] = []

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def kind(self) -> AccountKind:
        return self._kind

    @property
    def balance(self) -> Decimal:
        return self._balance

    def current_balance(self) -> Decimal:
        """Return the current balance."""
        return self._balance

    def deposit(self, amount: Any) -> Transaction:
        """Add ``amount`` to the balance and record a deposit.

        Raises
        ------
        InvalidAmountError
            If the amount is not positive, or the new balance cannot be
            held to the cent; the account is left untouched.
        """
        value = to_amount(amount)
        self._balance = self._exact(lambda: self._balance + value)
        transaction = self._record(TransactionKind.DEPOSIT, value)
        logger.debug(
            "Deposit of %s to %s, balance %s",
            value,
            self._account_number,
            self._balance,
            extra={
                "account_number": self._account_number,
                "amount": value,
                "balance": self._balance,
            },
        )
        return transaction

    def withdraw(self, amount: Any) -> WithdrawalResult:
        """Take ``amount`` from the balance if funds allow.

        Returns
        -------
        WithdrawalResult
            ``COMPLETED`` when applied, ``INSUFFICIENT_FUNDS`` when the
            amount exceeds the balance (nothing changes in that case).

        Raises
        ------
        InvalidAmountError
            If the amount is not positive; the account is left untouched.
        """
        value = to_amount(amount)
        fields = {"account_number": self._account_number, "amount": value, "balance": self._balance}
        if value > self._balance:
            logger.info(
                "Withdrawal of %s from %s refused, balance %s",
                value,
                self._account_number,
                self._balance,
                extra=fields,
            )
            return WithdrawalResult.INSUFFICIENT_FUNDS

        self._balance = self._exact(lambda: self._balance - value)
        self._record(TransactionKind.WITHDRAWAL, value)
        fields["balance"] = self._balance
        logger.debug(
            "Withdrawal of %s from %s, balance %s",
            value,
            self._account_number,
            self._balance,
            extra=fields,
        )
        return WithdrawalResult.COMPLETED

    def last_transaction(self) -> Transaction | None:
        """Return the most recent transaction, or None if there are none."""
        if not self._transactions:
            return None
        return self._transactions[-1]

    def transaction_history(self) -> tuple[Transaction, ...]:
        """Return all transactions, oldest first."""
        return tuple(self._transactions)

    @staticmethod
    def _exact(compute: Callable[[], Decimal]) -> Decimal:
        # Balances must stay exact to the cent; rounding is an error.
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                return compute()
            except Inexact:
                raise InvalidAmountError("Resulting balance is too large to record exactly") from None

    def _record(self, kind: TransactionKind, amount: Decimal) -> Transaction:
        transaction = Transaction(
            account_number=self._account_number,
            kind=kind,
            amount=amount,
            balance_after=self._balance,
            timestamp=self.clock(),
        )
        self._transactions.append(transaction)
        return transaction

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, "
            f"holder_name={self._holder_name!r}, kind={self._kind!r}, balance={self._balance!r})"
        )

    def __str__(self) -> str:
        return format_account(self)
