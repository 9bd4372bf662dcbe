"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class InvalidInputError(LedgerError):
    """Raised when caller-supplied input is malformed."""


class InvalidAmountError(InvalidInputError):
    """Raised when a deposit or withdrawal amount is not a positive money value."""


class InvalidNameError(InvalidInputError):
    """Raised when an account holder name is empty."""


class InvalidAccountKindError(InvalidInputError):
    """Raised when an account kind or kind tag is not recognised."""


class AccountNotFoundError(LedgerError):
    """Raised when a referenced account does not exist."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
