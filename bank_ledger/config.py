"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import LOG_LEVELS

DEFAULT_BANK_PREFIX = "4003772"
LOG_FORMATS = ("standard", "json")


def is_valid_prefix(prefix: str) -> bool:
    """Return True for a bank prefix of exactly seven ASCII digits."""
    return len(prefix) == 7 and prefix.isascii() and prefix.isdigit()


@dataclass
class DemoConfig:
    """Demo account seeding configuration."""

    accounts: int = 0
    locale: str = "en_US"
    max_transactions: int = 5


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    bank_prefix: str = DEFAULT_BANK_PREFIX
    seed: int | None = None
    log_level: str = "WARNING"
    log_format: str = "standard"
    demo: DemoConfig = field(default_factory=DemoConfig)

    def validate(self) -> None:
        """Check the configuration for values the ledger cannot run with.

        Raises
        ------
        ConfigurationError
            If any value is invalid.
        """
        if not is_valid_prefix(self.bank_prefix):
            raise ConfigurationError(f"Bank prefix must be 7 digits, got {self.bank_prefix!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format!r}")
        if self.demo.accounts < 0:
            raise ConfigurationError("Demo account count cannot be negative")
        if self.demo.max_transactions < 0:
            raise ConfigurationError("Demo transaction count cannot be negative")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        demo = DemoConfig(
            accounts=_int_env("DEMO_ACCOUNTS", 0),
            locale=os.getenv("DEMO_LOCALE", "en_US"),
            max_transactions=_int_env("DEMO_MAX_TRANSACTIONS", 5),
        )

        return cls(
            bank_prefix=os.getenv("BANK_PREFIX", DEFAULT_BANK_PREFIX),
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            demo=demo,
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
