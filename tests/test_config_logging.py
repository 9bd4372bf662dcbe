"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from decimal import Decimal
from unittest.mock import patch

import pytest

from bank_ledger.config import DemoConfig, LedgerConfig
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import JsonFormatter, get_logger, setup_logging
from bank_ledger.models import Account, AccountKind
from bank_ledger.store.registry import AccountRegistry

ENV_VARS = [
    "BANK_PREFIX",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "DEMO_ACCOUNTS",
    "DEMO_LOCALE",
    "DEMO_MAX_TRANSACTIONS",
]


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in ENV_VARS}


class TestDemoConfig:
    """Tests for DemoConfig."""

    def test_default_values(self) -> None:
        config = DemoConfig()

        assert config.accounts == 0
        assert config.locale == "en_US"
        assert config.max_transactions == 5


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert config.bank_prefix == "4003772"
        assert config.seed is None
        assert config.log_level == "WARNING"
        assert config.log_format == "standard"
        assert isinstance(config.demo, DemoConfig)

    def test_defaults_are_valid(self) -> None:
        LedgerConfig().validate()

    @pytest.mark.parametrize(
        "prefix",
        ["400377", "40037721", "400377a", "", "\u0661\u0662\u0663\u0664\u0665\u0666\u0667"],
    )
    def test_invalid_prefix(self, prefix: str) -> None:
        with pytest.raises(ConfigurationError, match="prefix"):
            LedgerConfig(bank_prefix=prefix).validate()

    @pytest.mark.parametrize("level", ["basic_format", "verbose", ""])
    def test_invalid_log_level(self, level: str) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            LedgerConfig(log_level=level).validate()

    def test_log_level_is_case_insensitive(self) -> None:
        LedgerConfig(log_level="debug").validate()

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            LedgerConfig(log_format="xml").validate()

    def test_negative_demo_values(self) -> None:
        with pytest.raises(ConfigurationError):
            LedgerConfig(demo=DemoConfig(accounts=-1)).validate()
        with pytest.raises(ConfigurationError):
            LedgerConfig(demo=DemoConfig(max_transactions=-1)).validate()

    def test_from_env_default(self) -> None:
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = LedgerConfig.from_env()

        assert config == LedgerConfig()

    def test_from_env_custom(self) -> None:
        env = {
            "BANK_PREFIX": "1112223",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
            "DEMO_ACCOUNTS": "3",
            "DEMO_LOCALE": "pt_BR",
            "DEMO_MAX_TRANSACTIONS": "8",
        }
        with patch.dict(os.environ, env):
            config = LedgerConfig.from_env()

        assert config.bank_prefix == "1112223"
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.demo == DemoConfig(accounts=3, locale="pt_BR", max_transactions=8)

    def test_from_env_non_integer(self) -> None:
        with patch.dict(os.environ, {"SEED": "forty-two"}):
            with pytest.raises(ConfigurationError, match="SEED"):
                LedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("bank_ledger").level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_non_level_attribute(self) -> None:
        setup_logging(level="basic_format")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_defaults_to_stderr(self) -> None:
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(root.handlers) == 1

    def test_standard_output(self) -> None:
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        get_logger("bank_ledger.test").info("Created %s", "account")

        line = stream.getvalue().strip()
        assert line.endswith("| INFO     | bank_ledger.test | Created account")

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_basic(self) -> None:
        record = logging.LogRecord(
            name="bank_ledger.store",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Created %s",
            args=("account",),
            exc_info=None,
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "bank_ledger.store"
        assert data["message"] == "Created account"
        assert "timestamp" in data
        assert "exception" not in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="bank_ledger",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="failed",
            args=(),
            exc_info=exc_info,
        )

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

    def test_format_with_ledger_fields(self) -> None:
        record = logging.LogRecord(
            name="bank_ledger.models.account",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="Deposit",
            args=(),
            exc_info=None,
        )
        record.account_number = "40037720000001S"
        record.amount = Decimal("12.50")

        data = json.loads(JsonFormatter().format(record))

        assert data["account_number"] == "40037720000001S"
        assert data["amount"] == "12.50"
        assert "kind" not in data
        assert "balance" not in data

    def test_deposit_logs_account_fields(self, account: Account) -> None:
        stream = io.StringIO()
        setup_logging(level="DEBUG", format_type="json", stream=stream)

        account.deposit("10")

        data = json.loads(stream.getvalue().splitlines()[-1])
        assert data["logger"] == "bank_ledger.models.account"
        assert data["account_number"] == account.account_number
        assert data["amount"] == "10.00"
        assert data["balance"] == "10.00"

    def test_account_creation_logs_kind(self, registry: AccountRegistry) -> None:
        stream = io.StringIO()
        setup_logging(level="INFO", format_type="json", stream=stream)

        account = registry.create_account("Alice", AccountKind.CURRENT)

        data = json.loads(stream.getvalue().splitlines()[-1])
        assert data["account_number"] == account.account_number
        assert data["kind"] == "CURRENT"


class TestGetLogger:
    """Tests for get_logger."""

    def test_get_logger(self) -> None:
        logger = get_logger("bank_ledger.cli")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "bank_ledger.cli"
        assert get_logger("bank_ledger.cli") is logger
