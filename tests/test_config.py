"""
Tests for environment configuration and logging setup.
"""

import logging

import pytest

from Config import Config, TelegramConfig, parse_allowed_ids
from Logging_Config import setup_logging


class TestAllowedIds:
    """Tests for parse_allowed_ids."""

    def test_comma_separated(self):
        assert parse_allowed_ids("123, 456,789") == [123, 456, 789]

    def test_blank_entries_are_ignored(self):
        assert parse_allowed_ids(" 1,, 2 ,") == [1, 2]

    @pytest.mark.parametrize("raw", [None, ""])
    def test_unset(self, raw):
        assert parse_allowed_ids(raw) == []

    def test_invalid_entry_is_rejected(self):
        with pytest.raises(ValueError):
            parse_allowed_ids("1, bob")


class TestConfigFromEnv:
    """Tests for Config.from_env."""

    def test_token_is_required(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        with pytest.raises(ValueError):
            TelegramConfig.from_env()

    def test_reads_every_section(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "42:XYZ")
        monkeypatch.setenv("TELEGRAM_WEBHOOK_SECRET", "tg-secret")
        monkeypatch.setenv("ALLOWED_USER_IDS", "7")
        monkeypatch.setenv("GITHUB_WEBHOOK_SECRET", "gh-secret")
        monkeypatch.setenv("DB_NAME", "Relay_Test")
        monkeypatch.setenv("DB_PORT", "3307")
        monkeypatch.setenv("SERVER_PORT", "8080")
        monkeypatch.setenv("DEBUG", "True")

        config = Config.from_env()

        assert config.telegram.token == "42:XYZ"
        assert config.telegram.webhook_secret == "tg-secret"
        assert config.telegram.allowed_user_ids == [7]
        assert config.github.webhook_secret == "gh-secret"
        assert (config.database.name, config.database.port) == ("Relay_Test", 3307)
        assert config.server.port == 8080
        assert config.server.debug is True

    def test_empty_secrets_mean_unset(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_WEBHOOK_SECRET", "")
        monkeypatch.setenv("GITHUB_WEBHOOK_SECRET", "")
        config = Config.from_env()
        assert config.telegram.webhook_secret is None
        assert config.github.webhook_secret is None


class TestLogging:
    """Tests for setup_logging."""

    def test_creates_log_directory(self, tmp_path):
        log_file = tmp_path / "nested" / "relay.log"
        logger = setup_logging("WARNING", str(log_file))

        assert log_file.parent.is_dir()
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 2

    def test_library_loggers_are_quieted(self, tmp_path):
        setup_logging("INFO", str(tmp_path / "relay.log"), quiet=("httpx",))
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging("DEBUG", str(tmp_path / "relay.log"), quiet=("httpx",))
        assert logging.getLogger("httpx").level == logging.DEBUG
