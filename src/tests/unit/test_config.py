"""Tests for kasten.core.config module."""

import logging

import pytest

import kasten.core.config as config


class TestEnvHelpers:
    """Tests for environment variable helpers."""

    def test_get_env_returns_value(self, monkeypatch):
        """get_env returns environment variable value."""
        monkeypatch.setenv("TEST_VAR", "test_value")

        assert config.get_env("TEST_VAR") == "test_value"

    def test_get_env_returns_default(self, monkeypatch):
        """get_env returns default when var not set."""
        monkeypatch.delenv("NONEXISTENT_VAR", raising=False)

        assert config.get_env("NONEXISTENT_VAR", "default") == "default"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("true", True),
            ("True", True),
            ("1", True),
            ("yes", True),
            ("false", False),
            ("False", False),
            ("0", False),
            ("no", False),
        ],
    )
    def test_get_env_bool_parses_known_values(self, monkeypatch, value, expected):
        """get_env_bool parses known values."""
        monkeypatch.setenv("BOOL_VAR", value)

        assert config.get_env_bool("BOOL_VAR") is expected

    @pytest.mark.parametrize("default", [True, False])
    def test_get_env_bool_default(self, monkeypatch, default):
        """get_env_bool returns default for unknown values."""
        monkeypatch.setenv("BOOL_VAR", "maybe")

        assert config.get_env_bool("BOOL_VAR", default) is default


class TestSettings:
    """Tests for module-level settings."""

    def test_config_file_default(self):
        """The overrides file lives below ~/.config/kasten unless overridden."""
        assert config.KASTEN_CONFIG_FILE.endswith("config.yaml")

    def test_check_timeout_is_short(self):
        """The capability check never blocks for long."""
        assert 0 < config.RG_CHECK_TIMEOUT_SECONDS <= 10


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_returns_logger(self):
        logger = config.setup_logging()

        assert isinstance(logger, logging.Logger)
        assert logger.name == "kasten.core.config"
