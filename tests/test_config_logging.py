"""Tests for settings and logging configuration."""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError as PydanticValidationError

from rapidcheck.config import Settings, get_settings
from rapidcheck.logging import (
    LoggerRegistry,
    boundary_logger,
    configure_logging,
    get_logger,
)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("RAPIDCHECK_LOG_LEVEL", "RAPIDCHECK_LOG_JSON", "RAPIDCHECK_MAX_ERRORS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.MAX_ERRORS == 50

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RAPIDCHECK_MAX_ERRORS", "5")
        monkeypatch.setenv("RAPIDCHECK_LOG_JSON", "true")
        settings = get_settings()
        assert settings.MAX_ERRORS == 5
        assert settings.LOG_JSON is True

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_max_errors_must_be_positive(self, monkeypatch, value):
        monkeypatch.setenv("RAPIDCHECK_MAX_ERRORS", value)
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_json_output_redacts_sensitive_keys(self, capsys):
        configure_logging(level="DEBUG", json_logs=True)
        get_logger("rapidcheck.test").info("login_rejected", password="hunter2", user="ada")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "login_rejected"
        assert event["password"] == "[REDACTED]"
        assert event["user"] == "ada"
        assert event["library"] == "rapidcheck"
        assert event["level"] == "info"

    def test_level_from_argument(self):
        configure_logging(level="warning", json_logs=False)
        assert logging.getLogger().level == logging.WARNING

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("RAPIDCHECK_LOG_LEVEL", "ERROR")
        configure_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_registry_reuses_loggers(self):
        assert LoggerRegistry.get("boundary") is boundary_logger()

    def test_nothing_configured_on_import(self):
        assert not structlog.is_configured()
