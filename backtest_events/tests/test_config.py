from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from backtest_events.config import EventSettings, configure_logging, get_settings, reload_settings


def test_default_policy_is_strict() -> None:
    settings = get_settings()
    assert settings.validation.allow_negative_qty is False
    assert settings.validation.allow_crossed_quotes is False
    assert settings.logging.log_level == "INFO"


def test_settings_are_cached_until_reload(monkeypatch) -> None:
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("EVENTS_ALLOW_NEGATIVE_QTY", "true")
    assert get_settings().validation.allow_negative_qty is False
    assert reload_settings().validation.allow_negative_qty is True


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert EventSettings().logging.log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        EventSettings()


def test_configure_logging_returns_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert configure_logging(reload_settings()) == logging.WARNING
