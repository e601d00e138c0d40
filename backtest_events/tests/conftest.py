from __future__ import annotations

import pytest

from backtest_events.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("EVENTS_ALLOW_NEGATIVE_QTY", "EVENTS_ALLOW_CROSSED_QUOTES", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
