from __future__ import annotations

from datetime import datetime, timezone

import pytest

from backtest_events.config import reload_settings
from backtest_events.core.errors import EventValidationError
from backtest_events.core.events import Order, Signal
from backtest_events.core.types import DecisionDirection, OrderDirection, OrderType


def test_signal_direction_round_trip() -> None:
    signal = Signal(symbol="BTC-USD", timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc))
    signal.direction = "short"
    assert signal.direction is DecisionDirection.SHORT
    assert signal.direction == "short"

    signal.direction = DecisionDirection.LONG
    assert signal.direction is DecisionDirection.LONG


def test_signal_direction_is_case_insensitive() -> None:
    assert Signal(direction="LONG").direction is DecisionDirection.LONG
    assert Signal(direction="Short").direction is DecisionDirection.SHORT


@pytest.mark.parametrize("bad", ["buy", "BOT", "", "flat"])
def test_signal_rejects_foreign_directions(bad) -> None:
    with pytest.raises(EventValidationError):
        Signal(direction=bad)


def test_signal_has_no_size() -> None:
    with pytest.raises(ValueError):
        Signal(direction="long", qty=1)


def test_order_round_trip() -> None:
    order = Order(symbol="ES", direction="buy", qty=3)
    order.direction = "sell"
    order.qty = 7
    assert order.direction is OrderDirection.SELL
    assert order.qty == 7


def test_order_defaults() -> None:
    order = Order()
    assert order.direction is OrderDirection.BUY
    assert order.qty == 0
    assert order.order_type is OrderType.MARKET
    assert order.limit == 0.0


def test_market_order_may_carry_limit() -> None:
    order = Order(order_type="market", limit=101.25)
    assert order.order_type is OrderType.MARKET
    assert order.limit == 101.25


def test_order_rejects_bad_direction_on_assignment() -> None:
    order = Order(direction="buy")
    with pytest.raises(EventValidationError):
        order.direction = "long"
    assert order.direction is OrderDirection.BUY


def test_order_rejects_bad_order_type() -> None:
    with pytest.raises(EventValidationError):
        Order(order_type="stop")


def test_order_rejects_negative_qty() -> None:
    with pytest.raises(EventValidationError):
        Order(qty=-1)
    order = Order(qty=1)
    with pytest.raises(EventValidationError):
        order.qty = -5
    assert order.qty == 1


def test_negative_qty_allowed_by_settings(monkeypatch) -> None:
    monkeypatch.setenv("EVENTS_ALLOW_NEGATIVE_QTY", "1")
    reload_settings()

    order = Order(qty=-10)
    assert order.qty == -10


def test_copy_is_independent() -> None:
    order = Order(symbol="ES", qty=2)
    copy = order.model_copy()
    copy.qty = 4
    assert order.qty == 2
