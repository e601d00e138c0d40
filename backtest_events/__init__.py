"""Event vocabulary for an event-driven backtesting pipeline."""

from backtest_events.config import configure_logging, get_settings
from backtest_events.core import (
    Bar,
    DecisionDirection,
    EventError,
    EventValidationError,
    Fill,
    FillDirection,
    Order,
    OrderDirection,
    OrderType,
    Signal,
    Tick,
    fill_from_order,
    order_from_signal,
)

__all__ = [
    "Bar",
    "Tick",
    "Signal",
    "Order",
    "Fill",
    "DecisionDirection",
    "OrderDirection",
    "FillDirection",
    "OrderType",
    "EventError",
    "EventValidationError",
    "order_from_signal",
    "fill_from_order",
    "configure_logging",
    "get_settings",
]
