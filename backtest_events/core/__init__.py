"""Pure core contracts for backtest events."""

from backtest_events.core.boundaries import fill_from_order, order_from_signal
from backtest_events.core.errors import EventError, EventValidationError
from backtest_events.core.events import Bar, DataEvent, Event, Fill, Order, Signal, Tick
from backtest_events.core.ports import (
    BarEvent,
    DataEventHandler,
    Directioner,
    EventHandler,
    FillEvent,
    OrderEvent,
    Quantifier,
    SignalEvent,
    Symboler,
    TickEvent,
    Timer,
)
from backtest_events.core.types import (
    DecisionDirection,
    FillDirection,
    OrderDirection,
    OrderType,
    parse_decision_direction,
    parse_fill_direction,
    parse_order_direction,
    parse_order_type,
)

__all__ = [
    "EventError",
    "EventValidationError",
    "Event",
    "DataEvent",
    "Bar",
    "Tick",
    "Signal",
    "Order",
    "Fill",
    "Timer",
    "Symboler",
    "EventHandler",
    "DataEventHandler",
    "BarEvent",
    "TickEvent",
    "Directioner",
    "Quantifier",
    "SignalEvent",
    "OrderEvent",
    "FillEvent",
    "DecisionDirection",
    "OrderDirection",
    "FillDirection",
    "OrderType",
    "parse_decision_direction",
    "parse_order_direction",
    "parse_fill_direction",
    "parse_order_type",
    "order_from_signal",
    "fill_from_order",
]
