"""Direction and order-type enums shared by the event models."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar

from backtest_events.core.errors import EventValidationError

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


class DecisionDirection(str, Enum):
    """Signal direction enum."""
    LONG = "long"
    SHORT = "short"

    def to_order_direction(self) -> OrderDirection:
        """Map a trading decision onto the order side that opens it."""
        if self is DecisionDirection.LONG:
            return OrderDirection.BUY
        return OrderDirection.SELL


class OrderDirection(str, Enum):
    """Order side enum."""
    BUY = "buy"
    SELL = "sell"

    def to_fill_direction(self) -> FillDirection:
        """Map an order side onto the direction reported by its fill."""
        if self is OrderDirection.BUY:
            return FillDirection.BOUGHT
        return FillDirection.SOLD


class FillDirection(str, Enum):
    """Fill direction enum (exchange-style BOT/SLD codes)."""
    BOUGHT = "BOT"
    SOLD = "SLD"


class OrderType(str, Enum):
    """Order type enum."""
    MARKET = "market"
    LIMIT = "limit"


def _parse(enum_cls: type[_E], value: object, label: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if key.lower() in (member.value.lower(), member.name.lower()):
                return member
    logger.debug("Rejected %s %r", label, value)
    allowed = ", ".join(member.value for member in enum_cls)
    raise EventValidationError(f"Invalid {label} {value!r}; expected one of: {allowed}")


def parse_decision_direction(value: object) -> DecisionDirection:
    return _parse(DecisionDirection, value, "signal direction")


def parse_order_direction(value: object) -> OrderDirection:
    return _parse(OrderDirection, value, "order direction")


def parse_fill_direction(value: object) -> FillDirection:
    return _parse(FillDirection, value, "fill direction")


def parse_order_type(value: object) -> OrderType:
    return _parse(OrderType, value, "order type")
