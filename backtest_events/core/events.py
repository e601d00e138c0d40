"""
Event models for the backtest pipeline.

Every event carries a timestamp and a symbol. Market-data events (Bar, Tick)
add a metrics mapping and a latest price; Signal, Order and Fill add the
direction vocabulary of their stage. Events are mutable so the producing
stage can finish building them; after hand-off they are treated as read-only.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from backtest_events.config import get_settings
from backtest_events.core.errors import EventValidationError
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

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_qty(value: int) -> int:
    if value < 0 and not get_settings().validation.allow_negative_qty:
        logger.debug("Rejected negative qty %d", value)
        raise EventValidationError(f"qty must be >= 0, got {value}")
    return value


def _check_quote(bid: float, ask: float) -> None:
    if bid > ask and not get_settings().validation.allow_crossed_quotes:
        logger.debug("Rejected crossed quote bid=%s ask=%s", bid, ask)
        raise EventValidationError(f"bid {bid} is above ask {ask}")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Base Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Event(BaseModel):
    """Base class for all events: when and for which instrument."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    timestamp: datetime = Field(default_factory=_utcnow)
    symbol: str = ""


class DataEvent(Event):
    """Base class for market-data events."""

    # indicator name -> value, attached by feed processing
    metrics: dict[str, float] = Field(default_factory=dict)

    @property
    @abstractmethod
    def latest_price(self) -> float:
        """Representative price of the event."""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Market Data Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Bar(DataEvent):
    """OHLCV bar for one sampling interval."""
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    adj_close: float = 0.0
    volume: int = 0

    @property
    def latest_price(self) -> float:
        """Close price of the bar."""
        return self.close


class Tick(DataEvent):
    """
    Bid/ask quote snapshot.

    The constructor checks the quote as given, defaults included. Assignments
    are checked once both sides have been supplied, so a producing stage can
    set bid and ask in either order.
    """
    bid: float = 0.0
    ask: float = 0.0

    def model_post_init(self, __context: Any) -> None:
        _check_quote(self.bid, self.ask)

    @model_validator(mode="after")
    def validate_not_crossed(self) -> Tick:
        """Reject bid > ask unless crossed quotes are allowed."""
        if {"bid", "ask"} <= self.model_fields_set:
            _check_quote(self.bid, self.ask)
        return self

    @property
    def latest_price(self) -> float:
        """Mid price between bid and ask."""
        return (self.bid + self.ask) / 2


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Signal Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Signal(Event):
    """Directional trading decision; sizing is left to the risk stage."""
    direction: DecisionDirection = DecisionDirection.LONG

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> DecisionDirection:
        return parse_decision_direction(v)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Order Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Order(Event):
    """Execution instruction. `limit` only matters for limit orders."""
    direction: OrderDirection = OrderDirection.BUY
    qty: int = 0
    order_type: OrderType = OrderType.MARKET
    limit: float = 0.0

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> OrderDirection:
        return parse_order_direction(v)

    @field_validator("order_type", mode="before")
    @classmethod
    def validate_order_type(cls, v: Any) -> OrderType:
        return parse_order_type(v)

    @field_validator("qty")
    @classmethod
    def validate_qty(cls, v: int) -> int:
        return _check_qty(v)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Fill Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Fill(Event):
    """
    Completed trade record.

    Price and cost fields are fixed at construction. `cost` is the total
    transaction cost (commission plus exchange fee) but the model does not
    enforce that relation.
    """
    exchange: str = ""
    direction: FillDirection = FillDirection.BOUGHT
    qty: int = 0
    price: float = Field(default=0.0, frozen=True)
    commission: float = Field(default=0.0, frozen=True)
    exchange_fee: float = Field(default=0.0, frozen=True)
    cost: float = Field(default=0.0, frozen=True)

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> FillDirection:
        return parse_fill_direction(v)

    @field_validator("qty")
    @classmethod
    def validate_qty(cls, v: int) -> int:
        return _check_qty(v)

    @property
    def value(self) -> float:
        """Gross notional, independent of direction."""
        return self.qty * self.price

    @property
    def net_value(self) -> float:
        """
        Notional adjusted by cost.

        Buying adds the cost to the outlay; any other direction is treated as
        a sale and the cost reduces the proceeds.
        """
        if self.direction is FillDirection.BOUGHT:
            return self.qty * self.price + self.cost
        return self.qty * self.price - self.cost
