"""Capability protocols that pipeline stages program against."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Timer(Protocol):
    timestamp: datetime


@runtime_checkable
class Symboler(Protocol):
    symbol: str


@runtime_checkable
class EventHandler(Timer, Symboler, Protocol):
    """Minimal capability for time ordering and symbol routing."""


@runtime_checkable
class DataEventHandler(EventHandler, Protocol):
    @property
    def latest_price(self) -> float:
        """Return the representative price of the market-data event."""


@runtime_checkable
class BarEvent(DataEventHandler, Protocol):
    pass


@runtime_checkable
class TickEvent(DataEventHandler, Protocol):
    pass


@runtime_checkable
class Directioner(Protocol):
    direction: str


@runtime_checkable
class Quantifier(Protocol):
    qty: int


@runtime_checkable
class SignalEvent(EventHandler, Directioner, Protocol):
    pass


@runtime_checkable
class OrderEvent(EventHandler, Directioner, Quantifier, Protocol):
    pass


@runtime_checkable
class FillEvent(OrderEvent, Protocol):
    @property
    def price(self) -> float:
        """Return the execution price."""

    @property
    def commission(self) -> float:
        """Return the broker commission."""

    @property
    def exchange_fee(self) -> float:
        """Return the exchange fee."""

    @property
    def cost(self) -> float:
        """Return the total transaction cost."""

    @property
    def value(self) -> float:
        """Return the gross notional (qty * price)."""

    @property
    def net_value(self) -> float:
        """Return the notional adjusted by cost for the fill direction."""
