"""Conversions between pipeline stages: Signal -> Order -> Fill."""

from __future__ import annotations

import logging
from datetime import datetime

from backtest_events.core.events import Fill, Order, Signal
from backtest_events.core.types import OrderType

logger = logging.getLogger(__name__)


def order_from_signal(
    signal: Signal,
    qty: int,
    *,
    order_type: OrderType | str = OrderType.MARKET,
    limit: float = 0.0,
) -> Order:
    """Size a signal into an order for the same symbol and time."""
    order = Order(
        timestamp=signal.timestamp,
        symbol=signal.symbol,
        direction=signal.direction.to_order_direction(),
        qty=qty,
        order_type=order_type,
        limit=limit,
    )
    logger.debug("Order %s %s x%d from %s signal", order.direction.value, order.symbol, qty, signal.direction.value)
    return order


def fill_from_order(
    order: Order,
    *,
    price: float,
    exchange: str = "",
    commission: float = 0.0,
    exchange_fee: float = 0.0,
    cost: float | None = None,
    timestamp: datetime | None = None,
) -> Fill:
    """
    Record the execution of an order.

    Args:
        order: The executed order
        price: Execution price
        exchange: Venue identifier
        commission: Broker commission
        exchange_fee: Venue fee
        cost: Total transaction cost; defaults to commission + exchange_fee
        timestamp: Execution time; defaults to the order's timestamp

    Returns:
        Fill with the order's symbol, quantity and mapped direction
    """
    fill = Fill(
        timestamp=order.timestamp if timestamp is None else timestamp,
        symbol=order.symbol,
        exchange=exchange,
        direction=order.direction.to_fill_direction(),
        qty=order.qty,
        price=price,
        commission=commission,
        exchange_fee=exchange_fee,
        cost=commission + exchange_fee if cost is None else cost,
    )
    logger.debug("Fill %s %s x%d @ %s", fill.direction.value, fill.symbol, fill.qty, price)
    return fill
