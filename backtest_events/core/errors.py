"""Typed errors for backtest event construction/validation."""


class EventError(Exception):
    """Base class for event errors."""


class EventValidationError(EventError):
    """Raised when an event field is set to a value its kind does not accept."""
