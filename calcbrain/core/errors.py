"""
Exception types for the calculator engine.

Evaluation itself never raises: unknown symbols and operations with nothing
to act on are silently ignored. These errors cover programming mistakes and
malformed serialized input only.
"""


class CalcBrainError(Exception):
    """Base class for calcbrain errors."""
    pass


class InvalidTransitionError(CalcBrainError):
    """Raised when no reducer handler is registered for an event kind."""
    pass


class InvalidEventError(CalcBrainError):
    """Raised when a serialized input event record cannot be decoded."""
    pass
