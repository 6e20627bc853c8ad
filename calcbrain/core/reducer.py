"""
Reducer: pure fold step for calculator programs.

Each handler takes (state, event, variables) and returns the next state.
Handlers must be:
- Pure (no I/O besides debug logging)
- Deterministic (same input -> same output; "rnd" is the one exception)
- Total (no input event raises; unusable input is a no-op)
"""

from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from . import description
from .errors import InvalidTransitionError
from .events import InputEvent, Operand, Operation, Variable
from .operations import OPERATIONS, Binary, Constant, Equals, Nullary, OperationKind, Unary
from .state import FoldState, PendingBinaryOperation
from ..logging_config import get_logger

logger = get_logger(__name__)

Variables = Mapping[str, float]

# Handler signature: (state, event, variables) -> new state
Handler = Callable[[FoldState, Any, Variables], FoldState]


class Reducer:
    """
    Registry of event handlers for fold transitions.

    Usage:
        reducer = build_reducer()
        state = reducer.apply(FoldState(), Operand(4.0), {})
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, kind: str, handler: Handler) -> None:
        """
        Register event handler.

        Args:
            kind: Event kind ("Operand", "Operation", "Variable")
            handler: Pure function (state, event, variables) -> new state
        """
        self._handlers[kind] = handler

    def apply(self, state: FoldState, event: InputEvent, variables: Optional[Variables] = None) -> FoldState:
        """
        Apply one event to the fold state.

        Raises:
            InvalidTransitionError: If no handler is registered for the event kind
        """
        handler = self._handlers.get(event.kind)
        if handler is None:
            raise InvalidTransitionError(f"No handler for event kind: {event.kind}")
        return handler(state, event, variables or {})


def resolve_pending(state: FoldState) -> FoldState:
    """
    Resolve the pending binary operation against the accumulator.

    No-op unless both a pending operation and an accumulator are present;
    this is how a dangling operator stays pending.
    """
    if state.pending is None or state.accumulator is None:
        return state
    result = state.pending.perform(state.accumulator)
    return description.settle(replace(state, accumulator=result, pending=None))


def set_operand(state: FoldState, value: float, token: str) -> FoldState:
    return description.reset_and_set(replace(state, accumulator=value), token)


def make_operand_handler(fraction_digits: int = description.DEFAULT_FRACTION_DIGITS) -> Handler:
    """Bind the Operand handler to a description precision."""

    def on_operand(state: FoldState, event: Operand, variables: Variables) -> FoldState:
        return set_operand(state, event.value, description.format_operand(event.value, fraction_digits))

    return on_operand


def on_variable(state: FoldState, event: Variable, variables: Variables) -> FoldState:
    return set_operand(state, float(variables.get(event.name, 0.0)), event.name)


def perform_operation(state: FoldState, symbol: str, operation: OperationKind) -> FoldState:
    if isinstance(operation, Constant):
        return set_operand(state, operation.value, symbol)

    if isinstance(operation, Nullary):
        return set_operand(state, operation.fn(), symbol)

    if isinstance(operation, Unary):
        if state.accumulator is None:
            return state
        state = replace(state, accumulator=operation.fn(state.accumulator))
        return description.wrap(state, symbol)

    if isinstance(operation, Binary):
        if state.accumulator is None:
            return state
        state = description.append(resolve_pending(state), symbol)
        pending = PendingBinaryOperation(fn=operation.fn, first_operand=state.accumulator, symbol=symbol)
        return replace(state, pending=pending, accumulator=None)

    if isinstance(operation, Equals):
        return resolve_pending(state)

    return state


def make_operation_handler(operations: Mapping[str, OperationKind]) -> Handler:
    """Bind the Operation handler to an operation table."""

    def on_operation(state: FoldState, event: Operation, variables: Variables) -> FoldState:
        operation = operations.get(event.symbol)
        if operation is None:
            logger.debug("Ignoring unknown operation symbol %r", event.symbol)
            return state
        return perform_operation(state, event.symbol, operation)

    return on_operation


def build_reducer(
    operations: Mapping[str, OperationKind] = OPERATIONS,
    fraction_digits: int = description.DEFAULT_FRACTION_DIGITS,
) -> Reducer:
    """Reducer with the three calculator handlers registered."""
    reducer = Reducer()
    reducer.register("Operand", make_operand_handler(fraction_digits))
    reducer.register("Variable", on_variable)
    reducer.register("Operation", make_operation_handler(operations))
    return reducer
