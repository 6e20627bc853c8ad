"""
Description bookkeeping.

The description is a textual trace built alongside the numeric fold. Writes
go to the pending buffer while a binary operation is pending, otherwise to
the settled buffer. All functions here are pure: FoldState in, FoldState out.
"""

from dataclasses import replace

from .state import FoldState

DEFAULT_FRACTION_DIGITS = 6


def format_operand(value: float, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """
    Format a number as a description token.

    Locale-free decimal, at most max_fraction_digits fractional digits,
    trailing zeros and point trimmed.

    Example:
        format_operand(2.50) -> "2.5"
        format_operand(1 / 3) -> "0.333333"
    """
    text = f"{value:.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _write(state: FoldState, text: str) -> FoldState:
    text = text.strip()
    if state.is_pending:
        return replace(state, pending_description=text)
    return replace(state, description=text)


def _active(state: FoldState) -> str:
    return state.pending_description if state.is_pending else state.description


def reset_and_set(state: FoldState, token: str) -> FoldState:
    """Start a fresh operand token; clears the settled buffer when idle."""
    if not state.is_pending:
        state = replace(state, description="")
    return _write(state, f"{_active(state)} {token}")


def wrap(state: FoldState, symbol: str) -> FoldState:
    """Wrap the active buffer as symbol(buffer)."""
    return _write(state, f"{symbol}({_active(state)})")


def append(state: FoldState, symbol: str) -> FoldState:
    """Append a binary operator token to the active buffer."""
    return _write(state, f"{_active(state)} {symbol}")


def settle(state: FoldState) -> FoldState:
    """Merge the pending buffer into the settled buffer and clear it."""
    merged = f"{state.description} {state.pending_description}".strip()
    return replace(state, description=merged, pending_description="")
