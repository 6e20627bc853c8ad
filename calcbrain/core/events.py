"""
Input event model for the calculator program log.

Input events are immutable records of what the user entered.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from .errors import InvalidEventError


@dataclass(frozen=True)
class Operand:
    """A numeric operand entered by the user."""
    value: float

    @property
    def kind(self) -> str:
        return "Operand"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class Operation:
    """
    An operation symbol (e.g. "+", "√", "=").

    Symbols unknown to the operation table are still valid events; they
    are ignored when the program is evaluated.
    """
    symbol: str

    @property
    def kind(self) -> str:
        return "Operation"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "symbol": self.symbol}


@dataclass(frozen=True)
class Variable:
    """A named placeholder resolved from the variable mapping at evaluation time."""
    name: str

    @property
    def kind(self) -> str:
        return "Variable"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


InputEvent = Union[Operand, Operation, Variable]


def event_from_dict(data: Dict[str, Any]) -> InputEvent:
    """
    Rebuild an input event from its to_dict() form.

    Raises:
        InvalidEventError: If the record has an unknown kind or missing fields
    """
    kind = data.get("kind") if isinstance(data, dict) else None
    try:
        if kind == "Operand":
            return Operand(float(data["value"]))
        if kind == "Operation":
            return Operation(str(data["symbol"]))
        if kind == "Variable":
            return Variable(str(data["name"]))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidEventError(f"Malformed {kind} record: {data!r}") from e
    raise InvalidEventError(f"Unknown event kind: {kind!r}")
