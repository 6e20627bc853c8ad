"""
Fold state for program evaluation.

FoldState is rebuilt from scratch on every evaluation. It is immutable;
handlers return a new instance via dataclasses.replace().
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class PendingBinaryOperation:
    """
    A binary operator waiting for its second operand.

    Fields:
        fn: Binary function
        first_operand: Accumulator value captured when the operator was applied
        symbol: Operator symbol (for diagnostics)
    """
    fn: Callable[[float, float], float]
    first_operand: float
    symbol: str = ""

    def perform(self, second_operand: float) -> float:
        return self.fn(self.first_operand, second_operand)


@dataclass(frozen=True)
class FoldState:
    """
    Local state of one evaluation.

    Fields:
        accumulator: Current working value (None when absent)
        pending: Unresolved binary operation, if any
        description: Settled description buffer
        pending_description: Text accrued since the pending operator was applied
    """
    accumulator: Optional[float] = None
    pending: Optional[PendingBinaryOperation] = None
    description: str = ""
    pending_description: str = ""

    @property
    def is_pending(self) -> bool:
        return self.pending is not None

    def full_description(self) -> str:
        return " ".join(part for part in (self.description, self.pending_description) if part)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Projection of a FoldState handed to callers.

    Fields:
        result: Accumulator value, or None when nothing is available
        is_pending: True while a binary operation awaits its second operand
        description: Human-readable trace of the expression
    """
    result: Optional[float]
    is_pending: bool
    description: str

    @staticmethod
    def from_state(state: FoldState) -> "EvaluationResult":
        return EvaluationResult(
            result=state.accumulator,
            is_pending=state.is_pending,
            description=state.full_description(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "is_pending": self.is_pending,
            "description": self.description,
        }
