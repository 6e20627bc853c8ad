"""
Replay runner: evaluate a program by folding its events.

Replay always starts from an empty FoldState, so the result depends only on
the program and the variable mapping.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.reducer import Reducer
from ..core.state import EvaluationResult, FoldState
from ..log.program import Program


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final fold state after applying events
        applied: Number of events applied
    """
    state: FoldState
    applied: int

    def to_evaluation(self) -> EvaluationResult:
        return EvaluationResult.from_state(self.state)


def replay(
    program: Program,
    reducer: Reducer,
    variables: Optional[Mapping[str, float]] = None,
    to_index: Optional[int] = None,
) -> ReplayResult:
    """
    Fold program events through the reducer.

    Args:
        program: Program to evaluate
        reducer: Reducer with registered handlers
        variables: Values for Variable events (missing names read as 0.0)
        to_index: Replay only events before this index (None = all)

    Returns:
        ReplayResult with final state and count
    """
    st = FoldState()
    count = 0
    variables = variables or {}

    for ev in program.read(to_index=to_index):
        st = reducer.apply(st, ev, variables)
        count += 1

    return ReplayResult(state=st, applied=count)
