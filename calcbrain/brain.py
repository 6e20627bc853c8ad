"""
CalculatorBrain: the evaluation engine.

The brain owns a Program and nothing else. Every query replays the whole
program from an empty fold state; there is no cache to invalidate.

Usage:
    brain = CalculatorBrain()
    brain.set_operand(4)
    brain.perform_operation("+")
    brain.set_operand(5)
    brain.perform_operation("=")
    brain.evaluate()  # EvaluationResult(result=9.0, is_pending=False, description="4 + 5")
"""

import itertools
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .core.description import DEFAULT_FRACTION_DIGITS
from .core.events import InputEvent, Operand, Operation, Variable
from .core.operations import OPERATIONS, OperationKind
from .core.reducer import build_reducer
from .core.state import EvaluationResult
from .log.program import Program
from .logging_config import get_logger
from .replay.runner import replay

_session_ids = itertools.count(1)


class CalculatorBrain:
    """
    Left-to-right calculator engine with variables and undo.

    Mutators never fail: unknown symbols are logged and later ignored by the
    fold, undo on an empty program does nothing.
    """

    def __init__(
        self,
        operations: Mapping[str, OperationKind] = OPERATIONS,
        description_digits: int = DEFAULT_FRACTION_DIGITS,
        session_id: Optional[str] = None,
    ) -> None:
        self.operations = operations
        self.session_id = session_id or f"brain-{next(_session_ids)}"
        self._program = Program()
        self._reducer = build_reducer(operations, fraction_digits=description_digits)
        self._logger = get_logger(__name__, trace_id=self.session_id)

    def set_operand(self, value: float) -> None:
        self._append(Operand(float(value)))

    def set_variable(self, name: str) -> None:
        self._append(Variable(name))

    def perform_operation(self, symbol: str) -> None:
        if symbol not in self.operations:
            self._logger.debug("Unknown operation symbol %r will be ignored", symbol)
        self._append(Operation(symbol))

    def clear(self) -> None:
        self._logger.debug("Clearing program of %d events", len(self._program))
        self._program.clear()

    def undo(self) -> Optional[InputEvent]:
        """
        Remove the last input.

        Returns:
            The removed event, or None if there was nothing to undo
        """
        removed = self._program.undo()
        if removed is None:
            self._logger.debug("Nothing to undo")
        else:
            self._logger.debug("Undid %s", removed)
        return removed

    def evaluate(
        self,
        variables: Optional[Mapping[str, float]] = None,
        to_index: Optional[int] = None,
    ) -> EvaluationResult:
        """
        Replay the program and project the outcome.

        Args:
            variables: Values for Variable inputs; unknown names read as 0.0
            to_index: Evaluate only the inputs before this index

        Returns:
            EvaluationResult(result, is_pending, description)
        """
        return replay(self._program, self._reducer, variables, to_index=to_index).to_evaluation()

    @property
    def result(self) -> Optional[float]:
        return self.evaluate().result

    @property
    def is_pending(self) -> bool:
        return self.evaluate().is_pending

    @property
    def description(self) -> str:
        return self.evaluate().description

    @property
    def program(self) -> Tuple[InputEvent, ...]:
        """Read-only snapshot of the logged inputs."""
        return self._program.snapshot()

    def program_records(self) -> List[Dict[str, Any]]:
        return self._program.to_records()

    def load_program(self, program: Program) -> None:
        """Replace the logged inputs with a copy of program."""
        self._program = Program(program.snapshot())
        self._logger.debug("Loaded program of %d events", len(self._program))

    def _append(self, event: InputEvent) -> None:
        index = self._program.append(event)
        self._logger.debug("Appended %s at index %d", event, index)
