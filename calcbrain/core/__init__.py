"""
Core calculator evaluation primitives.

This module provides the building blocks of the evaluation fold:
- Events: Operand, Operation, Variable input records
- Operations: the read-only symbol table
- State: FoldState, PendingBinaryOperation, EvaluationResult
- Reducer: pure fold step
- Canonical: deterministic JSON for programs and results
"""

from .events import InputEvent, Operand, Operation, Variable, event_from_dict
from .operations import (
    OPERATIONS,
    Binary,
    Constant,
    Equals,
    Nullary,
    OperationKind,
    Unary,
    build_operation_table,
)
from .state import EvaluationResult, FoldState, PendingBinaryOperation
from .reducer import Reducer, build_reducer
from .canonical import canonicalize, canonical_json_str
from .errors import CalcBrainError, InvalidEventError, InvalidTransitionError

__all__ = [
    "InputEvent",
    "Operand",
    "Operation",
    "Variable",
    "event_from_dict",
    "OPERATIONS",
    "Binary",
    "Constant",
    "Equals",
    "Nullary",
    "OperationKind",
    "Unary",
    "build_operation_table",
    "EvaluationResult",
    "FoldState",
    "PendingBinaryOperation",
    "Reducer",
    "build_reducer",
    "canonicalize",
    "canonical_json_str",
    "CalcBrainError",
    "InvalidEventError",
    "InvalidTransitionError",
]
