"""
Tests for reducer purity and determinism.

Critical: Reducer must be pure (no side effects, deterministic).
"""

import pytest

from calcbrain.core.canonical import canonical_json_str
from calcbrain.core.errors import InvalidTransitionError
from calcbrain.core.events import Operand, Operation, Variable
from calcbrain.core.reducer import Reducer, build_reducer, resolve_pending
from calcbrain.core.state import EvaluationResult, FoldState, PendingBinaryOperation


def test_reducer_deterministic_output():
    """Same (state, event) must produce same output."""
    r = build_reducer()
    s0 = FoldState(accumulator=4.0, description="4")
    e = Operation("+")

    s1 = r.apply(s0, e)
    s2 = r.apply(s0, e)

    assert s1 == s2
    assert canonical_json_str(EvaluationResult.from_state(s1)) == canonical_json_str(EvaluationResult.from_state(s2))


def test_reducer_immutability():
    """Reducer must not mutate input state."""
    r = build_reducer()
    s0 = FoldState()

    s1 = r.apply(s0, Operand(42.0))

    assert s0 == FoldState()
    assert s1.accumulator == 42.0
    assert s1.description == "42"


def test_reducer_unregistered_kind_raises():
    r = Reducer()

    with pytest.raises(InvalidTransitionError):
        r.apply(FoldState(), Operand(1.0))


def test_reducer_custom_handler():
    r = Reducer()

    def double(state, ev, variables):
        return FoldState(accumulator=ev.value * 2)

    r.register("Operand", double)

    assert r.apply(FoldState(), Operand(3.0)).accumulator == 6.0


def test_variable_handler_reads_mapping():
    r = build_reducer()

    assert r.apply(FoldState(), Variable("M"), {"M": 2.5}).accumulator == 2.5
    assert r.apply(FoldState(), Variable("M")).accumulator == 0.0
    assert r.apply(FoldState(), Variable("M"), {"N": 1.0}).description == "M"


def test_binary_snapshots_pending_operation():
    r = build_reducer()

    s = r.apply(FoldState(accumulator=4.0, description="4"), Operation("+"))

    assert s.accumulator is None
    assert s.pending is not None
    assert s.pending.first_operand == 4.0
    assert s.pending.symbol == "+"
    assert s.description == "4 +"
    assert s.pending_description == ""


def test_resolve_pending_requires_both_parts():
    pending = PendingBinaryOperation(fn=lambda a, b: a - b, first_operand=10.0, symbol="−")

    dangling = FoldState(pending=pending, description="10 −")
    assert resolve_pending(dangling) == dangling

    idle = FoldState(accumulator=3.0, description="3")
    assert resolve_pending(idle) == idle

    ready = FoldState(accumulator=3.0, pending=pending, description="10 −", pending_description="3")
    resolved = resolve_pending(ready)
    assert resolved == FoldState(accumulator=7.0, description="10 − 3")


def test_reducer_sequence_determinism():
    """Sequence of events must produce deterministic result."""
    r = build_reducer()
    events = [Operand(5.0), Operation("+"), Operand(2.0), Operation("×"), Operand(3.0), Operation("=")]

    results = []
    for _ in range(10):
        s = FoldState()
        for e in events:
            s = r.apply(s, e)
        results.append(canonical_json_str(EvaluationResult.from_state(s)))

    assert len(set(results)) == 1

    final = FoldState()
    for e in events:
        final = r.apply(final, e)
    # (5+2)*3 = 21
    assert final.accumulator == 21.0
    assert final.full_description() == "5 + 2 × 3"
