"""
Tests for replay determinism.

Critical: Replay must produce identical results across multiple runs.
"""

from calcbrain import CalculatorBrain
from calcbrain.core.canonical import canonical_json_str
from calcbrain.core.events import Operand, Operation, Variable
from calcbrain.core.reducer import build_reducer
from calcbrain.log.program import Program
from calcbrain.replay.runner import replay


def _program():
    return Program([
        Operand(2.0),
        Operation("×"),
        Variable("M"),
        Operation("+"),
        Operand(1.0),
        Operation("="),
    ])


def test_replay_determinism_100_runs():
    """Replay same program 100 times must produce identical result."""
    program = _program()
    r = build_reducer()

    results = []
    for _ in range(100):
        result = replay(program, r, {"M": 4.0})
        results.append(canonical_json_str(result.to_evaluation()))

    assert len(set(results)) == 1

    final = replay(program, r, {"M": 4.0})
    assert final.to_evaluation().result == 9.0
    assert final.applied == 6


def test_replay_partial():
    """Replay to an index must match the shorter program."""
    program = _program()
    r = build_reducer()

    partial = replay(program, r, {"M": 4.0}, to_index=3)
    shorter = replay(Program(program.snapshot()[:3]), r, {"M": 4.0})

    assert partial.applied == 3
    assert partial.state == shorter.state
    assert partial.to_evaluation().is_pending is True
    assert partial.to_evaluation().description == "2 × M"


def test_replay_empty_program():
    """Replay of an empty program must return the initial state."""
    result = replay(Program(), build_reducer())

    assert result.applied == 0
    ev = result.to_evaluation()
    assert ev.result is None
    assert ev.is_pending is False
    assert ev.description == ""


def test_replay_depends_only_on_program_and_variables():
    """Call history of the brain must not leak into results."""
    a = CalculatorBrain()
    b = CalculatorBrain()
    for brain in (a, b):
        brain.set_variable("M")
        brain.perform_operation("+")
        brain.set_operand(1)

    # Query a repeatedly with other mappings first
    a.evaluate({"M": 100.0})
    a.evaluate()
    a.evaluate({"X": 1.0})

    assert a.evaluate({"M": 2.0}) == b.evaluate({"M": 2.0})


def test_evaluate_is_idempotent():
    brain = CalculatorBrain()
    brain.set_operand(9)
    brain.perform_operation("√")
    brain.perform_operation("+")

    first = brain.evaluate()
    assert all(brain.evaluate() == first for _ in range(20))
