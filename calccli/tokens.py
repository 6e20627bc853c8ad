"""
Token mapping between command-line text and engine calls.

This is the host side of the engine: it decides which text is a number, a
variable or an operation symbol, and renders results for display.
"""

import re
from typing import Dict, Iterable, Optional, Tuple

from calcbrain import CalculatorBrain, EvaluationResult
from calcbrain.core.description import format_operand

NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
VARIABLE_PREFIX = "$"

# ASCII spellings for symbols that are awkward to type
ALIASES: Dict[str, str] = {
    "*": "×",
    "x": "×",
    "/": "÷",
    "-": "−",
    "sqrt": "√",
    "pi": "π",
    "neg": "±",
    "+/-": "±",
}

UNDO_TOKENS = ("undo",)
CLEAR_TOKENS = ("clear", "C")


def apply_token(brain: CalculatorBrain, token: str) -> str:
    """
    Feed one token to the brain.

    Returns:
        What the token was treated as: "operand", "variable", "operation",
        "undo" or "clear"
    """
    if token in UNDO_TOKENS:
        brain.undo()
        return "undo"
    if token in CLEAR_TOKENS:
        brain.clear()
        return "clear"
    if NUMBER_RE.match(token):
        brain.set_operand(float(token))
        return "operand"
    if token.startswith(VARIABLE_PREFIX) and len(token) > 1:
        brain.set_variable(token[len(VARIABLE_PREFIX):])
        return "variable"
    brain.perform_operation(ALIASES.get(token, token))
    return "operation"


def apply_tokens(brain: CalculatorBrain, tokens: Iterable[str]) -> None:
    for token in tokens:
        apply_token(brain, token)


def parse_assignment(text: str) -> Tuple[str, float]:
    """
    Parse NAME=VALUE.

    Raises:
        ValueError: If text is not a valid assignment
    """
    name, sep, value = text.partition("=")
    name = name.strip().lstrip(VARIABLE_PREFIX)
    if not sep or not name:
        raise ValueError(f"Expected NAME=VALUE, got {text!r}")
    try:
        return name, float(value)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {value!r}") from None


def parse_assignments(items: Iterable[str]) -> Dict[str, float]:
    variables: Dict[str, float] = {}
    for item in items:
        name, value = parse_assignment(item)
        variables[name] = value
    return variables


def format_result(result: Optional[float]) -> str:
    if result is None:
        return "(none)"
    return format_operand(result)


def format_description(evaluation: EvaluationResult) -> str:
    """Description with " ..." while pending and " =" once settled."""
    if not evaluation.description:
        return ""
    suffix = "..." if evaluation.is_pending else "="
    return f"{evaluation.description} {suffix}"
