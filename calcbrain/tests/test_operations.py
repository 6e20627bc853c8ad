"""
Tests for the operation table.
"""

import math

import pytest

from calcbrain.core.operations import (
    OPERATIONS,
    Binary,
    Constant,
    Equals,
    Nullary,
    Unary,
    build_operation_table,
    kind_name,
)


def test_table_contains_expected_symbols():
    assert set(OPERATIONS) == {"π", "e", "√", "cos", "sin", "tan", "±", "×", "÷", "+", "−", "=", "rnd"}


def test_table_kinds():
    assert OPERATIONS["π"] == Constant(math.pi)
    assert OPERATIONS["e"] == Constant(math.e)
    assert isinstance(OPERATIONS["√"], Unary)
    assert isinstance(OPERATIONS["±"], Unary)
    assert isinstance(OPERATIONS["×"], Binary)
    assert isinstance(OPERATIONS["="], Equals)
    assert isinstance(OPERATIONS["rnd"], Nullary)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        OPERATIONS["%"] = Unary(lambda x: x / 100)  # type: ignore[index]


def test_binary_functions():
    assert OPERATIONS["×"].fn(3.0, 4.0) == 12.0
    assert OPERATIONS["÷"].fn(3.0, 4.0) == 0.75
    assert OPERATIONS["+"].fn(3.0, 4.0) == 7.0
    assert OPERATIONS["−"].fn(3.0, 4.0) == -1.0


def test_division_follows_ieee():
    divide = OPERATIONS["÷"].fn

    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_unary_functions_follow_ieee():
    assert OPERATIONS["√"].fn(16.0) == 4.0
    assert math.isnan(OPERATIONS["√"].fn(-4.0))
    assert math.isnan(OPERATIONS["cos"].fn(math.inf))
    assert OPERATIONS["±"].fn(2.0) == -2.0


def test_injected_rng():
    table = build_operation_table(rng=lambda: 0.5)

    assert table["rnd"].fn() == 0.5
    # Default table untouched
    assert OPERATIONS["rnd"] is not table["rnd"]


def test_extra_overrides_defaults():
    table = build_operation_table(extra={"e": Constant(2.0)})

    assert table["e"] == Constant(2.0)
    assert OPERATIONS["e"] == Constant(math.e)


def test_kind_name():
    assert kind_name(OPERATIONS["π"]) == "constant"
    assert kind_name(OPERATIONS["="]) == "equals"
    assert kind_name(OPERATIONS["rnd"]) == "nullary"
