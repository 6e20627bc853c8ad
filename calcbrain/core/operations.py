"""
Operation table: symbol -> operation kind.

The table is built once and exposed read-only. Engines share it by
reference; hosts that need extra symbols build their own table with
build_operation_table(extra=...).
"""

import math
import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union


@dataclass(frozen=True)
class Constant:
    value: float


@dataclass(frozen=True)
class Nullary:
    fn: Callable[[], float]


@dataclass(frozen=True)
class Unary:
    fn: Callable[[float], float]


@dataclass(frozen=True)
class Binary:
    fn: Callable[[float, float], float]


@dataclass(frozen=True)
class Equals:
    pass


OperationKind = Union[Constant, Nullary, Unary, Binary, Equals]


# Python raises where IEEE-754 produces inf/nan; these keep float semantics.

def _sqrt(x: float) -> float:
    if x < 0:
        return math.nan
    return math.sqrt(x)


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _trig(fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        if math.isinf(x):
            return math.nan
        return fn(x)

    apply.__name__ = fn.__name__
    return apply


def _negate(x: float) -> float:
    return -x


def _multiply(a: float, b: float) -> float:
    return a * b


def _add(a: float, b: float) -> float:
    return a + b


def _subtract(a: float, b: float) -> float:
    return a - b


def build_operation_table(
    rng: Callable[[], float] = random.random,
    extra: Optional[Mapping[str, OperationKind]] = None,
) -> Mapping[str, OperationKind]:
    """
    Build a read-only operation table.

    Args:
        rng: Source for the "rnd" nullary operation, uniform in [0, 1)
        extra: Additional symbols; these override the defaults on collision

    Returns:
        MappingProxyType over symbol -> operation kind
    """
    table = {
        "π": Constant(math.pi),
        "e": Constant(math.e),
        "√": Unary(_sqrt),
        "cos": Unary(_trig(math.cos)),
        "sin": Unary(_trig(math.sin)),
        "tan": Unary(_trig(math.tan)),
        "±": Unary(_negate),
        "×": Binary(_multiply),
        "÷": Binary(_divide),
        "+": Binary(_add),
        "−": Binary(_subtract),
        "=": Equals(),
        "rnd": Nullary(rng),
    }
    if extra:
        table.update(extra)
    return MappingProxyType(table)


OPERATIONS = build_operation_table()


def kind_name(operation: OperationKind) -> str:
    """Human-readable kind label, e.g. for listing the table."""
    return type(operation).__name__.lower()
