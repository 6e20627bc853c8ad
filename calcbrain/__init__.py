"""
Calculator Evaluation Engine

Left-to-right calculator engine that replays a log of inputs through a pure
reducer to produce a result, a pending flag and an expression description.
"""

__version__ = "0.1.0"

from .brain import CalculatorBrain
from .core.state import EvaluationResult

__all__ = [
    "CalculatorBrain",
    "EvaluationResult",
    "__version__",
]
