"""
Replay: evaluate a program from an empty fold state.

Must be 100% reproducible: same program + same variables -> same result
(programs using "rnd" excepted).
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
