"""
Program log.

This module provides:
- Program: in-memory ordered log of input events with clear/undo
"""

from .program import Program

__all__ = [
    "Program",
]
