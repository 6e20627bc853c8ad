"""
Canonical serialization for programs and evaluation results.

Used wherever the engine's output has to be compared or emitted as JSON:
equal programs and results must produce byte-identical JSON.
"""

import json
import math
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested program/result data to canonical form.

    Rules:
    - objects exposing to_dict() are converted first
    - dict keys sorted alphabetically
    - tuples converted to lists
    - non-finite floats become the strings "nan", "inf", "-inf"
      (strict JSON has no literal for them)
    """
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return repr(obj)
    return obj


def canonical_json_str(obj: Any, indent: Any = None) -> str:
    """
    Deterministic JSON string.

    Compact separators unless indent is given; ensure_ascii=False keeps
    operator symbols such as "√" and "×" readable.
    """
    canon = canonicalize(obj)
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(canon, sort_keys=True, separators=separators, ensure_ascii=False, allow_nan=False, indent=indent)
