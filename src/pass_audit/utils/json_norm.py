"""Canonical JSON serialization — single dump path for all CLI artifacts.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - Enums → their values, dataclasses → dicts
  - Optional CI-mode float rounding (4 digits)
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import IO, Any, Mapping


def _to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return obj
    if isinstance(obj, Enum):
        return _to_builtin(obj.value)
    if hasattr(obj, "to_dict"):
        return _to_builtin(obj.to_dict())
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_builtin(asdict(obj))
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_to_builtin(v) for v in obj]
    return str(obj)


def _round_floats(obj: Any, *, ndigits: int = 4) -> Any:
    """Recursively round floats for cross-platform determinism."""
    if isinstance(obj, float):
        return round(obj, ndigits)
    if isinstance(obj, Mapping):
        return {k: _round_floats(v, ndigits=ndigits) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_round_floats(v, ndigits=ndigits) for v in obj]
    return obj


def stable_json_dumps(
    obj: Any,
    *,
    ci_mode: bool = False,
    indent: int | None = 2,
) -> str:
    """Serialize *obj* with sorted keys and a trailing newline."""
    built = _to_builtin(obj)
    if ci_mode:
        built = _round_floats(built)
    return json.dumps(built, indent=indent, sort_keys=True, ensure_ascii=False) + "\n"


def stable_json_dump(
    obj: Any,
    fp: IO[str],
    *,
    ci_mode: bool = False,
    indent: int | None = 2,
) -> None:
    fp.write(stable_json_dumps(obj, ci_mode=ci_mode, indent=indent))
