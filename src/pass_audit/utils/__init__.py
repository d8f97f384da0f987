"""Shared utilities for pass_audit."""

from pass_audit.utils.determinism import (
    FIXED_TIMESTAMP,
    deterministic_run_id,
    deterministic_timestamp,
    env_requires_ci_mode,
)
from pass_audit.utils.exit_codes import ExitCode
from pass_audit.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "FIXED_TIMESTAMP",
    "ExitCode",
    "deterministic_run_id",
    "deterministic_timestamp",
    "env_requires_ci_mode",
    "stable_json_dump",
    "stable_json_dumps",
]
