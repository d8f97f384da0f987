"""Determinism helpers for reproducible output.

When --ci / --deterministic mode is enabled timestamps are fixed to a known
epoch and run IDs are derived from the command name, so two runs over the
same input emit byte-identical JSON.
"""

from __future__ import annotations

import hashlib
import os
import uuid
from datetime import datetime, timezone

# Fixed timestamp for CI mode (ISO 8601 with timezone)
FIXED_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def env_requires_ci_mode() -> bool:
    """Return True when the environment asks for deterministic output."""
    if os.getenv("PASS_AUDIT_DETERMINISTIC") == "1":
        return True
    return os.getenv("CI", "").lower() in ("1", "true", "yes", "on")


def deterministic_timestamp(ci_mode: bool = False) -> str:
    """FIXED_TIMESTAMP in CI mode, otherwise the current UTC time."""
    if ci_mode:
        return FIXED_TIMESTAMP
    return datetime.now(timezone.utc).isoformat()


def deterministic_run_id(command: str, ci_mode: bool = False) -> str:
    """Generate a run ID.

    In CI mode the ID is a hash of the command name only; password text
    never feeds into it.
    """
    if ci_mode:
        digest = hashlib.sha256(command.encode("utf-8")).hexdigest()[:16]
        return f"ci-{digest}"
    return f"run-{uuid.uuid4().hex[:16]}"
