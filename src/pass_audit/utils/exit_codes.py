"""Process exit codes shared by every pass-audit command.

``check`` reuses them for tiers via ``policy.thresholds.exit_code_from_tier``;
``validate`` uses VIOLATION for a schema failure.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0    # green password, or the command completed
    VIOLATION = 1  # yellow password, or JSON that breaks its schema
    ERROR = 2      # red password, bad input/config, unreadable file
