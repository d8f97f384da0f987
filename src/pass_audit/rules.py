"""Canonical rule ID registry.

Single source of truth for all rule IDs emitted by pass-audit analyzers.

Structure:
  PUBLIC_RULE_IDS       - stable, supported, safe for downstream consumption
  EXPERIMENTAL_RULE_IDS - unstable, may change or be removed
  ALL_RULE_IDS          - union of all buckets (internal use only)
"""

from __future__ import annotations

# ── Common password database (public) ──────────────────────────────
PW_COMMON_EXACT_001 = "PW_COMMON_EXACT_001"
PW_COMMON_ELEMENT_001 = "PW_COMMON_ELEMENT_001"

# ── Weak patterns (public) ──────────────────────────────────────────
PW_ALL_LOWER_001 = "PW_ALL_LOWER_001"
PW_ALL_UPPER_001 = "PW_ALL_UPPER_001"
PW_ALL_DIGITS_001 = "PW_ALL_DIGITS_001"
PW_REPEATED_CHAR_001 = "PW_REPEATED_CHAR_001"
PW_SEQUENCE_001 = "PW_SEQUENCE_001"
PW_COMMON_START_001 = "PW_COMMON_START_001"
PW_TOO_SHORT_001 = "PW_TOO_SHORT_001"
PW_COMMON_WORD_001 = "PW_COMMON_WORD_001"

# ── Strength (experimental) ─────────────────────────────────────────
PW_LOW_STRENGTH_001 = "PW_LOW_STRENGTH_001"

# ── Buckets ─────────────────────────────────────────────────────────

PUBLIC_RULE_IDS: list[str] = sorted([
    # Common password database
    PW_COMMON_EXACT_001,
    PW_COMMON_ELEMENT_001,
    # Weak patterns
    PW_ALL_LOWER_001,
    PW_ALL_UPPER_001,
    PW_ALL_DIGITS_001,
    PW_REPEATED_CHAR_001,
    PW_SEQUENCE_001,
    PW_COMMON_START_001,
    PW_TOO_SHORT_001,
    PW_COMMON_WORD_001,
])

EXPERIMENTAL_RULE_IDS: list[str] = sorted([
    PW_LOW_STRENGTH_001,
])

# Union of all buckets (internal use only)
ALL_RULE_IDS: list[str] = sorted(set(PUBLIC_RULE_IDS + EXPERIMENTAL_RULE_IDS))


def _assert_rule_registry_invariants() -> None:
    """Fail fast on invariant violations at import time."""
    import re

    rule_re = re.compile(r"^[A-Z]{2,4}_[A-Z][A-Z0-9_]*_[0-9]{3}$")

    for name, ids in (
        ("PUBLIC_RULE_IDS", PUBLIC_RULE_IDS),
        ("EXPERIMENTAL_RULE_IDS", EXPERIMENTAL_RULE_IDS),
    ):
        if len(ids) != len(set(ids)):
            raise AssertionError(f"{name} must contain unique IDs")
        bad = [x for x in ids if not rule_re.match(x)]
        if bad:
            raise AssertionError(f"{name} contains invalid rule IDs: {bad}")

    overlap = set(PUBLIC_RULE_IDS) & set(EXPERIMENTAL_RULE_IDS)
    if overlap:
        raise AssertionError(
            f"Rule ID buckets must be disjoint; overlaps: {sorted(overlap)}"
        )


_assert_rule_registry_invariants()
