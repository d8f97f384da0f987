"""Weak-pattern analyzer — a fixed table of regular-expression heuristics."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pass_audit.model import AnalyzerType, Severity
from pass_audit.model.finding import Finding, Span, assign_finding_ids, make_fingerprint
from pass_audit.model.result import WeakPatternResult
from pass_audit.rules import (
    PW_ALL_DIGITS_001,
    PW_ALL_LOWER_001,
    PW_ALL_UPPER_001,
    PW_COMMON_START_001,
    PW_COMMON_WORD_001,
    PW_REPEATED_CHAR_001,
    PW_SEQUENCE_001,
    PW_TOO_SHORT_001,
)


@dataclass(frozen=True, slots=True)
class WeakPattern:
    rule_id: str
    pattern: re.Pattern[str]
    message: str
    severity: Severity


# Order matters: issues are reported in table order.
WEAK_PATTERNS: tuple[WeakPattern, ...] = (
    WeakPattern(PW_ALL_LOWER_001, re.compile(r"^[a-z]+\Z"), "all lowercase letters", Severity.MEDIUM),
    WeakPattern(PW_ALL_UPPER_001, re.compile(r"^[A-Z]+\Z"), "all uppercase letters", Severity.MEDIUM),
    WeakPattern(PW_ALL_DIGITS_001, re.compile(r"^[0-9]+\Z"), "all numbers", Severity.HIGH),
    WeakPattern(PW_REPEATED_CHAR_001, re.compile(r"^(.)\1+\Z"), "repeated characters", Severity.HIGH),
    WeakPattern(PW_SEQUENCE_001, re.compile(r"(123|abc|qwe)", re.IGNORECASE), "sequential patterns", Severity.LOW),
    WeakPattern(
        PW_COMMON_START_001,
        re.compile(r"^(password|admin|user|test)", re.IGNORECASE),
        "common password start",
        Severity.MEDIUM,
    ),
    WeakPattern(PW_TOO_SHORT_001, re.compile(r"^.{1,5}\Z"), "too short", Severity.HIGH),
    WeakPattern(
        PW_COMMON_WORD_001,
        re.compile(r"(password|admin|login|user)", re.IGNORECASE),
        "common words",
        Severity.LOW,
    ),
)


def check_weak_patterns(password: str) -> WeakPatternResult:
    """Return every weak-pattern message matching *password*, in table order."""
    issues = tuple(wp.message for wp in WEAK_PATTERNS if wp.pattern.search(password))
    return WeakPatternResult(detected=bool(issues), issues=issues)


# ── Analyzer class ──────────────────────────────────────────────────────


class WeakPatternAnalyzer:
    """One finding per matching row of ``WEAK_PATTERNS``."""

    id: str = "pattern"
    version: str = "1.0.0"

    def run(self, password: str) -> list[Finding]:
        findings: list[Finding] = []
        for wp in WEAK_PATTERNS:
            m = wp.pattern.search(password)
            if m is None:
                continue
            span = Span(m.start(), m.end())
            findings.append(
                Finding(
                    finding_id="",  # filled below
                    type=AnalyzerType.PATTERN,
                    severity=wp.severity,
                    confidence=0.9,
                    message=f"Weak pattern: {wp.message}",
                    span=span,
                    fingerprint=make_fingerprint(wp.rule_id, span),
                    metadata={"rule_id": wp.rule_id, "issue": wp.message},
                )
            )
        return assign_finding_ids(findings, "wp")
