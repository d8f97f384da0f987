"""Strength analyzer — scores length and character variety.

Formula:
    score = min(len, 16) * 2.5 + 15 per character class present

Classes are lowercase, uppercase, digits and symbols (anything else), so the
score tops out at 100. No dictionary or entropy modelling happens here; the
common list and the weak patterns are separate analyzers.
"""

from __future__ import annotations

from pass_audit.model import AnalyzerType, Severity
from pass_audit.model.finding import Finding, Span, assign_finding_ids, make_fingerprint
from pass_audit.model.result import StrengthResult
from pass_audit.policy.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds
from pass_audit.rules import PW_LOW_STRENGTH_001

_LENGTH_CAP = 16
_POINTS_PER_CHAR = 2.5
_POINTS_PER_CLASS = 15

# (minimum score, label), best first
_LABELS: tuple[tuple[int, str], ...] = (
    (80, "Very Strong"),
    (60, "Strong"),
    (40, "Medium"),
    (20, "Weak"),
    (0, "Very Weak"),
)


def character_classes(password: str) -> dict[str, int]:
    """Count lowercase, uppercase, digit and symbol characters."""
    counts = {"lowercase": 0, "uppercase": 0, "digits": 0, "symbols": 0}
    for ch in password:
        if "a" <= ch <= "z":
            counts["lowercase"] += 1
        elif "A" <= ch <= "Z":
            counts["uppercase"] += 1
        elif "0" <= ch <= "9":
            counts["digits"] += 1
        else:
            counts["symbols"] += 1
    return counts


def _label_for(score: int) -> str:
    for minimum, label in _LABELS:
        if score >= minimum:
            return label
    return _LABELS[-1][1]


def analyze_strength(password: str) -> StrengthResult:
    """Return the 0-100 strength score, its label and the meter CSS class."""
    classes = character_classes(password)
    points = min(len(password), _LENGTH_CAP) * _POINTS_PER_CHAR
    points += _POINTS_PER_CLASS * sum(1 for n in classes.values() if n)
    score = max(0, min(100, int(round(points))))
    text = _label_for(score)
    css_class = "strength-" + text.lower().replace(" ", "-")
    return StrengthResult(score=score, text=text, css_class=css_class)


# ── Analyzer class ──────────────────────────────────────────────────────


class StrengthAnalyzer:
    """Flags passwords whose strength score falls in the red tier."""

    id: str = "strength"
    version: str = "1.0.0"

    def __init__(self, thresholds: ScoreThresholds = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def run(self, password: str) -> list[Finding]:
        strength = analyze_strength(password)
        if strength.score >= self.thresholds.yellow_min:
            return []
        span = Span(0, len(password))
        finding = Finding(
            finding_id="",
            type=AnalyzerType.STRENGTH,
            severity=Severity.HIGH if strength.score < 20 else Severity.MEDIUM,
            confidence=0.7,
            message=f"Low strength score {strength.score}/100 ({strength.text})",
            span=span,
            fingerprint=make_fingerprint(PW_LOW_STRENGTH_001, span, str(strength.score)),
            metadata={"rule_id": PW_LOW_STRENGTH_001, "score": strength.score},
        )
        return assign_finding_ids([finding], "st")
