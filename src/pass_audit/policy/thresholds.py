"""Score → tier → exit-code policy — single source of truth.

Every layer (checker, CLI exit-code, report styling) must derive tier,
security level and exit-code from this module instead of hard-coding
thresholds locally.
"""

from __future__ import annotations

from dataclasses import dataclass

from pass_audit.model import RiskLevel, SecurityLevel
from pass_audit.utils.exit_codes import ExitCode


@dataclass(frozen=True, slots=True)
class ScoreThresholds:
    """Tunable thresholds for score → tier mapping."""

    green_min: int = 60
    yellow_min: int = 40

    def __post_init__(self) -> None:
        if not 0 <= self.yellow_min <= self.green_min <= 100:
            raise ValueError(
                f"thresholds must satisfy 0 <= yellow_min <= green_min <= 100, "
                f"got yellow_min={self.yellow_min}, green_min={self.green_min}"
            )


DEFAULT_THRESHOLDS = ScoreThresholds()


def tier_from_score(
    score: int,
    *,
    thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
) -> RiskLevel:
    """Map a 0-100 strength score to a ``RiskLevel`` tier.

    Policy: ≥60 green, 40-59 yellow, <40 red.
    """
    if score >= thresholds.green_min:
        return RiskLevel.GREEN
    if score >= thresholds.yellow_min:
        return RiskLevel.YELLOW
    return RiskLevel.RED


def security_tier(
    score: int,
    is_common: bool,
    weak_detected: bool,
    *,
    thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
) -> RiskLevel:
    """Combine strength with the list/pattern checks.

    A common password is always red. Weak patterns cap the tier at yellow.
    """
    if is_common:
        return RiskLevel.RED
    tier = tier_from_score(score, thresholds=thresholds)
    if weak_detected and tier == RiskLevel.GREEN:
        return RiskLevel.YELLOW
    return tier


def security_level_from_tier(tier: RiskLevel) -> SecurityLevel:
    """green → success, yellow → warning, red → danger."""
    if tier == RiskLevel.GREEN:
        return SecurityLevel.SUCCESS
    if tier == RiskLevel.YELLOW:
        return SecurityLevel.WARNING
    return SecurityLevel.DANGER


def get_security_level(
    score: int,
    is_common: bool,
    weak_detected: bool,
    *,
    thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
) -> SecurityLevel:
    """Feedback styling for a password: success, warning or danger."""
    return security_level_from_tier(
        security_tier(score, is_common, weak_detected, thresholds=thresholds)
    )


def exit_code_from_tier(tier: RiskLevel) -> int:
    """Map a ``RiskLevel`` tier to a CLI exit code.

    Policy: green → 0, yellow → 1, red → 2.
    """
    if tier == RiskLevel.GREEN:
        return ExitCode.SUCCESS
    if tier == RiskLevel.YELLOW:
        return ExitCode.VIOLATION
    return ExitCode.ERROR
