"""Result models — the immutable, schema-aligned analysis artifacts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pass_audit import __version__
from pass_audit.model import RiskLevel, SecurityLevel
from pass_audit.model.finding import Finding


@dataclass(frozen=True, slots=True)
class StrengthResult:
    """Length/variety strength: 0-100 score, label and meter CSS class."""

    score: int
    text: str
    css_class: str

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "text": self.text, "class": self.css_class}


@dataclass(frozen=True, slots=True)
class WeakPatternResult:
    """Outcome of the weak-pattern scan; ``issues`` keep table order."""

    detected: bool
    issues: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"detected": self.detected, "issues": list(self.issues)}


@dataclass(slots=True)
class AnalysisResult:
    """Everything known about one password.

    Constructed by ``core.checker.analyze`` after all analyzers finish.
    The password itself is not part of the serialised form.
    """

    length: int
    strength: StrengthResult
    is_common: bool
    common_elements: list[str]
    weak_patterns: WeakPatternResult
    suggestions: list[str]
    security_level: SecurityLevel
    tier: RiskLevel
    findings: list[Finding] = field(default_factory=list)

    @property
    def looks_strong(self) -> bool:
        return not self.suggestions

    def to_dict(self) -> dict[str, Any]:
        by_severity: dict[str, int] = {}
        for f in self.findings:
            by_severity[f.severity.value] = by_severity.get(f.severity.value, 0) + 1
        return {
            "length": self.length,
            "strength": self.strength.to_dict(),
            "is_common": self.is_common,
            "common_elements": list(self.common_elements),
            "weak_patterns": self.weak_patterns.to_dict(),
            "suggestions": list(self.suggestions),
            "security_level": self.security_level.value,
            "tier": self.tier.value,
            "counts": {
                "findings_total": len(self.findings),
                "by_severity": by_severity,
            },
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass(slots=True)
class GeneratedPassword:
    """A produced password, the label of its style, and its analysis."""

    label: str
    password: str
    analysis: AnalysisResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "password": self.password,
            "analysis": self.analysis.to_dict(),
        }


@dataclass(slots=True)
class DetailedAnalysis:
    """Character-class breakdown used by the editor."""

    length: int
    lowercase: int
    uppercase: int
    digits: int
    symbols: int
    strength: StrengthResult
    is_common: bool
    weak_patterns: WeakPatternResult
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "counts": {
                "lowercase": self.lowercase,
                "uppercase": self.uppercase,
                "digits": self.digits,
                "symbols": self.symbols,
            },
            "strength": self.strength.to_dict(),
            "is_common": self.is_common,
            "weak_patterns": self.weak_patterns.to_dict(),
            "summary": self.summary,
        }


def _now_iso_utc() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(slots=True)
class RunInfo:
    """Run metadata shared by every emitted document."""

    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=_now_iso_utc)
    tool_version: str = __version__
    command: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "created_at": self.created_at,
            "tool_version": self.tool_version,
            "command": self.command,
        }


@dataclass(slots=True)
class CheckResult:
    """Output of ``check``: one analysed password."""

    analysis: AnalysisResult
    run: RunInfo = field(default_factory=RunInfo)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "analysis_result_v1",
            "run": self.run.to_dict(),
            "analysis": self.analysis.to_dict(),
        }


@dataclass(slots=True)
class GenerationResult:
    """Output of ``generate`` and ``variations``."""

    passwords: list[GeneratedPassword]
    run: RunInfo = field(default_factory=RunInfo)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "generation_result_v1",
            "run": self.run.to_dict(),
            "passwords": [p.to_dict() for p in self.passwords],
        }


@dataclass(slots=True)
class EditResult:
    """Output of ``edit``: a detailed breakdown plus improved rewrites."""

    analysis: DetailedAnalysis
    improved: list[GeneratedPassword]
    run: RunInfo = field(default_factory=RunInfo)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "edit_result_v1",
            "run": self.run.to_dict(),
            "analysis": self.analysis.to_dict(),
            "improved": [p.to_dict() for p in self.improved],
        }
