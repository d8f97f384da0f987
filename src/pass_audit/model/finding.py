"""Finding — the normalized analyzer output for a single password weakness."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from . import AnalyzerType, Severity


@dataclass(frozen=True, slots=True)
class Span:
    """Character range inside the analysed password (end exclusive)."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Finding:
    """Immutable, schema-aligned analyzer finding.

    Corresponds to ``findings[]`` in ``analysis_result.schema.json``.
    The matched text itself is never stored, only its span.
    """

    finding_id: str
    type: AnalyzerType
    severity: Severity
    confidence: float          # 0.0 – 1.0
    message: str
    span: Span
    fingerprint: str
    metadata: dict = field(default_factory=dict)

    @property
    def rule_id(self) -> str:
        return self.metadata.get("rule_id", "")

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {
            "finding_id": self.finding_id,
            "type": self.type.value,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "message": self.message,
            "span": {"start": self.span.start, "end": self.span.end},
            "fingerprint": self.fingerprint,
        }
        if self.metadata:
            d["metadata"] = dict(self.metadata)
        return d


def make_fingerprint(rule_id: str, span: Span, detail: str = "") -> str:
    """Deterministic finding fingerprint: sha256(rule|start:end|detail).

    *detail* must not contain password text.
    """
    payload = "|".join([rule_id, f"{span.start}:{span.end}", detail.strip()])
    return "sha256:" + hashlib.sha256(payload.encode()).hexdigest()


def assign_finding_ids(findings: list[Finding], prefix: str) -> list[Finding]:
    """Assign stable finding IDs (fingerprint-based) in place and return the list."""
    for i, f in enumerate(findings):
        object.__setattr__(f, "finding_id", f"{prefix}_{f.fingerprint[7:15]}_{i:04d}")
    return findings
