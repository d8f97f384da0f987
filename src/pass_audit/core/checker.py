"""Checker — runs the analyzers over one password and builds AnalysisResult."""

from __future__ import annotations

import logging

from pass_audit.analyzers import Analyzer
from pass_audit.analyzers.common import CommonPasswordAnalyzer, check_if_common, common_elements
from pass_audit.analyzers.patterns import WeakPatternAnalyzer, check_weak_patterns
from pass_audit.analyzers.strength import StrengthAnalyzer, analyze_strength
from pass_audit.core.config import AuditConfig
from pass_audit.insights.suggestions import get_improvement_suggestions
from pass_audit.model.facts import InputValidationError
from pass_audit.model.finding import Finding
from pass_audit.model.result import AnalysisResult
from pass_audit.policy.thresholds import security_level_from_tier, security_tier

_logger = logging.getLogger(__name__)


def default_analyzers(config: AuditConfig) -> list[Analyzer]:
    """The standard analyzer set, configured from *config*."""
    return [
        CommonPasswordAnalyzer(extra=config.extra_common_passwords),
        WeakPatternAnalyzer(),
        StrengthAnalyzer(thresholds=config.thresholds),
    ]


def analyze(
    password: str,
    *,
    config: AuditConfig | None = None,
    analyzers: list[Analyzer] | None = None,
) -> AnalysisResult:
    """Execute all *analyzers* against *password* and assemble the result.

    Summary fields (strength, common flag, weak patterns, suggestions) come
    from the analyzer modules' helpers; ``findings`` come from the
    analyzers themselves.
    """
    cfg = config or AuditConfig()
    active = analyzers if analyzers is not None else default_analyzers(cfg)

    # ── 1. run every analyzer ───────────────────────────────────────
    findings: list[Finding] = []
    for analyzer in active:
        analyzer_id = getattr(analyzer, "id", type(analyzer).__name__)
        try:
            results = analyzer.run(password)
        except Exception:
            _logger.exception("Analyzer '%s' raised an exception — skipped", analyzer_id)
            continue
        _logger.debug("Analyzer '%s' produced %d finding(s)", analyzer_id, len(results))
        findings.extend(results)

    # ── 2. summary fields ───────────────────────────────────────────
    extra = cfg.extra_common_passwords
    strength = analyze_strength(password)
    is_common = check_if_common(password, extra)
    weak = check_weak_patterns(password)
    tier = security_tier(
        strength.score, is_common, weak.detected, thresholds=cfg.thresholds
    )

    # ── 3. assemble ─────────────────────────────────────────────────
    return AnalysisResult(
        length=len(password),
        strength=strength,
        is_common=is_common,
        common_elements=common_elements(password, extra),
        weak_patterns=weak,
        suggestions=get_improvement_suggestions(password, extra),
        security_level=security_level_from_tier(tier),
        tier=tier,
        findings=findings,
    )


def check_password(password: str | None, *, config: AuditConfig | None = None) -> AnalysisResult:
    """Analyse a user-supplied password.

    Raises
    ------
    InputValidationError
        If *password* is empty.
    """
    if not password:
        raise InputValidationError("Please enter a password to check")
    return analyze(password, config=config)
