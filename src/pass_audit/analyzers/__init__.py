"""Analyzers produce raw findings from a single password.

Every analyzer is a small class exposing ``id``, ``version`` and
``run(password) -> list[Finding]`` and is driven by ``core.checker``.
Each module also exposes the plain helper the checker uses to fill the
summary fields of ``AnalysisResult`` (``check_if_common``,
``check_weak_patterns``, ``analyze_strength``).

Available analyzers:
    - CommonPasswordAnalyzer: exact and partial hits in the common list
    - WeakPatternAnalyzer: the weak-pattern regex table
    - StrengthAnalyzer: flags passwords whose strength score is low
"""

from __future__ import annotations

from typing import Protocol

from pass_audit.model.finding import Finding


class Analyzer(Protocol):
    """Every analyzer must expose ``id``, ``version``, and ``run()``."""

    id: str
    version: str

    def run(self, password: str) -> list[Finding]:
        """Analyze *password* and return findings."""
        ...


# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "CommonPasswordAnalyzer":
        from .common import CommonPasswordAnalyzer
        return CommonPasswordAnalyzer
    if name == "WeakPatternAnalyzer":
        from .patterns import WeakPatternAnalyzer
        return WeakPatternAnalyzer
    if name == "StrengthAnalyzer":
        from .strength import StrengthAnalyzer
        return StrengthAnalyzer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
