"""Enums shared across the analyzers, generator and report layers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Internal severity — maps to three user-facing tiers via policy/."""

    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskLevel(str, Enum):
    """User-facing security tier — maximum three levels."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class SecurityLevel(str, Enum):
    """Feedback box styling shown next to a password."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class AnalyzerType(str, Enum):
    """Canonical analyzer identifiers."""

    COMMON = "common"
    PATTERN = "pattern"
    STRENGTH = "strength"


class PasswordStyle(str, Enum):
    """Layouts available to the generator."""

    CAMEL_CASE = "camelCase"
    UNDERSCORE = "underscore"
    SYMBOLS = "symbols"
    LEETSPEAK = "leetspeak"

    @classmethod
    def parse(cls, value: "str | PasswordStyle | None") -> "PasswordStyle":
        """Resolve *value* to a style; anything unknown falls back to camelCase."""
        if isinstance(value, PasswordStyle):
            return value
        for style in cls:
            if style.value == value:
                return style
        return cls.CAMEL_CASE
