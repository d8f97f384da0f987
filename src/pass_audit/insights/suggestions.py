"""Improvement suggestions — plain-language fixes for a checked password.

An empty list means nothing is left to fix.
"""

from __future__ import annotations

from typing import Iterable

from pass_audit.analyzers.common import check_if_common, common_elements
from pass_audit.analyzers.patterns import check_weak_patterns
from pass_audit.analyzers.strength import character_classes

RECOMMENDED_LENGTH = 12

SUGGEST_LENGTH = f"Use at least {RECOMMENDED_LENGTH} characters"
SUGGEST_UPPER = "Add uppercase letters (A-Z)"
SUGGEST_LOWER = "Add lowercase letters (a-z)"
SUGGEST_DIGIT = "Include numbers (0-9)"
SUGGEST_SYMBOL = "Add special characters (!@#$%^&*)"
SUGGEST_NOT_COMMON = "Avoid passwords found in common password lists"
SUGGEST_SEQUENCE = "Avoid sequences like 123, abc or qwe"
SUGGEST_REPEAT = "Avoid repeating the same character"


def get_improvement_suggestions(password: str, extra: Iterable[str] = ()) -> list[str]:
    """Return suggestions in a fixed order: length, classes, lists, patterns."""
    extra = tuple(extra)
    suggestions: list[str] = []
    classes = character_classes(password)

    if len(password) < RECOMMENDED_LENGTH:
        suggestions.append(SUGGEST_LENGTH)
    if not classes["uppercase"]:
        suggestions.append(SUGGEST_UPPER)
    if not classes["lowercase"]:
        suggestions.append(SUGGEST_LOWER)
    if not classes["digits"]:
        suggestions.append(SUGGEST_DIGIT)
    if not classes["symbols"]:
        suggestions.append(SUGGEST_SYMBOL)

    if check_if_common(password, extra):
        suggestions.append(SUGGEST_NOT_COMMON)
    else:
        elements = common_elements(password, extra)
        if elements:
            suggestions.append(f"Avoid common words such as '{elements[0]}'")

    issues = check_weak_patterns(password).issues
    if "sequential patterns" in issues:
        suggestions.append(SUGGEST_SEQUENCE)
    if "repeated characters" in issues:
        suggestions.append(SUGGEST_REPEAT)

    return suggestions
