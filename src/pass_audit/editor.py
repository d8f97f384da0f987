"""Editor — detailed breakdown of an existing password plus improved rewrites."""

from __future__ import annotations

import logging
from typing import Callable

from pass_audit.analyzers.common import check_if_common
from pass_audit.analyzers.patterns import check_weak_patterns
from pass_audit.analyzers.strength import analyze_strength, character_classes
from pass_audit.core.checker import analyze
from pass_audit.core.config import AuditConfig
from pass_audit.generator import to_leet_speak
from pass_audit.insights.suggestions import RECOMMENDED_LENGTH
from pass_audit.model.facts import InputValidationError
from pass_audit.model.result import DetailedAnalysis, GeneratedPassword

_logger = logging.getLogger(__name__)

_PADDING = "#Secure"
_CHUNK = 3


def get_detailed_analysis(
    password: str,
    *,
    config: AuditConfig | None = None,
) -> DetailedAnalysis:
    """Count character classes and summarise them in one paragraph."""
    cfg = config or AuditConfig()
    classes = character_classes(password)
    strength = analyze_strength(password)
    is_common = check_if_common(password, cfg.extra_common_passwords)
    weak = check_weak_patterns(password)

    parts = [
        f"Length: {len(password)} characters.",
        f"Contains {classes['lowercase']} lowercase, {classes['uppercase']} uppercase, "
        f"{classes['digits']} digits, {classes['symbols']} symbols.",
        f"Strength: {strength.text}.",
    ]
    if is_common:
        parts.append("Found in common passwords database.")
    if weak.detected:
        parts.append(f"Weak patterns: {', '.join(weak.issues)}.")

    return DetailedAnalysis(
        length=len(password),
        lowercase=classes["lowercase"],
        uppercase=classes["uppercase"],
        digits=classes["digits"],
        symbols=classes["symbols"],
        strength=strength,
        is_common=is_common,
        weak_patterns=weak,
        summary=" ".join(parts),
    )


def strengthen(text: str) -> str:
    """Patch missing character classes, then pad to the recommended length.

    Steps, in order: capitalise the first lowercase letter (or append ``Q``
    when there is none), append ``z`` when no lowercase remains, ``7`` when
    there is no digit, ``!`` when there is no symbol, then cycle through
    ``#Secure`` until the text is long enough.
    """
    classes = character_classes(text)
    if not classes["uppercase"]:
        idx = next((i for i, ch in enumerate(text) if "a" <= ch <= "z"), None)
        if idx is None:
            text += "Q"
        else:
            text = text[:idx] + text[idx].upper() + text[idx + 1:]
        classes = character_classes(text)
    if not classes["lowercase"]:
        text += "z"
    if not classes["digits"]:
        text += "7"
    if not classes["symbols"]:
        text += "!"
    i = 0
    while len(text) < RECOMMENDED_LENGTH:
        text += _PADDING[i % len(_PADDING)]
        i += 1
    return text


def _separate(text: str) -> str:
    return "_".join(text[i:i + _CHUNK] for i in range(0, len(text), _CHUNK))


# (label, rewrite applied before strengthen)
_REWRITES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("Strengthened", lambda s: s),
    ("Leet Speak", to_leet_speak),
    ("Separated", _separate),
)


def generate_improved_versions(
    password: str,
    *,
    config: AuditConfig | None = None,
) -> list[GeneratedPassword]:
    """Three deterministic rewrites of *password*, duplicates dropped."""
    cfg = config or AuditConfig()
    seen: set[str] = set()
    versions: list[GeneratedPassword] = []
    for label, rewrite in _REWRITES:
        candidate = strengthen(rewrite(password))
        if candidate in seen:
            continue
        seen.add(candidate)
        versions.append(
            GeneratedPassword(
                label=label,
                password=candidate,
                analysis=analyze(candidate, config=cfg),
            )
        )
    _logger.debug("Built %d improved version(s)", len(versions))
    return versions


def analyze_and_edit(
    password: str | None,
    *,
    config: AuditConfig | None = None,
) -> tuple[DetailedAnalysis, list[GeneratedPassword]]:
    """Detailed analysis of *password* and its improved versions.

    Raises
    ------
    InputValidationError
        If *password* is empty.
    """
    if not password:
        raise InputValidationError("Please enter a password to analyze")
    return (
        get_detailed_analysis(password, config=config),
        generate_improved_versions(password, config=config),
    )
