"""Common-password analyzer — matches against a small static database.

v1 scope: the demonstration subset below plus any entries added through
configuration. Exact hits (case-insensitive) are critical; longer entries
embedded inside an otherwise unique password are reported as elements.
"""

from __future__ import annotations

from typing import Iterable

from pass_audit.model import AnalyzerType, Severity
from pass_audit.model.finding import Finding, Span, assign_finding_ids, make_fingerprint
from pass_audit.rules import PW_COMMON_ELEMENT_001, PW_COMMON_EXACT_001

# Common passwords database (subset for demonstration)
COMMON_PASSWORDS: tuple[str, ...] = (
    "password", "123456", "password123", "admin", "qwerty", "letmein",
    "welcome", "monkey", "1234567890", "abc123", "Password1", "password1",
    "user", "test", "guest", "root", "12345", "123456789", "qwerty123",
    "iloveyou", "princess", "dragon", "sunshine", "master", "shadow",
    "football", "baseball", "basketball", "soccer", "hockey", "tennis",
    "000000", "111111", "222222", "333333", "444444", "555555",
    "passw0rd", "p@ssword", "p@ssw0rd", "password!", "Password!",
    "login", "hello", "world", "computer", "internet", "security",
)

# Four-letter entries ("user", "test", "root") match far too many real words.
_MIN_ELEMENT_LENGTH = 5


def _database(extra: Iterable[str] = ()) -> tuple[str, ...]:
    extra = tuple(e for e in extra if e)
    return COMMON_PASSWORDS + extra if extra else COMMON_PASSWORDS


def check_if_common(password: str, extra: Iterable[str] = ()) -> bool:
    """Return True when *password* is in the database.

    Exact membership is tried first, then a case-insensitive comparison.
    """
    if not password:
        return False
    db = _database(extra)
    if password in db:
        return True
    lowered = password.lower()
    return any(entry.lower() == lowered for entry in db)


def common_elements(password: str, extra: Iterable[str] = ()) -> list[str]:
    """Database entries embedded in *password*, in database order.

    Returns an empty list when the password is itself common; that case is
    covered by :func:`check_if_common`. Entries are de-duplicated
    case-insensitively.
    """
    if not password or check_if_common(password, extra):
        return []
    lowered = password.lower()
    seen: set[str] = set()
    hits: list[str] = []
    for entry in _database(extra):
        key = entry.lower()
        if len(key) < _MIN_ELEMENT_LENGTH or key in seen:
            continue
        if key in lowered:
            seen.add(key)
            hits.append(entry)
    return hits


# ── Analyzer class ──────────────────────────────────────────────────────


class CommonPasswordAnalyzer:
    """Finds passwords that are, or contain, entries of the common list.

    Rules:
      PW_COMMON_EXACT_001: the password is in the database
      PW_COMMON_ELEMENT_001: a database entry is embedded in the password
    """

    id: str = "common"
    version: str = "1.0.0"

    def __init__(self, extra: Iterable[str] = ()) -> None:
        self.extra: tuple[str, ...] = tuple(extra)

    def run(self, password: str) -> list[Finding]:
        findings: list[Finding] = []

        if check_if_common(password, self.extra):
            span = Span(0, len(password))
            findings.append(
                Finding(
                    finding_id="",  # filled below
                    type=AnalyzerType.COMMON,
                    severity=Severity.CRITICAL,
                    confidence=1.0,
                    message="Found in common passwords database",
                    span=span,
                    fingerprint=make_fingerprint(PW_COMMON_EXACT_001, span),
                    metadata={"rule_id": PW_COMMON_EXACT_001},
                )
            )
            return assign_finding_ids(findings, "cp")

        lowered = password.lower()
        for entry in common_elements(password, self.extra):
            start = lowered.find(entry.lower())
            span = Span(start, start + len(entry))
            findings.append(
                Finding(
                    finding_id="",
                    type=AnalyzerType.COMMON,
                    severity=Severity.MEDIUM,
                    confidence=0.8,
                    message="Contains common password elements",
                    span=span,
                    fingerprint=make_fingerprint(PW_COMMON_ELEMENT_001, span, entry.lower()),
                    metadata={"rule_id": PW_COMMON_ELEMENT_001, "element": entry},
                )
            )

        return assign_finding_ids(findings, "cp")
