"""Tests for the weak-pattern table and WeakPatternAnalyzer."""

from __future__ import annotations

import pytest

from pass_audit.analyzers.patterns import WEAK_PATTERNS, WeakPatternAnalyzer, check_weak_patterns
from pass_audit.model import AnalyzerType
from pass_audit.rules import (
    ALL_RULE_IDS,
    PW_ALL_LOWER_001,
    PW_COMMON_START_001,
    PW_COMMON_WORD_001,
    PW_SEQUENCE_001,
)


class TestCheckWeakPatterns:
    """Issues are reported in table order."""

    @pytest.mark.parametrize(
        "password, expected",
        [
            ("password", ("all lowercase letters", "common password start", "common words")),
            ("PASSWORD", ("all uppercase letters", "common password start", "common words")),
            ("123456", ("all numbers", "sequential patterns")),
            ("aaaa", ("all lowercase letters", "repeated characters", "too short")),
            ("1111", ("all numbers", "repeated characters", "too short")),
            ("Xy9!k", ("too short",)),
            ("myAdminPanel9", ("common words",)),
            ("QWErty#2000", ("sequential patterns",)),
        ],
    )
    def test_issues(self, password: str, expected: tuple[str, ...]) -> None:
        result = check_weak_patterns(password)
        assert result.detected
        assert result.issues == expected

    def test_clean_password(self) -> None:
        result = check_weak_patterns("BuddyBlue19907")
        assert not result.detected
        assert result.issues == ()

    def test_empty_password_matches_nothing(self) -> None:
        assert not check_weak_patterns("").detected

    def test_six_chars_not_too_short(self) -> None:
        assert "too short" not in check_weak_patterns("Xy9!kz").issues

    def test_trailing_newline_defeats_whole_string_anchors(self) -> None:
        assert check_weak_patterns("abcdef\n").issues == ("sequential patterns",)
        assert check_weak_patterns("123456\n").issues == ("sequential patterns",)

    def test_trailing_newline_counts_toward_length(self) -> None:
        assert "too short" not in check_weak_patterns("Xy9!k\n").issues

    def test_table_has_eight_rows(self) -> None:
        assert len(WEAK_PATTERNS) == 8


class TestWeakPatternAnalyzer:
    def test_one_finding_per_matching_row(self) -> None:
        findings = WeakPatternAnalyzer().run("password")
        assert [f.rule_id for f in findings] == [
            PW_ALL_LOWER_001,
            PW_COMMON_START_001,
            PW_COMMON_WORD_001,
        ]
        assert all(f.type == AnalyzerType.PATTERN for f in findings)

    def test_message_and_metadata(self) -> None:
        f = WeakPatternAnalyzer().run("password")[0]
        assert f.message == "Weak pattern: all lowercase letters"
        assert f.metadata["issue"] == "all lowercase letters"

    def test_span_covers_match(self) -> None:
        findings = WeakPatternAnalyzer().run("Zz#123xx")
        seq = [f for f in findings if f.rule_id == PW_SEQUENCE_001]
        assert len(seq) == 1
        assert (seq[0].span.start, seq[0].span.end) == (3, 6)

    def test_ids_use_wp_prefix_and_index(self) -> None:
        findings = WeakPatternAnalyzer().run("password")
        assert [f.finding_id[:3] for f in findings] == ["wp_"] * 3
        assert [f.finding_id[-4:] for f in findings] == ["0000", "0001", "0002"]

    def test_rule_ids_registered(self) -> None:
        assert {wp.rule_id for wp in WEAK_PATTERNS} <= set(ALL_RULE_IDS)

    def test_no_findings_for_clean_password(self) -> None:
        assert WeakPatternAnalyzer().run("Buddy@Blue#1990!7") == []
