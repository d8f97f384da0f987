"""Tests for the rule registry, JSON normalisation, determinism and logging."""

from __future__ import annotations

import io
import json
import logging
import re

import pytest

from pass_audit.analyzers.common import CommonPasswordAnalyzer
from pass_audit.analyzers.patterns import WeakPatternAnalyzer
from pass_audit.analyzers.strength import StrengthAnalyzer
from pass_audit.logging_config import setup_logging
from pass_audit.model import RiskLevel
from pass_audit.model.finding import Span, make_fingerprint
from pass_audit.rules import ALL_RULE_IDS, EXPERIMENTAL_RULE_IDS, PUBLIC_RULE_IDS
from pass_audit.utils.determinism import (
    FIXED_TIMESTAMP,
    deterministic_run_id,
    deterministic_timestamp,
    env_requires_ci_mode,
)
from pass_audit.utils.json_norm import stable_json_dump, stable_json_dumps


# ── rules ───────────────────────────────────────────────────────────


class TestRuleRegistry:
    def test_buckets_disjoint(self) -> None:
        assert not set(PUBLIC_RULE_IDS) & set(EXPERIMENTAL_RULE_IDS)

    def test_all_is_union(self) -> None:
        assert ALL_RULE_IDS == sorted(PUBLIC_RULE_IDS + EXPERIMENTAL_RULE_IDS)

    def test_format(self) -> None:
        rule_re = re.compile(r"^[A-Z]{2,4}_[A-Z][A-Z0-9_]*_[0-9]{3}$")
        assert all(rule_re.match(r) for r in ALL_RULE_IDS)

    @pytest.mark.parametrize("password", ["password", "a", "MyPassword2024!", "1111"])
    def test_emitted_rule_ids_registered(self, password: str) -> None:
        for analyzer in (CommonPasswordAnalyzer(), WeakPatternAnalyzer(), StrengthAnalyzer()):
            for f in analyzer.run(password):
                assert f.rule_id in ALL_RULE_IDS


class TestFingerprint:
    def test_prefix_and_length(self) -> None:
        fp = make_fingerprint("PW_TOO_SHORT_001", Span(0, 3))
        assert fp.startswith("sha256:")
        assert len(fp) == len("sha256:") + 64

    def test_detail_changes_fingerprint(self) -> None:
        a = make_fingerprint("PW_COMMON_ELEMENT_001", Span(0, 5), "hello")
        b = make_fingerprint("PW_COMMON_ELEMENT_001", Span(0, 5), "world")
        assert a != b


# ── json_norm ───────────────────────────────────────────────────────


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_rounds_floats_in_ci_mode():
    obj = json.loads(stable_json_dumps({"x": 1.234567}, ci_mode=True))
    assert obj["x"] == 1.2346


def test_stable_json_dumps_normalizes_enums_and_tuples():
    obj = json.loads(stable_json_dumps({"tier": RiskLevel.RED, "issues": ("a", "b")}))
    assert obj == {"tier": "red", "issues": ["a", "b"]}


def test_stable_json_dumps_keeps_unicode():
    assert "é" in stable_json_dumps({"s": "é"})


def test_stable_json_dump_writes_to_file_like():
    buf = io.StringIO()
    stable_json_dump({"b": 1, "a": 2}, buf)
    assert buf.getvalue() == stable_json_dumps({"b": 1, "a": 2})


# ── determinism ─────────────────────────────────────────────────────


class TestDeterminism:
    def test_fixed_timestamp(self) -> None:
        assert deterministic_timestamp(True) == FIXED_TIMESTAMP == "2000-01-01T00:00:00+00:00"

    def test_live_timestamp(self) -> None:
        assert deterministic_timestamp(False) != FIXED_TIMESTAMP

    def test_ci_run_id_depends_on_command_only(self) -> None:
        assert deterministic_run_id("check", True) == deterministic_run_id("check", True)
        assert deterministic_run_id("check", True) != deterministic_run_id("edit", True)
        assert re.match(r"^ci-[0-9a-f]{16}$", deterministic_run_id("check", True))

    def test_random_run_id(self) -> None:
        assert deterministic_run_id("check") != deterministic_run_id("check")

    @pytest.mark.parametrize(
        "env, expected",
        [
            ({}, False),
            ({"CI": "true"}, True),
            ({"CI": "0"}, False),
            ({"PASS_AUDIT_DETERMINISTIC": "1"}, True),
        ],
    )
    def test_env_requires_ci_mode(
        self, monkeypatch: pytest.MonkeyPatch, env: dict[str, str], expected: bool
    ) -> None:
        monkeypatch.delenv("CI", raising=False)
        monkeypatch.delenv("PASS_AUDIT_DETERMINISTIC", raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        assert env_requires_ci_mode() is expected


# ── logging ─────────────────────────────────────────────────────────


class TestSetupLogging:
    def test_single_stderr_handler(self) -> None:
        logger = logging.getLogger("pass_audit")
        saved = (logger.level, list(logger.handlers))
        try:
            setup_logging(logging.DEBUG)
            setup_logging(logging.DEBUG)
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]

    def test_log_file(self, tmp_path) -> None:
        logger = logging.getLogger("pass_audit")
        saved = (logger.level, list(logger.handlers))
        log_file = tmp_path / "pass_audit.log"
        try:
            setup_logging(logging.INFO, log_file=str(log_file))
            logging.getLogger("pass_audit.test").info("hello from test")
            for h in logger.handlers:
                h.flush()
            assert "pass_audit.test - INFO - hello from test" in log_file.read_text(
                encoding="utf-8"
            )
        finally:
            for h in logger.handlers:
                h.close()
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]

    def test_file_only(self, tmp_path) -> None:
        logger = logging.getLogger("pass_audit")
        saved = (logger.level, list(logger.handlers))
        log_file = tmp_path / "quiet.log"
        try:
            setup_logging(logging.DEBUG, log_file=str(log_file), console=False)
            assert [type(h) for h in logger.handlers] == [logging.FileHandler]
        finally:
            for h in logger.handlers:
                h.close()
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]
