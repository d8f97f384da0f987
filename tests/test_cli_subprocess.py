"""End-to-end CLI tests: ``python -m pass_audit`` in a subprocess.

Every run uses a fresh working directory so no stray ``.pass-audit.yaml``
is picked up, and CI variables are stripped unless a test sets them.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def _env(**extra: str) -> dict[str, str]:
    env = os.environ.copy()
    for key in ("CI", "PASS_AUDIT_DETERMINISTIC", "PASS_AUDIT_CONFIG"):
        env.pop(key, None)
    env["PYTHONHASHSEED"] = "0"
    env["PYTHONIOENCODING"] = "utf-8"
    env["PYTHONPATH"] = str(REPO_ROOT / "src")
    env.update(extra)
    return env


def _run(args: list[str], cwd: Path, **extra_env: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "pass_audit", *args],
        cwd=str(cwd),
        env=_env(**extra_env),
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


FACTS = ["--pet", "buddy", "--year", "1990", "--color", "blue", "--number", "7"]


class TestGenerateCommand:
    def test_text_output(self, tmp_path: Path) -> None:
        p = _run(["generate", *FACTS], tmp_path)
        assert p.returncode == 0, p.stderr
        assert "CamelCase Style: BuddyBlue19907" in p.stdout

    def test_style_option(self, tmp_path: Path) -> None:
        p = _run(["generate", *FACTS, "--style", "leetspeak"], tmp_path)
        assert p.returncode == 0, p.stderr
        assert "Leet Speak Style: Buddy_Blu3_1990!7" in p.stdout

    def test_missing_fields(self, tmp_path: Path) -> None:
        p = _run(["generate", "--year", "1990", "--number", "7"], tmp_path)
        assert p.returncode == 2
        assert p.stdout == ""
        assert p.stderr.strip() == (
            "error: Please fill in the following fields: Pet/Animal name, Favorite color"
        )

    def test_year_out_of_range(self, tmp_path: Path) -> None:
        p = _run(["generate", "--pet", "rex", "--year", "2030", "--color", "red", "--number", "3"], tmp_path)
        assert p.returncode == 2
        assert "between 1900 and 2024" in p.stderr

    def test_config_file_in_cwd(self, tmp_path: Path) -> None:
        (tmp_path / ".pass-audit.yaml").write_text("max_birth_year: 2030\n", encoding="utf-8")
        p = _run(["generate", "--pet", "rex", "--year", "2030", "--color", "red", "--number", "3"], tmp_path)
        assert p.returncode == 0, p.stderr
        assert "RexRed20303" in p.stdout

    def test_bad_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("max_birth_year: soon\n", encoding="utf-8")
        p = _run(["generate", *FACTS, "--config", str(cfg)], tmp_path)
        assert p.returncode == 2
        assert p.stderr.startswith("error: invalid config:")

    def test_malformed_yaml_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "broken.yaml"
        cfg.write_text("max_birth_year: [1990\n", encoding="utf-8")
        p = _run(["generate", *FACTS, "--config", str(cfg)], tmp_path)
        assert p.returncode == 2
        assert p.stdout == ""
        assert p.stderr.startswith("error: invalid config:")
        assert "Traceback" not in p.stderr

    def test_variations(self, tmp_path: Path) -> None:
        p = _run(["variations", *FACTS, "--format", "json", "--ci"], tmp_path)
        assert p.returncode == 0, p.stderr
        data = json.loads(p.stdout)
        assert [x["password"] for x in data["passwords"]] == [
            "BuddyBlue19907",
            "Buddy@Blue#1990!7",
            "Buddy_Blu3_1990!7",
        ]


class TestCheckCommand:
    """check exits with the tier: green 0, yellow 1, red 2."""

    @pytest.mark.parametrize(
        "password, code",
        [("BuddyBlue19907", 0), ("MyPassword2024!", 1), ("password", 2)],
    )
    def test_exit_code_follows_tier(self, tmp_path: Path, password: str, code: int) -> None:
        p = _run(["check", password], tmp_path)
        assert p.returncode == code, p.stderr

    def test_json_ci(self, tmp_path: Path) -> None:
        p = _run(["check", "password", "--format", "json", "--ci"], tmp_path)
        data = json.loads(p.stdout)
        assert data["schema_version"] == "analysis_result_v1"
        assert data["run"]["run_id"].startswith("ci-")
        assert data["analysis"]["is_common"] is True

    def test_ci_runs_byte_identical(self, tmp_path: Path) -> None:
        a = _run(["check", "MyPassword2024!", "--format", "json", "--ci"], tmp_path)
        b = _run(["check", "MyPassword2024!", "--format", "json", "--ci"], tmp_path)
        assert a.stdout == b.stdout

    def test_html(self, tmp_path: Path) -> None:
        p = _run(["check", "password", "--format", "html"], tmp_path)
        assert p.stdout.startswith("<!DOCTYPE html>")

    def test_empty_password(self, tmp_path: Path) -> None:
        p = _run(["check", ""], tmp_path)
        assert p.returncode == 2
        assert p.stderr.strip() == "error: Please enter a password to check"

    def test_ci_env_requires_ci_flag_for_json(self, tmp_path: Path) -> None:
        p = _run(["check", "password", "--format", "json"], tmp_path, CI="true")
        assert p.returncode == 2
        assert p.stdout == ""
        assert p.stderr.strip() == (
            "error: CI environment requires deterministic mode for check --format json. "
            "Re-run with --ci/--deterministic."
        )

    def test_verbose_logs_to_stderr_without_password(self, tmp_path: Path) -> None:
        p = _run(["check", "Zebra#Lamp42", "-v"], tmp_path)
        assert "pass_audit.core.checker - DEBUG" in p.stderr
        assert "Zebra#Lamp42" not in p.stderr

    def test_log_file_keeps_stderr_quiet(self, tmp_path: Path) -> None:
        log = tmp_path / "audit.log"
        p = _run(["check", "Zebra#Lamp42", "--log-file", str(log)], tmp_path)
        assert p.returncode == 0, p.stderr
        assert p.stderr == ""
        text = log.read_text(encoding="utf-8")
        assert "pass_audit.core.checker - DEBUG" in text
        assert "Zebra#Lamp42" not in text

    def test_output_json_matches_stdout(self, tmp_path: Path) -> None:
        out = tmp_path / "report.json"
        p = _run(["check", "password", "--format", "json", "--ci", "-o", str(out)], tmp_path)
        assert p.returncode == 2
        assert p.stdout == ""
        direct = _run(["check", "password", "--format", "json", "--ci"], tmp_path)
        assert out.read_text(encoding="utf-8") == direct.stdout

    def test_output_markdown(self, tmp_path: Path) -> None:
        out = tmp_path / "report.md"
        p = _run(["check", "BuddyBlue19907", "--format", "markdown", "--output", str(out)], tmp_path)
        assert p.returncode == 0, p.stderr
        assert p.stdout == ""
        assert out.read_text(encoding="utf-8").startswith("#")

    def test_output_unwritable(self, tmp_path: Path) -> None:
        out = tmp_path / "missing-dir" / "report.txt"
        p = _run(["check", "BuddyBlue19907", "-o", str(out)], tmp_path)
        assert p.returncode == 2
        assert p.stderr.startswith("error: cannot write")


class TestEditCommand:
    def test_text(self, tmp_path: Path) -> None:
        p = _run(["edit", "password"], tmp_path)
        assert p.returncode == 0, p.stderr
        assert "Improved Versions:" in p.stdout
        assert "Leet Speak Style: P455w0rd!#Se" in p.stdout

    def test_empty_password(self, tmp_path: Path) -> None:
        p = _run(["edit", ""], tmp_path)
        assert p.returncode == 2
        assert p.stderr.strip() == "error: Please enter a password to analyze"


class TestValidateCommand:
    """Exit code contract: 0 OK, 1 schema violation, 2 runtime error."""

    def _emit(self, tmp_path: Path) -> Path:
        p = _run(["check", "password", "--format", "json", "--ci"], tmp_path)
        out = tmp_path / "check.json"
        out.write_text(p.stdout, encoding="utf-8")
        return out

    def test_ok(self, tmp_path: Path) -> None:
        out = self._emit(tmp_path)
        p = _run(["validate", str(out), "analysis_result.schema.json"], tmp_path)
        assert p.returncode == 0, p.stderr
        assert p.stdout.strip() == "OK"

    def test_violation(self, tmp_path: Path) -> None:
        out = self._emit(tmp_path)
        data = json.loads(out.read_text(encoding="utf-8"))
        data["schema_version"] = "analysis_result_v0"
        out.write_text(json.dumps(data), encoding="utf-8")
        p = _run(["validate", str(out), "analysis_result.schema.json"], tmp_path)
        assert p.returncode == 1
        assert p.stderr.startswith("FAIL:")

    def test_unknown_schema(self, tmp_path: Path) -> None:
        out = self._emit(tmp_path)
        p = _run(["validate", str(out), "nope.schema.json"], tmp_path)
        assert p.returncode == 2
        assert p.stderr.startswith("ERROR:")

    def test_output_file_validates(self, tmp_path: Path) -> None:
        out = tmp_path / "edit.json"
        _run(["edit", "password", "--format", "json", "--ci", "-o", str(out)], tmp_path)
        p = _run(["validate", str(out), "edit_result.schema.json"], tmp_path)
        assert p.returncode == 0, p.stderr

    def test_not_json(self, tmp_path: Path) -> None:
        out = tmp_path / "bad.json"
        out.write_text("{not json", encoding="utf-8")
        p = _run(["validate", str(out), "analysis_result.schema.json"], tmp_path)
        assert p.returncode == 2
        assert p.stderr.startswith("ERROR:")

    def test_missing_instance(self, tmp_path: Path) -> None:
        p = _run(["validate", str(tmp_path / "nope.json"), "analysis_result.schema.json"], tmp_path)
        assert p.returncode == 2
        assert p.stderr.startswith("ERROR:")


class TestTopLevel:
    def test_version(self, tmp_path: Path) -> None:
        p = _run(["--version"], tmp_path)
        assert p.returncode == 0
        assert p.stdout.strip() == "pass-audit 0.1.0"

    def test_no_command(self, tmp_path: Path) -> None:
        p = _run([], tmp_path)
        assert p.returncode == 2
