"""
pass_audit.api
==============

Programmatic entrypoints for using pass_audit as a library.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - Stable, JSON-friendly outputs validated against the bundled schemas

Non-goals:
  - Owning presentation; callers render results (see ``reports``)
  - Secure randomness; generated passwords are mnemonic

Usage::

    from pass_audit.api import check, generate, variations, edit

    result, result_dict = check("hunter2", ci_mode=True)
    result, result_dict = generate("Rex", "1990", "blue", "7", style="symbols")
"""

from __future__ import annotations

from typing import Any, Optional

from pass_audit.contracts.load import validate_instance
from pass_audit.core.checker import check_password
from pass_audit.core.config import AuditConfig
from pass_audit.editor import analyze_and_edit
from pass_audit.generator import generate_password, generate_variations
from pass_audit.model import PasswordStyle
from pass_audit.model.facts import PersonalFacts
from pass_audit.model.result import CheckResult, EditResult, GenerationResult, RunInfo
from pass_audit.utils.determinism import deterministic_run_id, deterministic_timestamp


def _run_info(command: str, ci_mode: bool) -> RunInfo:
    return RunInfo(
        run_id=deterministic_run_id(command, ci_mode),
        created_at=deterministic_timestamp(ci_mode),
        command=command,
    )


# ── generate / variations ───────────────────────────────────────────


def generate(
    pet: object,
    birth_year: object,
    color: object,
    lucky_number: object,
    *,
    style: PasswordStyle | str | None = None,
    config: Optional[AuditConfig] = None,
    ci_mode: bool = False,
) -> tuple[GenerationResult, dict[str, Any]]:
    """Generate one password from personal facts.

    Parameters
    ----------
    pet, birth_year, color, lucky_number:
        Raw input values; pet and color are trimmed.
    style:
        One of ``PasswordStyle``; ``None`` uses the configured default and
        unknown strings fall back to camelCase.
    ci_mode:
        If True, run metadata is fixed so output is byte-deterministic.

    Returns
    -------
    ``(GenerationResult, generation_result_dict)``

    Raises
    ------
    InputValidationError
        If a fact is missing or the birth year is out of range.
    """
    facts = PersonalFacts.from_raw(pet, birth_year, color, lucky_number)
    generated = generate_password(facts, style, config=config)
    result = GenerationResult(passwords=[generated], run=_run_info("generate", ci_mode))
    result_dict = result.to_dict()
    validate_instance(result_dict, "generation_result.schema.json")
    return result, result_dict


def variations(
    pet: object,
    birth_year: object,
    color: object,
    lucky_number: object,
    *,
    config: Optional[AuditConfig] = None,
    ci_mode: bool = False,
) -> tuple[GenerationResult, dict[str, Any]]:
    """Generate the camelCase, symbols and leetspeak variations."""
    facts = PersonalFacts.from_raw(pet, birth_year, color, lucky_number)
    generated = generate_variations(facts, config=config)
    result = GenerationResult(passwords=generated, run=_run_info("variations", ci_mode))
    result_dict = result.to_dict()
    validate_instance(result_dict, "generation_result.schema.json")
    return result, result_dict


# ── check ───────────────────────────────────────────────────────────


def check(
    password: str | None,
    *,
    config: Optional[AuditConfig] = None,
    ci_mode: bool = False,
) -> tuple[CheckResult, dict[str, Any]]:
    """Analyse an existing password.

    Raises
    ------
    InputValidationError
        If *password* is empty.
    """
    analysis = check_password(password, config=config)
    result = CheckResult(analysis=analysis, run=_run_info("check", ci_mode))
    result_dict = result.to_dict()
    validate_instance(result_dict, "analysis_result.schema.json")
    return result, result_dict


# ── edit ────────────────────────────────────────────────────────────


def edit(
    password: str | None,
    *,
    config: Optional[AuditConfig] = None,
    ci_mode: bool = False,
) -> tuple[EditResult, dict[str, Any]]:
    """Detailed analysis of *password* plus improved rewrites.

    Raises
    ------
    InputValidationError
        If *password* is empty.
    """
    detailed, improved = analyze_and_edit(password, config=config)
    result = EditResult(analysis=detailed, improved=improved, run=_run_info("edit", ci_mode))
    result_dict = result.to_dict()
    validate_instance(result_dict, "edit_result.schema.json")
    return result, result_dict
