"""CLI entry-point for pass_audit.

Usage:
    python -m pass_audit generate --pet P --year Y --color C --number N [--style S]
    python -m pass_audit variations --pet P --year Y --color C --number N
    python -m pass_audit check [PASSWORD]
    python -m pass_audit edit [PASSWORD]
    python -m pass_audit validate <instance.json> <schema_name>

Common options: --format text|json|markdown|html, --ci, --config PATH, -v,
                --log-file PATH, -o/--output FILE
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from pathlib import Path

import jsonschema

from pass_audit import __version__
from pass_audit.api import (
    check as _api_check,
    edit as _api_edit,
    generate as _api_generate,
    variations as _api_variations,
)
from pass_audit.contracts.load import validate_file
from pass_audit.core.config import AuditConfig
from pass_audit.logging_config import setup_logging
from pass_audit.model import PasswordStyle
from pass_audit.model.facts import InputValidationError
from pass_audit.policy.thresholds import exit_code_from_tier
from pass_audit.reports import EXPORT_FORMATS, export_result
from pass_audit.utils.determinism import env_requires_ci_mode
from pass_audit.utils.exit_codes import ExitCode
from pass_audit.utils.json_norm import stable_json_dump


def _require_ci_flag(ci_mode: bool, *, what: str) -> int | None:
    """If CI env is active but --ci was not passed, emit an error and return ExitCode.ERROR."""
    if env_requires_ci_mode() and not ci_mode:
        print(
            f"error: CI environment requires deterministic mode for {what}. "
            f"Re-run with --ci/--deterministic.",
            file=sys.stderr,
        )
        return ExitCode.ERROR
    return None


# ── parser ──────────────────────────────────────────────────────────


def _add_common_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format",
        dest="fmt",
        choices=EXPORT_FORMATS,
        default="text",
        help="Output format (default: text).",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Enable deterministic output (stable run IDs and timestamps).",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: $PASS_AUDIT_CONFIG or ./.pass-audit.yaml).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Also write debug logs to PATH (stderr stays quiet unless -v).",
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write the report to FILE instead of stdout.",
    )


def _add_fact_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--pet", default="", help="Pet or animal name.")
    p.add_argument("--year", default="", help="Birth year.")
    p.add_argument("--color", default="", help="Favorite color.")
    p.add_argument("--number", default="", help="Lucky number.")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pass-audit",
        description="Mnemonic password generator and strength checker.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── generate ─────────────────────────────────────────────────────
    gen_p = sub.add_parser(
        "generate",
        help="Build one password from personal facts.",
    )
    _add_fact_options(gen_p)
    gen_p.add_argument(
        "--style",
        choices=[s.value for s in PasswordStyle],
        default=None,
        help="Password style (default: from config, else camelCase).",
    )
    _add_common_options(gen_p)

    # ── variations ───────────────────────────────────────────────────
    var_p = sub.add_parser(
        "variations",
        help="Build camelCase, symbols and leetspeak variations.",
    )
    _add_fact_options(var_p)
    _add_common_options(var_p)

    # ── check ────────────────────────────────────────────────────────
    check_p = sub.add_parser(
        "check",
        help="Analyse an existing password (exit code follows the tier).",
    )
    check_p.add_argument(
        "password",
        nargs="?",
        default=None,
        help="Password to check (prompted for when omitted).",
    )
    _add_common_options(check_p)

    # ── edit ─────────────────────────────────────────────────────────
    edit_p = sub.add_parser(
        "edit",
        help="Detailed analysis plus improved versions of a password.",
    )
    edit_p.add_argument(
        "password",
        nargs="?",
        default=None,
        help="Password to analyse (prompted for when omitted).",
    )
    _add_common_options(edit_p)

    # ── validate ─────────────────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON instance against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument("schema_name", help="Schema filename, e.g. analysis_result.schema.json")

    return p


# ── handlers ────────────────────────────────────────────────────────


def _read_password(value: str | None) -> str:
    if value is not None:
        return value
    return getpass.getpass("Password: ")


def _handle_validate(args: argparse.Namespace) -> int:
    try:
        validate_file(args.instance, args.schema_name)
    except jsonschema.exceptions.ValidationError as e:
        # Exit code contract:
        #   1 = schema violation
        #   2 = runtime / schema not found / unreadable instance
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _handle_run(args: argparse.Namespace) -> int:
    if args.fmt == "json":
        rc = _require_ci_flag(args.ci_mode, what=f"{args.command} --format json")
        if rc is not None:
            return rc

    try:
        config = AuditConfig.discover(args.config)
    except (OSError, ValueError) as e:
        print(f"error: invalid config: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        if args.command == "generate":
            result, _ = _api_generate(
                args.pet, args.year, args.color, args.number,
                style=args.style, config=config, ci_mode=args.ci_mode,
            )
            rc = ExitCode.SUCCESS
        elif args.command == "variations":
            result, _ = _api_variations(
                args.pet, args.year, args.color, args.number,
                config=config, ci_mode=args.ci_mode,
            )
            rc = ExitCode.SUCCESS
        elif args.command == "check":
            result, _ = _api_check(
                _read_password(args.password), config=config, ci_mode=args.ci_mode,
            )
            rc = exit_code_from_tier(result.analysis.tier)
        else:
            result, _ = _api_edit(
                _read_password(args.password), config=config, ci_mode=args.ci_mode,
            )
            rc = ExitCode.SUCCESS
    except InputValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.output is None:
        sys.stdout.write(export_result(result, args.fmt, ci_mode=args.ci_mode))
        return rc

    try:
        with open(args.output, "w", encoding="utf-8") as fp:
            if args.fmt == "json":
                stable_json_dump(result.to_dict(), fp, ci_mode=args.ci_mode)
            else:
                fp.write(export_result(result, args.fmt, ci_mode=args.ci_mode))
    except OSError as e:
        print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
        return ExitCode.ERROR
    return rc


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok/green, 1 = yellow, 2 = red/error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    verbose = getattr(args, "verbose", False)
    log_file = getattr(args, "log_file", None)
    if verbose or log_file:
        setup_logging(logging.DEBUG, log_file=log_file, console=verbose)

    if args.command == "validate":
        return _handle_validate(args)

    return _handle_run(args)


if __name__ == "__main__":
    raise SystemExit(main())
