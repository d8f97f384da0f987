"""Audit configuration dataclass and its YAML loader.

Lookup order used by :meth:`AuditConfig.discover`:

1. an explicit path (``--config``)
2. the ``PASS_AUDIT_CONFIG`` environment variable
3. ``.pass-audit.yaml`` / ``.pass-audit.yml`` in the working directory
4. built-in defaults
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from pass_audit.model import PasswordStyle
from pass_audit.policy.thresholds import ScoreThresholds

_logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASS_AUDIT_CONFIG"
CONFIG_FILENAMES = (".pass-audit.yaml", ".pass-audit.yml")


@dataclass(frozen=True)
class AuditConfig:
    """Immutable audit configuration."""

    min_birth_year: int = 1900
    max_birth_year: int = 2024
    extra_common_passwords: tuple[str, ...] = ()
    green_min: int = 60
    yellow_min: int = 40
    default_style: str = PasswordStyle.CAMEL_CASE.value

    def __post_init__(self) -> None:
        if self.min_birth_year > self.max_birth_year:
            raise ValueError(
                f"min_birth_year ({self.min_birth_year}) must not exceed "
                f"max_birth_year ({self.max_birth_year})"
            )
        ScoreThresholds(green_min=self.green_min, yellow_min=self.yellow_min)

    @property
    def thresholds(self) -> ScoreThresholds:
        return ScoreThresholds(green_min=self.green_min, yellow_min=self.yellow_min)

    @property
    def style(self) -> PasswordStyle:
        return PasswordStyle.parse(self.default_style)

    # ── loading ─────────────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AuditConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                _logger.warning("Ignoring unknown config key %r", key)
                continue
            if key == "extra_common_passwords":
                if not isinstance(value, (list, tuple)):
                    raise ValueError("extra_common_passwords must be a list of strings")
                kwargs[key] = tuple(str(v) for v in value)
            elif key == "default_style":
                kwargs[key] = str(value)
            else:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"{key} must be an integer, got {value!r}")
                kwargs[key] = value
        return cls(**kwargs)

    @classmethod
    def load(cls, config_path: Path) -> "AuditConfig":
        """Load config from a YAML file."""
        with open(config_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{config_path}: top-level YAML must be a mapping")
        _logger.debug("Loaded config from %s", config_path)
        return cls.from_mapping(data)

    @classmethod
    def discover(
        cls,
        explicit: Path | None = None,
        *,
        cwd: Path | None = None,
    ) -> "AuditConfig":
        """Resolve configuration using the documented lookup order."""
        if explicit is not None:
            return cls.load(explicit)

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return cls.load(Path(env_path))

        base = cwd if cwd is not None else Path.cwd()
        for name in CONFIG_FILENAMES:
            candidate = base / name
            if candidate.is_file():
                return cls.load(candidate)

        return cls()
