"""Load and validate JSON instances against the bundled schemas.

Usage::

    from pass_audit.contracts.load import validate_instance, validate_file

    validate_instance(my_dict, "analysis_result.schema.json")
    validate_file(Path("out/check.json"), "analysis_result.schema.json")

Schemas may reference each other by filename (``$id``); all bundled
schemas are registered together so cross-file ``$ref`` resolves offline.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
from referencing import Registry, Resource

SCHEMA_DIR = "data/schemas"

SCHEMA_NAMES = (
    "analysis_result.schema.json",
    "edit_result.schema.json",
    "generation_result.schema.json",
)


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/pass_audit/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("pass_audit") / SCHEMA_DIR / name) as p:
        if not p.exists():
            raise FileNotFoundError(f"unknown schema: {name!r}")
        return p


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    if name not in SCHEMA_NAMES:
        raise FileNotFoundError(
            f"unknown schema: {name!r} (expected one of {', '.join(SCHEMA_NAMES)})"
        )
    return json.loads(_schema_path(name).read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def _registry() -> Registry:
    return Registry().with_resources(
        (name, Resource.from_contents(load_schema(name))) for name in SCHEMA_NAMES
    )


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema, registry=_registry())
    validator.validate(instance)


def validate_file(instance_path: Path, schema_name: str) -> None:
    """Load a JSON file and validate it against the named schema."""
    instance = json.loads(instance_path.read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
