"""JSON output contracts for the execwrap CLI."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_VALIDATION

OUTCOME_SCHEMA = "execwrap.outcome.v1"
ERROR_SCHEMA = "execwrap.error.v1"
VERSION_SCHEMA = "execwrap.version.v1"
SCHEMA_NAMES = (OUTCOME_SCHEMA, ERROR_SCHEMA, VERSION_SCHEMA)


def schema_path(schema_name: str) -> Path:
    if schema_name not in SCHEMA_NAMES:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION)
    return Path(str(resources.files(__package__))) / "schemas" / f"{schema_name}.schema.json"


def load_schema(schema_name: str) -> dict[str, Any]:
    return json.loads(schema_path(schema_name).read_text(encoding="utf-8"))


def validate(schema_name: str, payload: Any) -> None:
    """Check a CLI payload against its packaged schema before it is printed."""
    import jsonschema

    try:
        jsonschema.validate(payload, load_schema(schema_name))
    except jsonschema.ValidationError as exc:
        loc = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ScriptError(f"{schema_name} payload invalid at {loc}: {exc.message}", ERR_VALIDATION) from exc


__all__ = ["ERROR_SCHEMA", "OUTCOME_SCHEMA", "SCHEMA_NAMES", "VERSION_SCHEMA", "load_schema", "schema_path", "validate"]
