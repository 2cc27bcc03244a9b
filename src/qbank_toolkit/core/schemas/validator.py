"""
Schema Validation Utilities

Validates JSON payloads against the bundled schemas.

Two payloads are checked:
- Question records in the bulk-import shape (``question.schema.json``)
- Parsing-rules extension files (``rules.schema.json``)

Basic structural checks always run; ``strict=True`` additionally runs the
full JSON Schema through ``jsonschema``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.questions import RECORD_FIELDS, Difficulty, QuestionType


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _run_schema(data: Any, schema_name: str) -> None:
    """Validate ``data`` against a bundled schema, re-raising as ValidationError."""
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message]
        ) from e


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a serialized question record.

    Args:
        data: Question dictionary to validate
        strict: If True, also run the full JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question must be an object, got {type(data).__name__}")

    missing = [f for f in RECORD_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    qtype = data.get("type")
    if qtype not in {t.value for t in QuestionType}:
        raise ValidationError(f"Invalid question type: {qtype!r}", path="type")

    difficulty = data.get("difficulty")
    if difficulty not in {d.value for d in Difficulty}:
        raise ValidationError(f"Invalid difficulty: {difficulty!r}", path="difficulty")

    points = data.get("points")
    if isinstance(points, bool) or not isinstance(points, int) or points < 1:
        raise ValidationError(
            f"Invalid points: {points!r} (must be a positive integer)",
            path="points"
        )

    options = data.get("options")
    if not isinstance(options, list):
        raise ValidationError("options must be a list", path="options")

    if strict:
        _run_schema(data, "question")


def validate_rules(data: dict[str, Any]) -> None:
    """
    Validate a parsing-rules extension payload.

    Args:
        data: Decoded rules JSON

    Raises:
        ValidationError: If the payload does not match rules.schema.json
    """
    _run_schema(data, "rules")
