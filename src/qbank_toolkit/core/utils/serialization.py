"""
Serialization Utilities

Provides to/from JSON utilities for imported question records.

Two on-disk layouts are supported:
- ``.json``: a single array of records (what bulk-import endpoints accept)
- ``.jsonl``: one record per line (streams well for large banks)

Records are always written in the fixed key order of
``Question.to_dict()``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import Question
from ..schemas.validator import validate_question, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_questions(questions: Iterable[Question]) -> list[dict[str, Any]]:
    """
    Serialize records to a list of dictionaries.

    Args:
        questions: Question instances to serialize

    Returns:
        List of dictionaries suitable for JSON serialization
    """
    return [question.to_dict() for question in questions]


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Returns:
        Question instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_question(data, strict=True)
    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def write_questions_json(questions: Iterable[Question], path: Path) -> None:
    """
    Write records to ``path``.

    The layout is chosen from the suffix: ``.jsonl`` writes one record per
    line, anything else writes a single indented JSON array.

    Args:
        questions: Records to write
        path: Output file (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = serialize_questions(questions)

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".jsonl":
            for data in payload:
                f.write(json.dumps(data, ensure_ascii=False) + "\n")
        else:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")


def read_questions_json(path: Path, *, validate: bool = True) -> list[Question]:
    """
    Load records previously written by ``write_questions_json``.

    Args:
        path: ``.json`` array file or ``.jsonl`` file
        validate: Whether to validate each record

    Returns:
        List of Question instances

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any record is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    if path.suffix.lower() == ".jsonl":
        questions = []
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    questions.append(deserialize_question(json.loads(line), validate=validate))
                except (json.JSONDecodeError, ValidationError, ValueError) as e:
                    raise ValidationError(
                        f"Error parsing line {line_no}: {e}",
                        path=str(path),
                        errors=[str(e)]
                    )
        return questions

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", path=str(path), errors=[str(e)])
    if not isinstance(payload, list):
        raise ValidationError("Expected a JSON array of questions", path=str(path))

    questions = []
    for index, data in enumerate(payload):
        try:
            questions.append(deserialize_question(data, validate=validate))
        except (ValidationError, ValueError) as e:
            raise ValidationError(
                f"Error parsing record {index}: {e}",
                path=str(path),
                errors=[str(e)]
            )
    return questions
