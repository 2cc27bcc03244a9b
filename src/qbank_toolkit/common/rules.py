"""
Module: common.rules

Purpose:
    Synonym and alias tables that drive every importer: spreadsheet header
    synonyms, question-type/difficulty aliases and document field labels.
    Tables are immutable data owned by a ParsingRules instance so new
    aliases can be added without touching extraction logic.

Key Classes:
    - ParsingRules: Frozen container for all lookup tables

Key Functions:
    - alias_key(): Canonical lookup key for loosely formatted text
    - load_rules(): Extend the defaults from a JSON rules file

Dependencies:
    - jsonschema (via core.schemas.validator): rules file validation

Used By:
    - common.normalizers: Type/difficulty lookup
    - importer.tabular.columns: Header synonyms
    - importer.document.fields: Field labels
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from qbank_toolkit.core.models import Difficulty, QuestionType
from qbank_toolkit.core.schemas.validator import ValidationError, validate_rules

logger = logging.getLogger(__name__)

__all__ = [
    "COLUMN_FIELDS",
    "LABEL_FIELDS",
    "ParsingRules",
    "DEFAULT_RULES",
    "alias_key",
    "load_rules",
]

# Canonical spreadsheet fields, in mapping order
COLUMN_FIELDS: Tuple[str, ...] = (
    "question",
    "type",
    "options",
    "correct_answer",
    "explanation",
    "points",
    "difficulty",
    "category",
)

# Fields found through "Label: value" lines in documents
LABEL_FIELDS: Tuple[str, ...] = (
    "correct_answer",
    "explanation",
    "points",
    "difficulty",
    "type",
    "category",
)


def alias_key(value: Any) -> str:
    """
    Build the lookup key for an alias table.

    Stringifies, trims, lower-cases and collapses internal whitespace so
    that "  Multiple   Choice " and "multiple choice" share a key.

    Example:
        >>> alias_key("  T/F ")
        't/f'
    """
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def _freeze_synonyms(
    mapping: Mapping[str, Iterable[str]],
    allowed: Tuple[str, ...],
    *,
    lower: bool,
) -> Mapping[str, Tuple[str, ...]]:
    frozen: Dict[str, Tuple[str, ...]] = {}
    for name, synonyms in mapping.items():
        if name not in allowed:
            raise ValueError(f"Unknown field {name!r} (expected one of {', '.join(allowed)})")
        if isinstance(synonyms, str):
            raise ValueError(f"Synonyms for {name!r} must be a list, not a string")
        cleaned = []
        for synonym in synonyms:
            text = str(synonym).strip()
            if lower:
                text = text.lower()
            if text and text not in cleaned:
                cleaned.append(text)
        frozen[name] = tuple(cleaned)
    return MappingProxyType(frozen)


def _freeze_aliases(mapping: Mapping[str, Any], enum_type: type) -> Mapping[str, Any]:
    frozen: Dict[str, Any] = {}
    for raw, value in mapping.items():
        key = alias_key(raw)
        if not key:
            continue
        try:
            frozen[key] = enum_type(value)
        except ValueError as exc:
            raise ValueError(f"Alias {raw!r} maps to unknown {enum_type.__name__} {value!r}") from exc
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class ParsingRules:
    """
    Lookup tables for header discovery, normalisation and label search.

    All tables are stored as read-only mappings, so a single instance can
    be shared by concurrent imports.

    Attributes:
        column_synonyms: Canonical field -> header substrings, in priority order
        type_aliases: Alias key -> QuestionType
        difficulty_aliases: Alias key -> Difficulty
        label_synonyms: Canonical field -> document label words

    Example:
        >>> rules = DEFAULT_RULES.extended({"type_aliases": {"mc": "multiple-choice"}})
        >>> rules.type_aliases["mc"]
        <QuestionType.MULTIPLE_CHOICE: 'multiple-choice'>
    """
    column_synonyms: Mapping[str, Tuple[str, ...]]
    type_aliases: Mapping[str, QuestionType]
    difficulty_aliases: Mapping[str, Difficulty]
    label_synonyms: Mapping[str, Tuple[str, ...]]

    def __post_init__(self) -> None:
        """Freeze and validate tables on construction."""
        object.__setattr__(
            self, "column_synonyms",
            _freeze_synonyms(self.column_synonyms, COLUMN_FIELDS, lower=True),
        )
        object.__setattr__(
            self, "label_synonyms",
            _freeze_synonyms(self.label_synonyms, LABEL_FIELDS, lower=False),
        )
        object.__setattr__(self, "type_aliases", _freeze_aliases(self.type_aliases, QuestionType))
        object.__setattr__(
            self, "difficulty_aliases", _freeze_aliases(self.difficulty_aliases, Difficulty)
        )

    def columns_for(self, field_name: str) -> Tuple[str, ...]:
        """Header synonyms for a canonical field (empty if none configured)."""
        return self.column_synonyms.get(field_name, ())

    def labels_for(self, field_name: str) -> Tuple[str, ...]:
        """Document labels for a canonical field (empty if none configured)."""
        return self.label_synonyms.get(field_name, ())

    def extended(self, payload: Mapping[str, Any]) -> ParsingRules:
        """
        Return a copy extended with extra synonyms and aliases.

        Synonyms are appended after the existing ones so the defaults keep
        their matching priority. Alias entries are added, replacing any
        existing entry for the same key.

        Args:
            payload: Dict shaped like rules.schema.json

        Returns:
            New ParsingRules instance
        """
        return ParsingRules(
            column_synonyms=_merge_synonyms(self.column_synonyms, payload.get("column_synonyms", {})),
            type_aliases={**self.type_aliases, **payload.get("type_aliases", {})},
            difficulty_aliases={**self.difficulty_aliases, **payload.get("difficulty_aliases", {})},
            label_synonyms=_merge_synonyms(self.label_synonyms, payload.get("label_synonyms", {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the rules file shape."""
        return {
            "column_synonyms": {k: list(v) for k, v in self.column_synonyms.items()},
            "type_aliases": {k: v.value for k, v in self.type_aliases.items()},
            "difficulty_aliases": {k: v.value for k, v in self.difficulty_aliases.items()},
            "label_synonyms": {k: list(v) for k, v in self.label_synonyms.items()},
        }


def _merge_synonyms(
    base: Mapping[str, Tuple[str, ...]],
    extra: Mapping[str, Iterable[str]],
) -> Dict[str, Tuple[str, ...]]:
    merged = {name: tuple(values) for name, values in base.items()}
    for name, values in extra.items():
        if isinstance(values, str):
            raise ValueError(f"Synonyms for {name!r} must be a list, not a string")
        merged[name] = merged.get(name, ()) + tuple(values)
    return merged


DEFAULT_RULES = ParsingRules(
    column_synonyms={
        "question": ["question", "q", "question_text", "question text", "text", "content"],
        "type": ["type", "question_type", "question type", "qtype", "format"],
        "options": ["options", "choices", "answers", "alternatives"],
        "correct_answer": ["correct", "answer", "correct_answer", "correct answer", "right_answer", "solution"],
        "explanation": ["explanation", "explain", "reason", "rationale", "why"],
        "points": ["points", "score", "marks", "weight", "value"],
        "difficulty": ["difficulty", "level", "complexity", "hardness"],
        "category": ["category", "subject", "topic", "chapter", "section"],
    },
    type_aliases={
        "multiple choice": "multiple-choice",
        "multiple-choice": "multiple-choice",
        "mcq": "multiple-choice",
        "choice": "multiple-choice",
        "true/false": "true-false",
        "true-false": "true-false",
        "t/f": "true-false",
        "tf": "true-false",
        "short answer": "short-answer",
        "short-answer": "short-answer",
        "sa": "short-answer",
        "essay": "essay",
        "long answer": "essay",
        "written": "essay",
    },
    difficulty_aliases={
        "easy": "easy",
        "e": "easy",
        "1": "easy",
        "simple": "easy",
        "medium": "medium",
        "m": "medium",
        "2": "medium",
        "moderate": "medium",
        "hard": "hard",
        "h": "hard",
        "3": "hard",
        "difficult": "hard",
        "complex": "hard",
    },
    label_synonyms={
        "correct_answer": ["Answer", "Correct", "Solution"],
        "explanation": ["Explanation", "Explain", "Reason", "Rationale"],
        "points": ["Points", "Score", "Marks"],
        "difficulty": ["Difficulty", "Level"],
        "type": ["Type", "Format"],
        "category": ["Category", "Subject", "Topic"],
    },
)


def load_rules(path: Path, base: Optional[ParsingRules] = None) -> ParsingRules:
    """
    Load a JSON rules file and extend ``base`` (the defaults) with it.

    Args:
        path: JSON file shaped like rules.schema.json
        base: Rules to extend. Defaults to DEFAULT_RULES.

    Returns:
        Extended ParsingRules

    Raises:
        FileNotFoundError: If path doesn't exist
        ValidationError: If the file is not valid JSON or fails the schema

    Example:
        >>> rules = load_rules(Path("school_aliases.json"))
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid rules JSON: {e}", path=str(path), errors=[str(e)])

    validate_rules(payload)
    rules = (base or DEFAULT_RULES).extended(payload)
    logger.info(f"Loaded parsing rules from {path.name}")
    return rules
