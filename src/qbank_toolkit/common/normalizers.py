"""
Module: common.normalizers

Purpose:
    Deterministic mapping from loosely formatted cell/label text to
    canonical field values. Shared by the spreadsheet and document
    importers so both formats normalise identically.

Key Classes:
    - FieldNormalizer: Normalizer bound to a ParsingRules instance

Key Functions:
    - normalize_type(): Raw text -> QuestionType (default multiple-choice)
    - normalize_difficulty(): Raw text -> Difficulty (default medium)
    - normalize_points(): Raw text/number -> positive int (default 1)

Dependencies:
    - common.rules: Alias tables

Used By:
    - importer.tabular.extractor
    - importer.document.extractor
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from qbank_toolkit.core.models import (
    DEFAULT_DIFFICULTY,
    DEFAULT_POINTS,
    DEFAULT_QUESTION_TYPE,
    Difficulty,
    QuestionType,
)

from .rules import DEFAULT_RULES, ParsingRules, alias_key

__all__ = [
    "FieldNormalizer",
    "normalize_type",
    "normalize_difficulty",
    "normalize_points",
]

# Leading integer, parseInt style: "7", "7 marks", "2.5" -> 2
_LEADING_INT_RE = re.compile(r"[+-]?\d+")


def normalize_points(raw: Any) -> int:
    """
    Normalise a points value to a positive integer.

    Args:
        raw: Cell text, label capture or native number.

    Returns:
        The parsed integer, or 1 when parsing fails or the value is below 1.
        There is no upper bound.

    Example:
        >>> normalize_points("7")
        7
        >>> normalize_points("-5")
        1
        >>> normalize_points("abc")
        1
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_POINTS
    if isinstance(raw, int):
        return max(DEFAULT_POINTS, raw)
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return DEFAULT_POINTS
        return max(DEFAULT_POINTS, int(raw))

    match = _LEADING_INT_RE.match(str(raw).strip())
    if not match:
        return DEFAULT_POINTS
    return max(DEFAULT_POINTS, int(match.group(0)))


class FieldNormalizer:
    """
    Normalizer bound to one set of alias tables.

    Stateless apart from the (read-only) rules, so a single instance may be
    shared between imports.

    Example:
        >>> normalizer = FieldNormalizer()
        >>> normalizer.question_type(" MCQ ")
        <QuestionType.MULTIPLE_CHOICE: 'multiple-choice'>
        >>> normalizer.difficulty("3")
        <Difficulty.HARD: 'hard'>
    """

    def __init__(self, rules: Optional[ParsingRules] = None) -> None:
        self.rules = rules or DEFAULT_RULES

    def question_type(self, raw: Any) -> QuestionType:
        """Map raw type text to a QuestionType; unknown or empty -> multiple-choice."""
        key = alias_key(raw)
        if not key:
            return DEFAULT_QUESTION_TYPE
        return self.rules.type_aliases.get(key, DEFAULT_QUESTION_TYPE)

    def difficulty(self, raw: Any) -> Difficulty:
        """Map raw difficulty text to a Difficulty; unknown or empty -> medium."""
        key = alias_key(raw)
        if not key:
            return DEFAULT_DIFFICULTY
        return self.rules.difficulty_aliases.get(key, DEFAULT_DIFFICULTY)

    @staticmethod
    def points(raw: Any) -> int:
        """See normalize_points()."""
        return normalize_points(raw)


_DEFAULT_NORMALIZER = FieldNormalizer()


def _normalizer_for(rules: Optional[ParsingRules]) -> FieldNormalizer:
    return _DEFAULT_NORMALIZER if rules is None else FieldNormalizer(rules)


def normalize_type(raw: Any, rules: Optional[ParsingRules] = None) -> QuestionType:
    """
    Normalise question type text.

    Example:
        >>> normalize_type("T/F")
        <QuestionType.TRUE_FALSE: 'true-false'>
        >>> normalize_type("unrecognized-xyz")
        <QuestionType.MULTIPLE_CHOICE: 'multiple-choice'>
    """
    return _normalizer_for(rules).question_type(raw)


def normalize_difficulty(raw: Any, rules: Optional[ParsingRules] = None) -> Difficulty:
    """
    Normalise difficulty text.

    Example:
        >>> normalize_difficulty("Simple")
        <Difficulty.EASY: 'easy'>
        >>> normalize_difficulty("")
        <Difficulty.MEDIUM: 'medium'>
    """
    return _normalizer_for(rules).difficulty(raw)
