"""
Module: questions

Purpose:
    Provides the Question dataclass - the canonical record produced by every
    importer regardless of the source format. Immutable, validated on
    construction, with a fixed JSON shape for bulk import.

Key Classes:
    - QuestionType: Canonical question type enum
    - Difficulty: Canonical difficulty enum
    - Question: Frozen question record

Key Functions:
    - Question.is_valid: True when the record carries question text
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - importer.tabular.extractor
    - importer.document.extractor
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class QuestionType(str, Enum):
    """Canonical question type."""
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    SHORT_ANSWER = "short-answer"
    ESSAY = "essay"

    def __str__(self) -> str:
        return self.value


class Difficulty(str, Enum):
    """Canonical difficulty level."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def __str__(self) -> str:
        return self.value


DEFAULT_QUESTION_TYPE = QuestionType.MULTIPLE_CHOICE
DEFAULT_DIFFICULTY = Difficulty.MEDIUM
DEFAULT_POINTS = 1

# Output keys in their fixed order
RECORD_FIELDS: Tuple[str, ...] = (
    "question",
    "type",
    "options",
    "correctAnswer",
    "explanation",
    "points",
    "difficulty",
    "category",
)


@dataclass(frozen=True)
class Question:
    """
    Canonical exam question record (immutable).

    Records are produced once per spreadsheet row or document section and
    handed to the caller as disposable values. A record with empty question
    text is still a record: it is reported as invalid, never dropped.

    Attributes:
        question_text: Question stem, trimmed. Required for validity.
        question_type: Canonical type, defaults to multiple-choice.
        options: Answer options in letter order (A, B, C...). May be empty.
        correct_answer: Raw answer token as found (letter, index or text).
            Not checked against ``options``.
        explanation: Optional explanation text.
        points: Positive integer, defaults to 1.
        difficulty: Canonical difficulty, defaults to medium.
        category: Optional category/topic text.

    Example:
        >>> q = Question("What is 2 + 2?", options=("3", "4"), correct_answer="B")
        >>> q.is_valid
        True
        >>> q.to_dict()["type"]
        'multiple-choice'
    """

    question_text: str = ""
    question_type: QuestionType = DEFAULT_QUESTION_TYPE
    options: Tuple[str, ...] = ()
    correct_answer: str = ""
    explanation: str = ""
    points: int = DEFAULT_POINTS
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    category: str = ""

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if not isinstance(self.question_type, QuestionType):
            raise ValueError(f"question_type must be a QuestionType: {self.question_type!r}")
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"difficulty must be a Difficulty: {self.difficulty!r}")
        if isinstance(self.points, bool) or not isinstance(self.points, int) or self.points < 1:
            raise ValueError(f"points must be a positive integer: {self.points!r}")
        if not isinstance(self.options, tuple):
            # Lists are accepted for convenience but stored as a tuple
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def is_valid(self) -> bool:
        """True when the record has non-empty question text."""
        return bool(self.question_text.strip())

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the bulk-import JSON shape.

        Returns:
            Dict with keys in RECORD_FIELDS order.
        """
        return {
            "question": self.question_text,
            "type": self.question_type.value,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "points": self.points,
            "difficulty": self.difficulty.value,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Deserialize from the bulk-import JSON shape.

        Args:
            data: Dict representation (missing keys take defaults)

        Returns:
            Question instance

        Raises:
            ValueError: If type/difficulty are not canonical values or
                points is not a positive integer.
        """
        return cls(
            question_text=data.get("question", ""),
            question_type=QuestionType(data.get("type", DEFAULT_QUESTION_TYPE.value)),
            options=tuple(data.get("options", ())),
            correct_answer=data.get("correctAnswer", ""),
            explanation=data.get("explanation", ""),
            points=data.get("points", DEFAULT_POINTS),
            difficulty=Difficulty(data.get("difficulty", DEFAULT_DIFFICULTY.value)),
            category=data.get("category", ""),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        text = self.question_text if len(self.question_text) <= 40 else self.question_text[:37] + "..."
        return (
            f"Question({text!r}, type={self.question_type.value}, "
            f"options={len(self.options)}, points={self.points})"
        )
