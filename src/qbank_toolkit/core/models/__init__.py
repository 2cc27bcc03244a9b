"""
Core Models Package

Immutable data models shared by every importer.

All models in this package are frozen dataclasses. Records are built once,
fully populated, and handed to the caller; nothing in the import pipeline
mutates them afterwards.
"""

from .questions import (
    Question,
    QuestionType,
    Difficulty,
    RECORD_FIELDS,
    DEFAULT_QUESTION_TYPE,
    DEFAULT_DIFFICULTY,
    DEFAULT_POINTS,
)
from .summary import ImportStats

__all__ = [
    "Question",
    "QuestionType",
    "Difficulty",
    "RECORD_FIELDS",
    "DEFAULT_QUESTION_TYPE",
    "DEFAULT_DIFFICULTY",
    "DEFAULT_POINTS",
    "ImportStats",
]
