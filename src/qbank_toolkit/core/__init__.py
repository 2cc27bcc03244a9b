"""
Question Bank Import Core Package

Shared data models, schemas and serialization for every importer.

1. **Immutable Records**
   - Question records are frozen dataclasses built once per row/section

2. **Canonical Values Only**
   - ``question_type`` and ``difficulty`` are enums, ``points`` is a positive int

3. **Fixed Output Shape**
   - ``Question.to_dict()`` always emits the same eight keys in the same order
"""

from .models import Question, QuestionType, Difficulty, ImportStats

__all__ = [
    "Question",
    "QuestionType",
    "Difficulty",
    "ImportStats",
]
