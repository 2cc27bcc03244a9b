"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_questions,
    deserialize_question,
    write_questions_json,
    read_questions_json,
)

__all__ = [
    "serialize_questions",
    "deserialize_question",
    "write_questions_json",
    "read_questions_json",
]
