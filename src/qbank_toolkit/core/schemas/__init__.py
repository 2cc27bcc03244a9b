"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_question,
    validate_rules,
    ValidationError,
)

__all__ = [
    "validate_question",
    "validate_rules",
    "ValidationError",
]
