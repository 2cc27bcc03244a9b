"""
Module: summary

Purpose:
    Provides ImportStats - the valid/invalid tally callers use to render
    "12 of 15 rows parsed successfully" style previews.

Key Classes:
    - ImportStats: Immutable {total, valid, invalid} counts

Dependencies:
    - dataclasses (std)
    - .questions.Question

Used By:
    - importer.preview
    - importer.pipeline.ImportResult
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .questions import Question


@dataclass(frozen=True)
class ImportStats:
    """
    Valid/invalid counts over a sequence of parsed records.

    Attributes:
        total: Number of records returned by the parser
        valid: Records with non-empty question text
        invalid: Records without question text

    Invariants:
        - total == valid + invalid
    """
    total: int = 0
    valid: int = 0
    invalid: int = 0

    def __post_init__(self) -> None:
        if min(self.total, self.valid, self.invalid) < 0:
            raise ValueError("counts must be non-negative")
        if self.valid + self.invalid != self.total:
            raise ValueError(
                f"valid + invalid must equal total: {self.valid} + {self.invalid} != {self.total}"
            )

    @classmethod
    def from_questions(cls, questions: Iterable[Question]) -> ImportStats:
        """Count valid and invalid records."""
        total = 0
        valid = 0
        for question in questions:
            total += 1
            if question.is_valid:
                valid += 1
        return cls(total=total, valid=valid, invalid=total - valid)

    @property
    def success_rate(self) -> float:
        """Fraction of valid records (0.0 when nothing was parsed)."""
        if self.total == 0:
            return 0.0
        return self.valid / self.total

    def summary(self) -> str:
        """Human-readable one-line summary."""
        noun = "record" if self.total == 1 else "records"
        return f"{self.valid} of {self.total} {noun} parsed successfully"

    def to_dict(self) -> Dict[str, Any]:
        return {"total": self.total, "valid": self.valid, "invalid": self.invalid}
