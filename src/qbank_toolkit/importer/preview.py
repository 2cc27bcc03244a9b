"""
Module: importer.preview

Purpose:
    Caller-facing preview of an import: valid/invalid counts and a
    per-record table so a reviewer can see which rows need fixing before
    bulk import.

Key Functions:
    - summarize(): Records -> ImportStats
    - preview_rows(): Records -> list of dicts with index and validity
    - format_preview(): Records -> fixed-width text table

Used By:
    - cli: preview command
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from qbank_toolkit.core.models import ImportStats, Question

__all__ = ["summarize", "preview_rows", "format_preview"]

_TEXT_WIDTH = 48


def summarize(questions: Sequence[Question]) -> ImportStats:
    """Count total, valid and invalid records."""
    return ImportStats.from_questions(questions)


def preview_rows(questions: Sequence[Question]) -> List[Dict[str, Any]]:
    """
    One dict per record: 1-based ``index``, ``valid`` and the record fields.

    Example:
        >>> preview_rows([Question("2 + 2?")])[0]["index"]
        1
    """
    rows = []
    for index, question in enumerate(questions, 1):
        row: Dict[str, Any] = {"index": index, "valid": question.is_valid}
        row.update(question.to_dict())
        rows.append(row)
    return rows


def _clip(text: str, width: int) -> str:
    text = " ".join(text.split())
    return text if len(text) <= width else text[: width - 3] + "..."


def format_preview(questions: Sequence[Question]) -> str:
    """Render records as a text table followed by the stats line."""
    header = f"{'#':>4}  {'ok':<3} {'type':<16} {'diff':<7} {'pts':>3} {'opts':>4}  {'answer':<8} question"
    lines = [header, "-" * len(header)]
    for row in preview_rows(questions):
        lines.append(
            f"{row['index']:>4}  {'yes' if row['valid'] else 'NO':<3} "
            f"{row['type']:<16} {row['difficulty']:<7} {row['points']:>3} "
            f"{len(row['options']):>4}  {_clip(row['correctAnswer'], 8):<8} "
            f"{_clip(row['question'], _TEXT_WIDTH) or '(missing question text)'}"
        )
    lines.append("")
    lines.append(summarize(questions).summary())
    return "\n".join(lines)
