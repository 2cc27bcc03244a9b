"""
Module: importer.document.segmentation

Purpose:
    Split extracted document text into candidate question sections.
    Each strategy is a pure ``str -> list[str]`` function that splits
    immediately before one heading style; strategies run in order, each
    refining the fragments left by the previous one.

Key Functions:
    - split_on_q_number(): Before "Q1.", "q2)", "Q3 "
    - split_on_question_word(): Before "Question 1:", "Question2."
    - split_on_line_number(): Before "1." / "2)" at a line start
    - segment_sections(): Apply an ordered list of strategies

Used By:
    - importer.document.extractor: Section boundaries
    - importer.config: DEFAULT_SEGMENTERS
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

__all__ = [
    "Segmenter",
    "split_on_q_number",
    "split_on_question_word",
    "split_on_line_number",
    "DEFAULT_SEGMENTERS",
    "segment_sections",
]

Segmenter = Callable[[str], List[str]]

# Zero-width split points (lookahead only, so the heading stays in its section)
_Q_NUMBER_RE = re.compile(r"(?=\bQ\d+[.):\-\s])", re.IGNORECASE)
_QUESTION_WORD_RE = re.compile(r"(?=\bQuestion\s*\d+[.):\-\s])", re.IGNORECASE)
_LINE_NUMBER_RE = re.compile(r"(?=^[ \t]*\d+[.):\-\s])", re.MULTILINE)


def _split_before(pattern: re.Pattern, text: str) -> List[str]:
    return [fragment for fragment in pattern.split(text) if fragment.strip()]


def split_on_q_number(text: str) -> List[str]:
    """
    Split before every ``Q<digits>`` heading.

    Example:
        >>> split_on_q_number("Q1. Two plus two?\\nQ2. Three plus three?")
        ['Q1. Two plus two?\\n', 'Q2. Three plus three?']
    """
    return _split_before(_Q_NUMBER_RE, text)


def split_on_question_word(text: str) -> List[str]:
    """Split before every ``Question <digits>`` heading."""
    return _split_before(_QUESTION_WORD_RE, text)


def split_on_line_number(text: str) -> List[str]:
    """Split before every line that starts with ``<digits>`` and a separator."""
    return _split_before(_LINE_NUMBER_RE, text)


DEFAULT_SEGMENTERS: Tuple[Segmenter, ...] = (
    split_on_q_number,
    split_on_question_word,
    split_on_line_number,
)


def segment_sections(
    text: str,
    segmenters: Sequence[Segmenter] = DEFAULT_SEGMENTERS,
) -> List[str]:
    """
    Split ``text`` into question sections.

    Every strategy is applied to every fragment produced so far, and
    whitespace-only fragments are discarded after each pass. Text with no
    recognisable heading comes back as a single section.

    Args:
        text: Plain document text (paragraphs joined by newlines).
        segmenters: Ordered strategies. Defaults to DEFAULT_SEGMENTERS.

    Returns:
        Sections in document order. Empty when the text is blank.

    Example:
        >>> segment_sections("Question 1: Name a gas.\\nQuestion 2: Name a metal.")
        ['Question 1: Name a gas.\\n', 'Question 2: Name a metal.']
    """
    sections = [text] if text.strip() else []
    for segmenter in segmenters:
        refined: List[str] = []
        for section in sections:
            refined.extend(fragment for fragment in segmenter(section) if fragment.strip())
        sections = refined
    logger.debug(f"Segmented document into {len(sections)} sections")
    return sections
