"""
Module: importer.document.extractor

Purpose:
    Flow-document pipeline: decode -> segment -> per-section field
    extraction -> normalisation. One Question per section, in order.

Key Classes:
    - FlowDocumentExtractor: QuestionExtractor for .docx/.doc

Dependencies:
    - importer.document.text: python-docx decode
    - importer.document.segmentation: Section strategies
    - importer.document.fields: Field patterns
    - common.normalizers: Type/difficulty/points

Used By:
    - importer.pipeline: FLOW_DOCUMENT format
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from qbank_toolkit.common.normalizers import FieldNormalizer
from qbank_toolkit.core.models import Question

from .fields import SectionFieldExtractor
from .segmentation import segment_sections
from .text import extract_document_text

if TYPE_CHECKING:
    from qbank_toolkit.importer.config import ImportConfig

logger = logging.getLogger(__name__)

__all__ = ["FlowDocumentExtractor"]


class FlowDocumentExtractor:
    """
    Extracts questions from word-processor documents.

    Patterns are compiled once per instance from the config, so an
    instance can be reused for many files but holds no per-file state.

    Example:
        >>> extractor = FlowDocumentExtractor()
        >>> questions = extractor.parse(Path("bank.docx").read_bytes())
    """

    def __init__(self, config: Optional[ImportConfig] = None) -> None:
        if config is None:
            # Deferred: importer.config imports this package for its defaults
            from qbank_toolkit.importer.config import ImportConfig
            config = ImportConfig()
        self.config = config
        self.normalizer = FieldNormalizer(self.config.rules)
        self.fields = SectionFieldExtractor(self.config.rules, self.config.option_letters)

    def decode(self, data: bytes) -> str:
        """Bytes -> plain text. Raises DecodeError."""
        return extract_document_text(data)

    def extract(self, text: str) -> List[Question]:
        """Plain text -> questions."""
        return self.parse_text(text)

    def parse(self, data: bytes) -> List[Question]:
        return self.extract(self.decode(data))

    def parse_text(self, text: str) -> List[Question]:
        """Segment ``text`` and build one record per section."""
        sections = segment_sections(text, self.config.segmenters)
        return [self.parse_section(section) for section in sections]

    def parse_section(self, section: str) -> Question:
        """Build a record from one section; missing fields take defaults."""
        found = self.fields.extract(section)
        question = Question(
            question_text=found.question,
            question_type=self.normalizer.question_type(found.question_type),
            options=found.options,
            correct_answer=found.correct_answer,
            explanation=found.explanation,
            points=self.normalizer.points(found.points),
            difficulty=self.normalizer.difficulty(found.difficulty),
            category=found.category,
        )
        if not question.is_valid:
            logger.debug(f"Section without question text: {section.strip()[:60]!r}")
        return question
