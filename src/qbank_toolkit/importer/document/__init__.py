"""
Flow-document (word processor) importer.

Decodes .docx files with python-docx, splits the text into question
sections and reads labelled fields from each section.
"""

from .extractor import FlowDocumentExtractor
from .fields import SectionFieldExtractor, SectionFields
from .segmentation import (
    DEFAULT_SEGMENTERS,
    Segmenter,
    segment_sections,
    split_on_line_number,
    split_on_q_number,
    split_on_question_word,
)
from .text import extract_document_text

__all__ = [
    "FlowDocumentExtractor",
    "SectionFieldExtractor",
    "SectionFields",
    "DEFAULT_SEGMENTERS",
    "Segmenter",
    "segment_sections",
    "split_on_line_number",
    "split_on_q_number",
    "split_on_question_word",
    "extract_document_text",
]
