"""
Tests for importer.document.text

Test Coverage:
- extract_document_text(): Paragraph joining, legacy .doc, bad bytes
"""

import pytest

from qbank_toolkit.importer.document.text import extract_document_text
from qbank_toolkit.importer.errors import DecodeError


class TestExtractDocumentText:
    """Tests for extract_document_text."""

    def test_extract_when_docx_then_paragraphs_joined_by_newline(self, docx_factory):
        # Arrange
        data = docx_factory(["Q1. First?", "A) Yes", "", "Q2. Second?"])

        # Act
        text = extract_document_text(data)

        # Assert
        assert text == "Q1. First?\nA) Yes\n\nQ2. Second?"

    def test_extract_when_empty_docx_then_empty_text(self, docx_factory):
        assert extract_document_text(docx_factory([])) == ""

    def test_extract_when_legacy_doc_then_decode_error_suggests_docx(self):
        data = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64

        with pytest.raises(DecodeError, match="re-save"):
            extract_document_text(data)

    def test_extract_when_not_zip_then_decode_error(self):
        with pytest.raises(DecodeError, match="Not a Word document"):
            extract_document_text(b"plain text, not a document")

    def test_extract_when_zip_is_workbook_then_decode_error_with_cause(self, xlsx_factory):
        """A ZIP package that is not a Word document fails inside python-docx."""
        data = xlsx_factory([("S", [["Question"]])])

        with pytest.raises(DecodeError) as exc_info:
            extract_document_text(data)

        assert exc_info.value.cause is not None
