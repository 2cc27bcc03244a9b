"""
Module: importer.document.text

Purpose:
    Decode word-processor bytes into plain text. Only paragraph text is
    read (tables, images and formatting are ignored); paragraphs are joined
    with newlines so line-anchored patterns see one paragraph per line.

Key Functions:
    - extract_document_text(): bytes -> text

Dependencies:
    - python-docx: .docx reading

Used By:
    - importer.document.extractor
"""

from __future__ import annotations

import io
import logging

import docx

from qbank_toolkit.importer.containers import OLE2, ZIP, sniff_container
from qbank_toolkit.importer.errors import DecodeError

logger = logging.getLogger(__name__)

__all__ = ["extract_document_text"]


def extract_document_text(data: bytes) -> str:
    """
    Extract paragraph text from a .docx payload.

    Args:
        data: Raw file bytes.

    Returns:
        Paragraph texts joined by "\\n".

    Raises:
        DecodeError: For legacy binary .doc files (OLE2), non-ZIP bytes or
            a package python-docx cannot open.
    """
    container = sniff_container(data)
    if container == OLE2:
        raise DecodeError(
            "Legacy binary .doc files cannot be read; re-save the document as .docx"
        )
    if container != ZIP:
        raise DecodeError("Not a Word document; re-save the file as .docx")

    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:
        raise DecodeError(f"Could not open Word document: {exc}", exc) from exc

    paragraphs = [paragraph.text for paragraph in document.paragraphs]
    logger.debug(f"Read {len(paragraphs)} paragraphs from document")
    return "\n".join(paragraphs)
