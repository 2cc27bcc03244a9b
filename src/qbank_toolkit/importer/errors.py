"""
Module: importer.errors

Purpose:
    Exception hierarchy for the import pipeline. Only whole-file failures
    are errors; incomplete records are reported through Question.is_valid.

Key Classes:
    - QuestionImportError: Base class for import failures
    - UnsupportedFormatError: File extension has no extractor
    - DecodeError: Bytes could not be opened as the declared format

Used By:
    - importer.pipeline: Raises UnsupportedFormatError
    - importer.tabular.workbook, importer.document.text: Raise DecodeError
    - cli: Maps failures to exit code 1
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

__all__ = ["QuestionImportError", "UnsupportedFormatError", "DecodeError"]


class QuestionImportError(RuntimeError):
    """Raised when a file cannot be imported at all."""


class UnsupportedFormatError(QuestionImportError):
    """Raised when the file extension maps to no extractor."""

    def __init__(self, extension: str, supported: Iterable[str] = ()) -> None:
        self.extension = extension
        self.supported: Tuple[str, ...] = tuple(supported)
        message = f"Unsupported file format: {extension!r}" if extension else "File has no extension"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class DecodeError(QuestionImportError):
    """Raised when the underlying reader rejects the bytes."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
