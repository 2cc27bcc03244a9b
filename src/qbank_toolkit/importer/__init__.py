"""
Module: importer

Purpose:
    Question bank import pipeline. Accepts raw bytes plus a file name and
    returns canonical Question records for spreadsheets (.xlsx, .xls) and
    word-processor documents (.docx, .doc).

Key Functions:
    - parse_question_file(): Main entry point for import
    - parse_question_path(): Import straight from disk

Key Classes:
    - ImportConfig: Tables, option letters and segmentation strategies
    - ImportResult: Records, warnings and timings for one file
    - QuestionImporter: Reusable dispatcher

Dependencies:
    - openpyxl, xlrd: Spreadsheet decoding
    - python-docx: Document decoding

Used By:
    - qbank_toolkit.cli
"""

from .errors import DecodeError, QuestionImportError, UnsupportedFormatError
from .config import ImportConfig
from .pipeline import (
    EXTENSION_FORMATS,
    SUPPORTED_EXTENSIONS,
    ImportResult,
    QuestionExtractor,
    QuestionImporter,
    SourceFormat,
    detect_format,
    parse_question_file,
    parse_question_path,
)
from .preview import format_preview, preview_rows, summarize

__all__ = [
    "parse_question_file",
    "parse_question_path",
    "detect_format",
    "ImportConfig",
    "ImportResult",
    "QuestionExtractor",
    "QuestionImporter",
    "SourceFormat",
    "EXTENSION_FORMATS",
    "SUPPORTED_EXTENSIONS",
    "QuestionImportError",
    "UnsupportedFormatError",
    "DecodeError",
    "format_preview",
    "preview_rows",
    "summarize",
]
