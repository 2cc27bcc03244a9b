"""
Module: importer.pipeline

Purpose:
    Single entry point for question import. Chooses the source format
    from the file extension once, then runs the matching extractor's
    decode and extract steps.

Key Functions:
    - parse_question_file(): bytes + filename -> ImportResult
    - parse_question_path(): Convenience wrapper reading from disk
    - detect_format(): Filename -> SourceFormat

Key Classes:
    - SourceFormat: Tabular or flow-document
    - QuestionExtractor: Interface both extractors implement
    - QuestionImporter: Holds a config and one extractor per format
    - ImportResult: Records plus warnings and timings

Dependencies:
    - importer.tabular: Spreadsheet extractor
    - importer.document: Word-processor extractor

Used By:
    - cli: preview / convert commands
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from qbank_toolkit.core.models import ImportStats, Question

from .config import ImportConfig
from .document import FlowDocumentExtractor
from .errors import UnsupportedFormatError
from .tabular import TabularExtractor
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)

__all__ = [
    "SourceFormat",
    "EXTENSION_FORMATS",
    "SUPPORTED_EXTENSIONS",
    "file_extension",
    "detect_format",
    "QuestionExtractor",
    "QuestionImporter",
    "ImportResult",
    "parse_question_file",
    "parse_question_path",
]


class SourceFormat(str, Enum):
    """Input family chosen from the file extension."""
    TABULAR = "tabular"
    FLOW_DOCUMENT = "flow-document"

    def __str__(self) -> str:
        return self.value


EXTENSION_FORMATS: Dict[str, SourceFormat] = {
    "xlsx": SourceFormat.TABULAR,
    "xls": SourceFormat.TABULAR,
    "docx": SourceFormat.FLOW_DOCUMENT,
    "doc": SourceFormat.FLOW_DOCUMENT,
}
SUPPORTED_EXTENSIONS = tuple(EXTENSION_FORMATS)


def file_extension(filename: str) -> str:
    """
    Lower-cased text after the last dot of the file name ("" when there is
    no dot). A bare ".xlsx" counts as an xlsx file.

    Example:
        >>> file_extension("Week 3 Bank.XLSX")
        'xlsx'
        >>> file_extension(".xlsx")
        'xlsx'
    """
    name = PurePath(filename).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def detect_format(filename: str) -> SourceFormat:
    """
    Pick the source format for ``filename``.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
    """
    extension = file_extension(filename)
    try:
        return EXTENSION_FORMATS[extension]
    except KeyError:
        raise UnsupportedFormatError(extension, SUPPORTED_EXTENSIONS) from None


@runtime_checkable
class QuestionExtractor(Protocol):
    """Shared capability of the format extractors."""

    def decode(self, data: bytes) -> Any:
        """Raw bytes -> decoded structure. Raises DecodeError."""
        ...

    def extract(self, decoded: Any) -> List[Question]:
        """Decoded structure -> records."""
        ...

    def parse(self, data: bytes) -> List[Question]:
        """decode() then extract()."""
        ...


@dataclass
class ImportResult:
    """
    Result of importing one file.

    Attributes:
        filename: Name the file was declared with.
        source_format: Format chosen from the extension.
        questions: Every record in source order, valid or not.
        warnings: One message per invalid record, or "No questions detected".
        timings: Phase name -> seconds.
    """
    filename: str
    source_format: SourceFormat
    questions: List[Question] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    timings: Dict[str, float] = field(default_factory=dict)

    @property
    def stats(self) -> ImportStats:
        return ImportStats.from_questions(self.questions)

    @property
    def valid_questions(self) -> List[Question]:
        return [question for question in self.questions if question.is_valid]

    @property
    def invalid_questions(self) -> List[Question]:
        return [question for question in self.questions if not question.is_valid]

    def to_dict(self) -> Dict[str, Any]:
        """Export as a JSON-serialisable dictionary."""
        return {
            "filename": self.filename,
            "format": self.source_format.value,
            "stats": self.stats.to_dict(),
            "questions": [question.to_dict() for question in self.questions],
            "warnings": list(self.warnings),
            "timings": dict(self.timings),
        }


class QuestionImporter:
    """
    Dispatches files to the extractor for their format.

    Extractors are built once from the config and reused; they hold no
    per-file state, so one importer may serve many files.

    Example:
        >>> importer = QuestionImporter()
        >>> result = importer.parse("bank.xlsx", data)
        >>> result.stats.summary()
        '12 of 15 records parsed successfully'
    """

    def __init__(self, config: Optional[ImportConfig] = None) -> None:
        self.config = config or ImportConfig()
        self._extractors: Dict[SourceFormat, QuestionExtractor] = {
            SourceFormat.TABULAR: TabularExtractor(self.config),
            SourceFormat.FLOW_DOCUMENT: FlowDocumentExtractor(self.config),
        }

    def extractor_for(self, source_format: SourceFormat) -> QuestionExtractor:
        return self._extractors[source_format]

    def parse(self, filename: str, data: bytes) -> ImportResult:
        """
        Import one file.

        Args:
            filename: Declared file name (only the extension is used).
            data: Raw file bytes.

        Returns:
            ImportResult with every record, valid or not.

        Raises:
            UnsupportedFormatError: Before any decode, for unknown extensions.
            DecodeError: If the bytes cannot be opened as the declared format.
        """
        source_format = detect_format(filename)
        extractor = self.extractor_for(source_format)
        logger.info(f"Importing {filename} as {source_format} ({len(data)} bytes)")

        timing_log = TimingLog()
        with timed_phase(timing_log, "decode"):
            decoded = extractor.decode(data)
        with timed_phase(timing_log, "extract"):
            questions = extractor.extract(decoded)

        warnings: List[str] = []
        if not questions:
            warnings.append("No questions detected")
        for position, question in enumerate(questions, 1):
            if not question.is_valid:
                warnings.append(f"Record {position} has no question text")

        result = ImportResult(
            filename=filename,
            source_format=source_format,
            questions=questions,
            warnings=warnings,
            timings=timing_log.to_dict(),
        )
        stats = result.stats
        if stats.invalid:
            logger.warning(f"{filename}: {stats.invalid} of {stats.total} records have no question text")
        logger.info(f"Completed import of {filename}: {stats.summary()} [{timing_log.summary()}]")
        return result


def parse_question_file(
    filename: str,
    data: bytes,
    *,
    config: Optional[ImportConfig] = None,
) -> ImportResult:
    """
    Parse a question bank from raw bytes.

    Args:
        filename: Declared file name; ".xlsx"/".xls" and ".docx"/".doc" are
            supported.
        data: File contents.
        config: Optional import configuration.

    Returns:
        ImportResult.

    Raises:
        UnsupportedFormatError: If the extension is not supported.
        DecodeError: If the file cannot be decoded.

    Example:
        >>> result = parse_question_file("bank.docx", Path("bank.docx").read_bytes())
        >>> len(result.questions)
        2
    """
    return QuestionImporter(config).parse(filename, data)


def parse_question_path(path: Path, *, config: Optional[ImportConfig] = None) -> ImportResult:
    """
    Parse a question bank file from disk.

    Raises:
        FileNotFoundError: If path doesn't exist.
        UnsupportedFormatError, DecodeError: As parse_question_file().
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Question file not found: {path}")
    return parse_question_file(path.name, path.read_bytes(), config=config)
