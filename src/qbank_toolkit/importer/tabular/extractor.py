"""
Module: importer.tabular.extractor

Purpose:
    Spreadsheet pipeline: decode -> per-sheet header discovery -> one
    Question per non-empty data row. Sheets are concatenated in workbook
    order, rows in file order.

Key Classes:
    - TabularExtractor: QuestionExtractor for .xlsx/.xls

Dependencies:
    - importer.tabular.workbook: openpyxl/xlrd decode
    - importer.tabular.columns: Header mapping
    - importer.tabular.options: Option assembly
    - common.normalizers: Type/difficulty/points

Used By:
    - importer.pipeline: TABULAR format
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from qbank_toolkit.common.normalizers import FieldNormalizer
from qbank_toolkit.core.models import Question
from qbank_toolkit.importer.config import ImportConfig

from .columns import ColumnMap, map_columns, normalize_headers
from .options import assemble_options
from .workbook import SheetData, cell_text, is_empty_row, load_workbook_bytes

logger = logging.getLogger(__name__)

__all__ = ["TabularExtractor"]


class TabularExtractor:
    """
    Extracts questions from spreadsheet workbooks.

    Column mapping is recomputed for every sheet; nothing is remembered
    between sheets or files.

    Example:
        >>> extractor = TabularExtractor()
        >>> questions = extractor.parse(Path("bank.xlsx").read_bytes())
    """

    def __init__(self, config: Optional[ImportConfig] = None) -> None:
        self.config = config or ImportConfig()
        self.normalizer = FieldNormalizer(self.config.rules)

    def decode(self, data: bytes) -> Tuple[SheetData, ...]:
        """Bytes -> sheets. Raises DecodeError."""
        return load_workbook_bytes(data)

    def extract(self, sheets: Sequence[SheetData]) -> List[Question]:
        """Sheets -> questions, in workbook order."""
        questions: List[Question] = []
        for sheet in sheets:
            questions.extend(self.parse_sheet(sheet))
        return questions

    def parse(self, data: bytes) -> List[Question]:
        return self.extract(self.decode(data))

    def parse_sheet(self, sheet: SheetData) -> List[Question]:
        """
        Parse one sheet.

        The first row is the header row. Sheets with no data rows yield
        nothing; blank rows are skipped. A sheet without a question column
        still yields one (invalid) record per non-empty row.
        """
        if len(sheet.rows) < 2:
            logger.debug(f"Sheet {sheet.name!r} has no data rows")
            return []

        headers = normalize_headers(sheet.header)
        column_map = map_columns(
            headers,
            self.config.rules,
            max_option_columns=self.config.max_option_columns,
        )
        logger.debug(f"Sheet {sheet.name!r} columns: {column_map.describe(headers)}")
        if not column_map.has_question:
            logger.warning(f"Sheet {sheet.name!r} has no question column; its rows will be invalid")

        questions = [
            self.parse_row(row, column_map)
            for row in sheet.body
            if not is_empty_row(row)
        ]
        logger.debug(f"Sheet {sheet.name!r}: {len(questions)} records")
        return questions

    def parse_row(self, row: Sequence[Any], column_map: ColumnMap) -> Question:
        """Build a record from one data row."""

        def value(field_name: str) -> str:
            index = column_map.index_of(field_name)
            if index is None or index >= len(row):
                return ""
            return cell_text(row[index])

        return Question(
            question_text=value("question"),
            question_type=self.normalizer.question_type(value("type")),
            options=tuple(assemble_options(row, column_map)),
            correct_answer=value("correct_answer"),
            explanation=value("explanation"),
            points=self.normalizer.points(value("points")),
            difficulty=self.normalizer.difficulty(value("difficulty")),
            category=value("category"),
        )
