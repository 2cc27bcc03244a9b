"""
Tabular (spreadsheet) importer.

Decodes .xlsx workbooks with openpyxl and .xls workbooks with xlrd,
maps loosely named header columns to question fields and emits one
record per non-empty row.
"""

from .columns import ColumnMap, map_columns, normalize_headers, option_column_letter
from .extractor import TabularExtractor
from .options import assemble_options, parse_options_text
from .workbook import SheetData, cell_text, is_empty_row, load_workbook_bytes

__all__ = [
    "TabularExtractor",
    "ColumnMap",
    "map_columns",
    "normalize_headers",
    "option_column_letter",
    "assemble_options",
    "parse_options_text",
    "SheetData",
    "cell_text",
    "is_empty_row",
    "load_workbook_bytes",
]
