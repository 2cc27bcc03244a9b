"""
Module: importer.tabular.workbook

Purpose:
    Decode spreadsheet bytes into plain row tuples. The container is
    sniffed from the leading bytes rather than trusted from the file name:
    OOXML (.xlsx, a ZIP package) is read with openpyxl and legacy BIFF
    (.xls, an OLE2 compound file) with xlrd.

Key Classes:
    - SheetData: One worksheet as a tuple of row tuples

Key Functions:
    - load_workbook_bytes(): bytes -> sheets in workbook order
    - cell_text(): Raw cell value -> trimmed display string
    - is_empty_row(): True when every cell is blank

Dependencies:
    - openpyxl: .xlsx reading
    - xlrd: .xls reading

Used By:
    - importer.tabular.extractor
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import openpyxl
import xlrd

from qbank_toolkit.importer.containers import OLE2, ZIP, sniff_container
from qbank_toolkit.importer.errors import DecodeError

logger = logging.getLogger(__name__)

__all__ = ["SheetData", "load_workbook_bytes", "cell_text", "is_empty_row"]


@dataclass(frozen=True)
class SheetData:
    """
    One decoded worksheet.

    Attributes:
        name: Sheet title as shown in the workbook tabs.
        rows: Raw cell values, row by row. Rows may differ in length.
    """
    name: str
    rows: Tuple[Tuple[Any, ...], ...]

    @property
    def header(self) -> Tuple[Any, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def body(self) -> Tuple[Tuple[Any, ...], ...]:
        return self.rows[1:]


def cell_text(value: Any) -> str:
    """
    Render a raw cell value as trimmed text.

    Example:
        >>> cell_text(2.0), cell_text(None), cell_text("  Paris ")
        ('2', '', 'Paris')
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_empty_row(row: Sequence[Any]) -> bool:
    """True when every cell is missing or whitespace."""
    return all(cell_text(cell) == "" for cell in row)


def load_workbook_bytes(data: bytes) -> Tuple[SheetData, ...]:
    """
    Decode a workbook.

    Args:
        data: Raw .xlsx or .xls bytes.

    Returns:
        Sheets in workbook order.

    Raises:
        DecodeError: If the bytes are neither container type or the reader
            library rejects them.
    """
    container = sniff_container(data)
    if container == ZIP:
        sheets = _load_ooxml(data)
    elif container == OLE2:
        sheets = _load_biff(data)
    else:
        raise DecodeError("Not a spreadsheet: expected an .xlsx or .xls workbook")
    logger.debug(f"Decoded workbook with {len(sheets)} sheets")
    return sheets


def _load_ooxml(data: bytes) -> Tuple[SheetData, ...]:
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except Exception as exc:
        raise DecodeError(f"Could not open .xlsx workbook: {exc}", exc) from exc

    try:
        return tuple(
            SheetData(
                name=worksheet.title,
                rows=tuple(tuple(row) for row in worksheet.iter_rows(values_only=True)),
            )
            for worksheet in workbook.worksheets
        )
    finally:
        workbook.close()


def _load_biff(data: bytes) -> Tuple[SheetData, ...]:
    try:
        book = xlrd.open_workbook(file_contents=data)
    except Exception as exc:
        raise DecodeError(f"Could not open .xls workbook: {exc}", exc) from exc

    try:
        return tuple(
            SheetData(
                name=sheet.name,
                rows=tuple(tuple(sheet.row_values(index)) for index in range(sheet.nrows)),
            )
            for sheet in book.sheets()
        )
    finally:
        book.release_resources()
