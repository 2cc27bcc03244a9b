"""
Tests for importer.tabular.workbook

Test Coverage:
- load_workbook_bytes(): .xlsx decode, sheet order, error wrapping
- cell_text(): Rendering of raw cell values
- is_empty_row()
"""

import datetime
import io

import pytest

from qbank_toolkit.importer.errors import DecodeError
from qbank_toolkit.importer.tabular.workbook import (
    SheetData,
    cell_text,
    is_empty_row,
    load_workbook_bytes,
)


class TestCellText:
    """Tests for cell_text."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""),
            ("  Paris ", "Paris"),
            (2.0, "2"),
            (2.5, "2.5"),
            (7, "7"),
            (True, "True"),
        ],
    )
    def test_cell_text_when_value_then_rendered(self, value, expected):
        assert cell_text(value) == expected

    def test_cell_text_when_date_then_str(self):
        assert cell_text(datetime.date(2024, 5, 1)) == "2024-05-01"


class TestIsEmptyRow:
    """Tests for is_empty_row."""

    @pytest.mark.parametrize("row", [(), (None, None), ("", "  ", "\t"), (None, " ")])
    def test_is_empty_row_when_blank_then_true(self, row):
        assert is_empty_row(row)

    @pytest.mark.parametrize("row", [(None, "x"), (0,), ("", 1.5)])
    def test_is_empty_row_when_any_value_then_false(self, row):
        assert not is_empty_row(row)


class TestLoadWorkbookBytes:
    """Tests for load_workbook_bytes."""

    def test_load_when_xlsx_then_sheets_in_order(self, xlsx_factory):
        # Arrange
        data = xlsx_factory([
            ("First", [["Question"], ["One?"]]),
            ("Second", [["Question"], ["Two?"]]),
        ])

        # Act
        sheets = load_workbook_bytes(data)

        # Assert
        assert [sheet.name for sheet in sheets] == ["First", "Second"]
        assert sheets[0].header == ("Question",)
        assert sheets[1].body == (("Two?",),)

    def test_load_when_numbers_then_native_values(self, xlsx_factory):
        data = xlsx_factory([("S", [["Points"], [3]])])

        sheets = load_workbook_bytes(data)

        assert sheets[0].rows[1][0] == 3

    def test_load_when_unknown_bytes_then_decode_error(self):
        with pytest.raises(DecodeError, match="Not a spreadsheet"):
            load_workbook_bytes(b"%PDF-1.7 not a workbook")

    def test_load_when_corrupt_zip_then_decode_error_with_cause(self):
        """Library failures are wrapped and chained."""
        data = b"PK\x03\x04" + b"\x00" * 64

        with pytest.raises(DecodeError) as exc_info:
            load_workbook_bytes(data)

        assert exc_info.value.cause is not None
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_load_when_zip_is_not_a_workbook_then_decode_error(self):
        import zipfile

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("hello.txt", "hi")

        with pytest.raises(DecodeError):
            load_workbook_bytes(buffer.getvalue())

    def test_load_when_corrupt_ole2_then_decode_error(self):
        data = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64

        with pytest.raises(DecodeError, match=".xls"):
            load_workbook_bytes(data)


class TestSheetData:
    """Tests for SheetData."""

    def test_header_when_empty_sheet_then_empty_tuple(self):
        sheet = SheetData(name="Empty", rows=())

        assert sheet.header == ()
        assert sheet.body == ()
