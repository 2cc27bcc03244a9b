import io
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import qbank_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def build_xlsx(sheets):
    """
    Build .xlsx bytes in memory.

    Args:
        sheets: List of (sheet_name, rows) where rows is a list of lists.
    """
    import openpyxl

    workbook = openpyxl.Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets:
        sheet = workbook.create_sheet(title=name)
        for row in rows:
            sheet.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def build_docx(lines):
    """Build .docx bytes with one paragraph per line."""
    import docx

    document = docx.Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


# Common test fixtures
@pytest.fixture
def xlsx_factory():
    """Return the in-memory workbook builder."""
    return build_xlsx


@pytest.fixture
def docx_factory():
    """Return the in-memory document builder."""
    return build_docx


@pytest.fixture
def sample_rows():
    """Header row plus two questions, one with a blank question cell."""
    return [
        ["Question Text", "Type", "Options", "Answer", "Points", "Difficulty", "Category"],
        ["What is 2 + 2?", "MCQ", "A) 3 B) 4 C) 5", "B", "2", "Easy", "Maths"],
        ["", "MCQ", "A) Red B) Blue", "A", "1", "Hard", "Art"],
    ]
