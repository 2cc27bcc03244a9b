"""
Module: importer.templates

Purpose:
    Fill-in templates for instructors. The headers and labels used here
    are chosen to match the default synonym tables, so a filled-in
    template always imports without loss.

Key Functions:
    - generate_excel_template(): .xlsx bytes (one "Questions" sheet)
    - generate_word_template(): .docx bytes (one paragraph per line)

Dependencies:
    - openpyxl: Workbook writing
    - python-docx: Document writing

Used By:
    - cli: template command
"""

from __future__ import annotations

import io
from typing import List, Tuple

import docx
import openpyxl

__all__ = [
    "TEMPLATE_HEADERS",
    "TEMPLATE_ROWS",
    "WORD_TEMPLATE_TEXT",
    "generate_excel_template",
    "generate_word_template",
]

TEMPLATE_SHEET_NAME = "Questions"

TEMPLATE_HEADERS: Tuple[str, ...] = (
    "Question",
    "Type",
    "Option A",
    "Option B",
    "Option C",
    "Option D",
    "Correct Answer",
    "Explanation",
    "Points",
    "Difficulty",
    "Category",
)

TEMPLATE_ROWS: Tuple[Tuple[str, ...], ...] = (
    (
        "What is the capital of France?",
        "Multiple Choice",
        "London",
        "Berlin",
        "Paris",
        "Madrid",
        "C",
        "Paris is the capital and largest city of France.",
        "1",
        "Easy",
        "Geography",
    ),
    (
        "The Earth is flat.",
        "True/False",
        "True",
        "False",
        "",
        "",
        "B",
        "The Earth is approximately spherical.",
        "1",
        "Easy",
        "Science",
    ),
)

WORD_TEMPLATE_TEXT = """\
Q1. What is the capital of France?
A) London
B) Berlin
C) Paris
D) Madrid
Answer: C
Explanation: Paris is the capital and largest city of France.
Points: 1
Difficulty: Easy
Type: Multiple Choice
Category: Geography

Q2. The Earth is flat.
A) True
B) False
Answer: B
Explanation: The Earth is approximately spherical.
Points: 1
Difficulty: Easy
Type: True/False
Category: Science"""


def generate_excel_template() -> bytes:
    """Build the spreadsheet template and return its .xlsx bytes."""
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = TEMPLATE_SHEET_NAME
    sheet.append(list(TEMPLATE_HEADERS))
    for row in TEMPLATE_ROWS:
        # Blank cells stay empty rather than holding ""
        sheet.append([value or None for value in row])

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def template_lines() -> List[str]:
    """Word template, one entry per paragraph."""
    return WORD_TEMPLATE_TEXT.split("\n")


def generate_word_template() -> bytes:
    """Build the document template and return its .docx bytes."""
    document = docx.Document()
    for line in template_lines():
        document.add_paragraph(line)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
