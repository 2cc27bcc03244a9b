"""
Module: importer.tabular.options

Purpose:
    Build the option list for a spreadsheet row, either from separate
    option columns or by parsing a single options cell such as
    "A) London B) Paris" or "London; Paris".

Key Functions:
    - parse_options_text(): One cell of text -> options
    - assemble_options(): Row + ColumnMap -> options
"""

from __future__ import annotations

import re
from typing import Any, List, Sequence

from .columns import ColumnMap
from .workbook import cell_text

__all__ = ["parse_options_text", "assemble_options"]

# Marker styles, tried in order. A style is used only when the text starts
# with one of its markers; later markers must continue the letter sequence
# (A, B, C...) with the same punctuation.
# A) London  B. Paris  C- Rome  (also A.) or A).)
_PUNCTUATED_MARKER_RE = re.compile(r"(?:^|(?<=\s))(?P<letter>[A-J])(?P<sep>[.)\-]+)[ \t]*")
# (A) London (B) Paris
_PARENTHESISED_MARKER_RE = re.compile(r"\((?P<letter>[A-J])(?P<sep>\))[.\-]?[ \t]*")
# A London  (one option per line)
_PLAIN_RE = re.compile(r"^[ \t]*([A-J])[ \t]+(.+?)[ \t]*$", re.MULTILINE)

_FALLBACK_SPLIT_RE = re.compile(r"[;\n]")


def _sequential_markers(pattern: re.Pattern, text: str) -> List[re.Match]:
    """Markers that start at 0 and then follow in letter order with one separator."""
    markers: List[re.Match] = []
    for match in pattern.finditer(text):
        if not markers:
            if match.start() != 0:
                return []
            markers.append(match)
            continue
        previous = markers[-1]
        if (
            ord(match.group("letter")) == ord(previous.group("letter")) + 1
            and match.group("sep") == previous.group("sep")
            and match.start() >= previous.end()
        ):
            markers.append(match)
    return markers


def _split_on_markers(pattern: re.Pattern, text: str) -> List[str]:
    markers = _sequential_markers(pattern, text)
    bodies = []
    for position, marker in enumerate(markers):
        end = markers[position + 1].start() if position + 1 < len(markers) else len(text)
        bodies.append(" ".join(text[marker.end():end].split()))
    return bodies


def _split_plain(text: str) -> List[str]:
    matches = list(_PLAIN_RE.finditer(text))
    if not matches or matches[0].start() != 0:
        return []
    return [" ".join(match.group(2).split()) for match in matches]


def parse_options_text(text: str) -> List[str]:
    """
    Split a single options cell into option texts.

    Example:
        >>> parse_options_text("A) London B) Paris")
        ['London', 'Paris']
        >>> parse_options_text("A) Vitamin C. B) Iron")
        ['Vitamin C.', 'Iron']
        >>> parse_options_text("London; Paris\\nRome")
        ['London', 'Paris', 'Rome']
    """
    text = text.strip()
    if not text:
        return []

    for options in (
        _split_on_markers(_PUNCTUATED_MARKER_RE, text),
        _split_plain(text),
        _split_on_markers(_PARENTHESISED_MARKER_RE, text),
    ):
        if options:
            return [option for option in options if option]

    return [part.strip() for part in _FALLBACK_SPLIT_RE.split(text) if part.strip()]


def assemble_options(row: Sequence[Any], column_map: ColumnMap) -> List[str]:
    """
    Options for one row.

    Separate option columns win when any of them holds a value; otherwise
    the mapped ``options`` cell is parsed.
    """
    options = [
        cell_text(row[index])
        for index in column_map.option_columns
        if index < len(row) and cell_text(row[index])
    ]
    if options:
        return options

    index = column_map.index_of("options")
    if index is None or index >= len(row):
        return []
    return parse_options_text(cell_text(row[index]))
