"""
Module: importer.tabular.columns

Purpose:
    Fuzzy header discovery. Each canonical field is mapped to the first
    header that contains one of its synonyms (substring match, synonyms
    tried in priority order); separate per-letter option columns are
    discovered alongside.

Key Classes:
    - ColumnMap: Field -> column index plus ordered option columns

Key Functions:
    - normalize_headers(): First-row cells -> lower-cased header strings
    - map_columns(): Headers -> ColumnMap

Used By:
    - importer.tabular.extractor
"""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from qbank_toolkit.common.rules import COLUMN_FIELDS, DEFAULT_RULES, ParsingRules

from .workbook import cell_text

logger = logging.getLogger(__name__)

__all__ = ["ColumnMap", "normalize_headers", "map_columns", "option_column_letter"]

# "option a", "option_b", "option-c", "optiond", "choice e", "opt f", "option g)"
_OPTION_HEADER_RE = re.compile(r"^(?:option|choice|opt)[\s_\-.]*([a-j])\)?$")


@dataclass(frozen=True)
class ColumnMap:
    """
    Column indices discovered for one sheet.

    Attributes:
        fields: Canonical field -> 0-based column index (unmapped fields absent)
        option_columns: Indices of separate option columns in letter order
    """
    fields: Mapping[str, int] = field(default_factory=dict)
    option_columns: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def index_of(self, field_name: str) -> Optional[int]:
        return self.fields.get(field_name)

    @property
    def has_question(self) -> bool:
        return "question" in self.fields

    def describe(self, headers: Sequence[str]) -> str:
        """Readable mapping for debug logs."""
        parts = [f"{name}={headers[index]!r}" for name, index in self.fields.items()]
        if self.option_columns:
            parts.append("option columns=" + ",".join(repr(headers[i]) for i in self.option_columns))
        return ", ".join(parts) or "(nothing mapped)"


def normalize_headers(row: Sequence[Any]) -> Tuple[str, ...]:
    """Stringify, trim and lower-case each header cell."""
    return tuple(cell_text(cell).lower() for cell in row)


def option_column_letter(header: str) -> Optional[str]:
    """
    Letter of a separate option column header, or None.

    Example:
        >>> option_column_letter("option_b")
        'b'
        >>> option_column_letter("options") is None
        True
    """
    match = _OPTION_HEADER_RE.match(header.strip())
    return match.group(1) if match else None


def map_columns(
    headers: Sequence[str],
    rules: Optional[ParsingRules] = None,
    *,
    max_option_columns: int = 10,
) -> ColumnMap:
    """
    Map canonical fields to header indices.

    Synonyms are tried in their configured order; for each synonym the
    first header containing it wins. A header "Question Text (EN)" therefore
    maps to ``question`` through the synonym "question".

    Args:
        headers: Normalised (lower-cased) headers.
        rules: Column synonyms. Defaults to DEFAULT_RULES.
        max_option_columns: How many option letters (from a) to look for.

    Returns:
        ColumnMap for the sheet.

    Example:
        >>> cmap = map_columns(["q", "option a", "option b", "answer"])
        >>> cmap.index_of("question"), cmap.option_columns
        (0, (1, 2))
    """
    rules = rules or DEFAULT_RULES
    fields: Dict[str, int] = {}
    for name in COLUMN_FIELDS:
        for synonym in rules.columns_for(name):
            index = next((i for i, header in enumerate(headers) if synonym in header), None)
            if index is not None:
                fields[name] = index
                break

    letters = string.ascii_lowercase[:max_option_columns]
    by_letter: Dict[str, int] = {}
    for index, header in enumerate(headers):
        letter = option_column_letter(header)
        if letter and letter in letters and letter not in by_letter:
            by_letter[letter] = index

    return ColumnMap(
        fields=fields,
        option_columns=tuple(by_letter[letter] for letter in letters if letter in by_letter),
    )
