"""Common lookup tables and normalizers shared by the importers."""

from __future__ import annotations

from .rules import (
    COLUMN_FIELDS,
    LABEL_FIELDS,
    DEFAULT_RULES,
    ParsingRules,
    alias_key,
    load_rules,
)
from .normalizers import (
    FieldNormalizer,
    normalize_type,
    normalize_difficulty,
    normalize_points,
)

__all__ = [
    # rules
    "COLUMN_FIELDS",
    "LABEL_FIELDS",
    "DEFAULT_RULES",
    "ParsingRules",
    "alias_key",
    "load_rules",
    # normalizers
    "FieldNormalizer",
    "normalize_type",
    "normalize_difficulty",
    "normalize_points",
]
