"""
Module: importer.config

Purpose:
    Configuration dataclass for the import pipeline. Immutable settings
    shared by both extractors; pass a customised instance to
    parse_question_file() to substitute tables or strategies.

Key Classes:
    - ImportConfig: Main configuration for an import

Dependencies:
    - common.rules: Default synonym/alias/label tables
    - importer.document.segmentation: Default segmentation strategies

Used By:
    - importer.pipeline: Builds extractors from the config
    - importer.tabular.extractor, importer.document.extractor
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Tuple

from qbank_toolkit.common.rules import DEFAULT_RULES, ParsingRules
from qbank_toolkit.importer.document.segmentation import DEFAULT_SEGMENTERS, Segmenter

# Option columns are lettered a..j
MAX_OPTION_COLUMNS = 10


@dataclass(frozen=True)
class ImportConfig:
    """
    Configuration for question import.

    Attributes:
        rules: Synonym, alias and label tables (default DEFAULT_RULES)
        option_letters: Option markers recognised in documents (default "ABCD")
        max_option_columns: Separate option columns searched in sheets,
            lettered a.. (default 10, at most 10)
        segmenters: Ordered section-splitting strategies for documents

    Example:
        >>> config = ImportConfig(option_letters="ABCDE")
        >>> config.max_option_columns
        10
    """
    rules: ParsingRules = DEFAULT_RULES
    option_letters: str = "ABCD"
    max_option_columns: int = MAX_OPTION_COLUMNS
    segmenters: Tuple[Segmenter, ...] = DEFAULT_SEGMENTERS

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.rules, ParsingRules):
            raise ValueError(f"rules must be a ParsingRules instance, got {type(self.rules).__name__}")
        if not self.option_letters:
            raise ValueError("option_letters must not be empty")
        if any(letter not in string.ascii_uppercase for letter in self.option_letters):
            raise ValueError(f"option_letters must be uppercase A-Z, got {self.option_letters!r}")
        if len(set(self.option_letters)) != len(self.option_letters):
            raise ValueError(f"option_letters contains duplicates: {self.option_letters!r}")
        if not 0 <= self.max_option_columns <= MAX_OPTION_COLUMNS:
            raise ValueError(
                f"max_option_columns must be between 0 and {MAX_OPTION_COLUMNS}, "
                f"got {self.max_option_columns}"
            )
        if not isinstance(self.segmenters, tuple):
            object.__setattr__(self, "segmenters", tuple(self.segmenters))
        if any(not callable(segmenter) for segmenter in self.segmenters):
            raise ValueError("segmenters must be callables taking and returning text")
