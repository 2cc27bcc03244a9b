"""
Tests for common.normalizers

Test Coverage:
- normalize_type(): Alias lookup, case/whitespace tolerance, default
- normalize_difficulty(): Numeric and word aliases, default
- normalize_points(): Leading integer parse, clamp to 1, native numbers
- FieldNormalizer: Custom rules
"""

import pytest

from qbank_toolkit.common.normalizers import (
    FieldNormalizer,
    normalize_difficulty,
    normalize_points,
    normalize_type,
)
from qbank_toolkit.common.rules import DEFAULT_RULES
from qbank_toolkit.core.models import Difficulty, QuestionType


class TestNormalizeType:
    """Tests for normalize_type."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("mcq", QuestionType.MULTIPLE_CHOICE),
            ("Multiple Choice", QuestionType.MULTIPLE_CHOICE),
            ("choice", QuestionType.MULTIPLE_CHOICE),
            ("T/F", QuestionType.TRUE_FALSE),
            ("tf", QuestionType.TRUE_FALSE),
            ("True/False", QuestionType.TRUE_FALSE),
            ("SA", QuestionType.SHORT_ANSWER),
            ("short answer", QuestionType.SHORT_ANSWER),
            ("Long Answer", QuestionType.ESSAY),
            ("written", QuestionType.ESSAY),
        ],
    )
    def test_normalize_type_when_alias_then_maps_to_canonical(self, raw, expected):
        """Every default alias maps to its canonical type."""
        assert normalize_type(raw) is expected

    @pytest.mark.parametrize("raw", ["mcq", " MCQ ", "McQ", "\tmcq\n"])
    def test_normalize_type_when_case_or_whitespace_varies_then_same_result(self, raw):
        """Lookup ignores case and surrounding whitespace."""
        assert normalize_type(raw) is QuestionType.MULTIPLE_CHOICE

    def test_normalize_type_when_internal_whitespace_repeated_then_collapsed(self):
        """Runs of internal whitespace are collapsed before lookup."""
        assert normalize_type("short    answer") is QuestionType.SHORT_ANSWER

    @pytest.mark.parametrize("raw", ["", None, "   ", "unrecognized-xyz"])
    def test_normalize_type_when_unknown_or_empty_then_multiple_choice(self, raw):
        """Unknown or empty input falls back to multiple-choice."""
        assert normalize_type(raw) is QuestionType.MULTIPLE_CHOICE

    def test_normalize_type_when_already_canonical_then_idempotent(self):
        """Normalising a canonical value returns the same value."""
        for qtype in QuestionType:
            assert normalize_type(qtype.value) is qtype


class TestNormalizeDifficulty:
    """Tests for normalize_difficulty."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", Difficulty.EASY),
            ("2", Difficulty.MEDIUM),
            ("3", Difficulty.HARD),
            ("Simple", Difficulty.EASY),
            ("moderate", Difficulty.MEDIUM),
            ("COMPLEX", Difficulty.HARD),
            ("h", Difficulty.HARD),
            ("e", Difficulty.EASY),
        ],
    )
    def test_normalize_difficulty_when_alias_then_maps_to_canonical(self, raw, expected):
        """Numeric and word aliases map to canonical levels."""
        assert normalize_difficulty(raw) is expected

    @pytest.mark.parametrize("raw", ["", None, "extreme", "4"])
    def test_normalize_difficulty_when_unknown_or_empty_then_medium(self, raw):
        """Unknown or empty input falls back to medium."""
        assert normalize_difficulty(raw) is Difficulty.MEDIUM

    def test_normalize_difficulty_when_numeric_cell_then_matches_text(self):
        """A native number from a spreadsheet behaves like its text."""
        assert normalize_difficulty(3) is Difficulty.HARD


class TestNormalizePoints:
    """Tests for normalize_points."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("7", 7),
            ("7 marks", 7),
            (" 12 ", 12),
            ("2.0", 2),
            ("2.9", 2),
            ("250", 250),
        ],
    )
    def test_normalize_points_when_leading_integer_then_parsed(self, raw, expected):
        """The leading integer is used and there is no upper bound."""
        assert normalize_points(raw) == expected

    @pytest.mark.parametrize("raw", ["-5", "0", "abc", "", None, "marks: 3"])
    def test_normalize_points_when_unparseable_or_below_one_then_one(self, raw):
        """Failure or a value below 1 clamps to 1."""
        assert normalize_points(raw) == 1

    @pytest.mark.parametrize("raw, expected", [(5, 5), (3.0, 3), (0, 1), (-2.5, 1), (True, 1)])
    def test_normalize_points_when_native_number_then_accepted(self, raw, expected):
        """Native numbers are accepted directly; bools are not numbers here."""
        assert normalize_points(raw) == expected

    def test_normalize_points_when_not_finite_then_one(self):
        """NaN and infinity fall back to the default."""
        assert normalize_points(float("nan")) == 1
        assert normalize_points(float("inf")) == 1


class TestFieldNormalizer:
    """Tests for FieldNormalizer bound to custom rules."""

    def test_question_type_when_custom_alias_then_used(self):
        """Extended rules add new aliases."""
        # Arrange
        rules = DEFAULT_RULES.extended({"type_aliases": {"open": "essay"}})
        normalizer = FieldNormalizer(rules)

        # Act
        result = normalizer.question_type("Open")

        # Assert
        assert result is QuestionType.ESSAY

    def test_question_type_when_default_rules_then_custom_alias_unknown(self):
        """The defaults are not affected by extending a copy."""
        DEFAULT_RULES.extended({"type_aliases": {"open": "essay"}})

        assert FieldNormalizer().question_type("open") is QuestionType.MULTIPLE_CHOICE

    def test_difficulty_when_alias_overridden_then_new_value_wins(self):
        """Extension entries override existing keys."""
        rules = DEFAULT_RULES.extended({"difficulty_aliases": {"3": "easy"}})

        assert normalize_difficulty("3", rules) is Difficulty.EASY

    def test_points_when_called_on_instance_then_same_as_function(self):
        """FieldNormalizer.points delegates to normalize_points."""
        assert FieldNormalizer().points("9 points") == 9
