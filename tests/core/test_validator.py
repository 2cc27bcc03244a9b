"""
Unit Tests for Schema Validation

Test Coverage:
- validate_question(): Basic checks and strict JSON schema mode
- validate_rules(): Rules extension payloads
"""

import pytest

from qbank_toolkit.core.schemas.validator import (
    ValidationError,
    validate_question,
    validate_rules,
)


class TestValidateQuestion:
    """Tests for validate_question function."""

    @pytest.fixture
    def valid_question_data(self) -> dict:
        """Create valid question data for testing."""
        return {
            "question": "What is 2 + 2?",
            "type": "multiple-choice",
            "options": ["3", "4"],
            "correctAnswer": "B",
            "explanation": "",
            "points": 1,
            "difficulty": "medium",
            "category": "",
        }

    def test_validate_when_valid_data_then_no_error(self, valid_question_data):
        """Valid question data should pass validation."""
        # Should not raise
        validate_question(valid_question_data, strict=True)

    def test_validate_when_missing_field_then_raises_error(self, valid_question_data):
        del valid_question_data["correctAnswer"]

        with pytest.raises(ValidationError, match="Missing required fields"):
            validate_question(valid_question_data)

    def test_validate_when_invalid_type_then_raises_error(self, valid_question_data):
        valid_question_data["type"] = "matching"

        with pytest.raises(ValidationError, match="Invalid question type") as exc_info:
            validate_question(valid_question_data)
        assert exc_info.value.path == "type"

    def test_validate_when_invalid_difficulty_then_raises_error(self, valid_question_data):
        valid_question_data["difficulty"] = "impossible"

        with pytest.raises(ValidationError, match="Invalid difficulty"):
            validate_question(valid_question_data)

    @pytest.mark.parametrize("points", [0, -3, "2", 1.0, True])
    def test_validate_when_bad_points_then_raises_error(self, valid_question_data, points):
        valid_question_data["points"] = points

        with pytest.raises(ValidationError, match="Invalid points"):
            validate_question(valid_question_data)

    def test_validate_when_options_not_list_then_raises_error(self, valid_question_data):
        valid_question_data["options"] = "A) 3 B) 4"

        with pytest.raises(ValidationError, match="options"):
            validate_question(valid_question_data)

    def test_validate_when_not_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question(["question"])

    def test_validate_strict_when_option_not_string_then_raises_error(self, valid_question_data):
        """Only strict mode checks item types."""
        valid_question_data["options"] = ["3", 4]

        validate_question(valid_question_data, strict=False)
        with pytest.raises(ValidationError, match="Schema validation failed") as exc_info:
            validate_question(valid_question_data, strict=True)
        assert exc_info.value.path == "options.1"


class TestValidateRules:
    """Tests for validate_rules function."""

    def test_validate_rules_when_valid_then_no_error(self):
        validate_rules({
            "column_synonyms": {"question": ["prompt"]},
            "type_aliases": {"open": "essay"},
            "difficulty_aliases": {"4": "hard"},
            "label_synonyms": {"correct_answer": ["Key"]},
        })

    def test_validate_rules_when_empty_then_no_error(self):
        validate_rules({})

    def test_validate_rules_when_unknown_field_then_raises_error(self):
        with pytest.raises(ValidationError):
            validate_rules({"column_synonyms": {"colour": ["colour"]}})

    def test_validate_rules_when_synonyms_not_list_then_raises_error(self):
        with pytest.raises(ValidationError):
            validate_rules({"label_synonyms": {"points": "Marks"}})
