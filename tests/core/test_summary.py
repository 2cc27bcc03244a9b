"""
Unit Tests for ImportStats

Test Coverage:
- from_questions(): Counting valid/invalid records
- Invariant validation
- success_rate, summary(), to_dict()
"""

import pytest

from qbank_toolkit.core.models import ImportStats, Question


class TestImportStats:
    """Tests for ImportStats."""

    def test_from_questions_when_mixed_records_then_counts(self):
        # Arrange
        questions = [Question("a"), Question(""), Question("b"), Question("  ")]

        # Act
        stats = ImportStats.from_questions(questions)

        # Assert
        assert (stats.total, stats.valid, stats.invalid) == (4, 2, 2)

    def test_from_questions_when_empty_then_zeros(self):
        stats = ImportStats.from_questions([])

        assert stats.to_dict() == {"total": 0, "valid": 0, "invalid": 0}
        assert stats.success_rate == 0.0

    def test_init_when_counts_inconsistent_then_raises(self):
        with pytest.raises(ValueError, match="must equal total"):
            ImportStats(total=3, valid=1, invalid=1)

    def test_init_when_negative_then_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            ImportStats(total=-1, valid=0, invalid=-1)

    def test_summary_when_called_then_sentence(self):
        stats = ImportStats(total=15, valid=12, invalid=3)

        assert stats.summary() == "12 of 15 records parsed successfully"
        assert stats.success_rate == pytest.approx(0.8)

    def test_summary_when_single_record_then_singular(self):
        assert ImportStats(total=1, valid=1, invalid=0).summary() == "1 of 1 record parsed successfully"
