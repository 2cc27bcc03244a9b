"""
Tests for importer.document.segmentation

Test Coverage:
- split_on_q_number(), split_on_question_word(), split_on_line_number()
- segment_sections(): Strategy order, blank fragment removal, fallbacks
"""

import pytest

from qbank_toolkit.importer.document.segmentation import (
    DEFAULT_SEGMENTERS,
    segment_sections,
    split_on_line_number,
    split_on_q_number,
    split_on_question_word,
)


class TestStrategies:
    """Tests for the individual split strategies."""

    @pytest.mark.parametrize("separator", [".", ")", "-", ":", " "])
    def test_split_on_q_number_when_separator_then_split(self, separator):
        text = f"Q1{separator} First\nQ2{separator} Second"

        sections = split_on_q_number(text)

        assert len(sections) == 2
        assert sections[1].startswith("Q2")

    def test_split_on_q_number_when_lowercase_then_split(self):
        assert len(split_on_q_number("q1. One\nq2. Two")) == 2

    def test_split_on_q_number_when_q_inside_word_then_not_split(self):
        """"FAQ1." is not a heading."""
        assert split_on_q_number("See FAQ1. for help") == ["See FAQ1. for help"]

    def test_split_on_q_number_when_no_heading_then_unchanged(self):
        assert split_on_q_number("plain text") == ["plain text"]

    @pytest.mark.parametrize("heading", ["Question 1:", "Question 1.", "Question1)", "question 1 -"])
    def test_split_on_question_word_when_heading_then_split(self, heading):
        text = f"{heading} First\n{heading.replace('1', '2')} Second"

        assert len(split_on_question_word(text)) == 2

    def test_split_on_line_number_when_line_start_then_split(self):
        text = "1. First\n2) Second\n3 Third"

        assert split_on_line_number(text) == ["1. First\n", "2) Second\n", "3 Third"]

    def test_split_on_line_number_when_number_mid_line_then_not_split(self):
        assert split_on_line_number("Add 2. to 3.") == ["Add 2. to 3."]


class TestSegmentSections:
    """Tests for segment_sections."""

    def test_segment_when_q_headings_then_one_section_each(self):
        # Arrange
        text = "Q1. One?\nA) x\nAnswer: A\n\nQ2. Two?\nA) y\nAnswer: A\n"

        # Act
        sections = segment_sections(text)

        # Assert
        assert len(sections) == 2
        assert sections[0].startswith("Q1.")
        assert sections[1].startswith("Q2.")

    def test_segment_when_numbered_lines_then_split(self):
        sections = segment_sections("1. One?\nA) x\n2. Two?\nA) y")

        assert [s.splitlines()[0] for s in sections] == ["1. One?", "2. Two?"]

    def test_segment_when_preamble_then_kept_as_own_section(self):
        """Text before the first heading stays a section; order is preserved."""
        sections = segment_sections("Chemistry quiz\n\nQ1. Name a gas.")

        assert sections == ["Chemistry quiz\n\n", "Q1. Name a gas."]

    def test_segment_when_no_heading_then_single_section(self):
        assert segment_sections("Just some notes.\nMore notes.") == ["Just some notes.\nMore notes."]

    @pytest.mark.parametrize("text", ["", "   \n\n\t"])
    def test_segment_when_blank_then_no_sections(self, text):
        assert segment_sections(text) == []

    def test_segment_when_no_strategies_then_whole_text(self):
        assert segment_sections("Q1. a\nQ2. b", segmenters=()) == ["Q1. a\nQ2. b"]

    def test_segment_when_custom_strategy_then_applied_after_defaults(self):
        def split_on_rule(text):
            return [part for part in text.split("----") if part.strip()]

        sections = segment_sections("Q1. a ---- b", DEFAULT_SEGMENTERS + (split_on_rule,))

        assert sections == ["Q1. a ", " b"]

    def test_segment_when_strategies_combined_then_all_headings_split(self):
        text = "Q1. a\nQuestion 2: b\n3) c"

        assert len(segment_sections(text)) == 3
