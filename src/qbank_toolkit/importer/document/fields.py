"""
Module: importer.document.fields

Purpose:
    Regex field extraction inside one document section. Patterns are
    compiled from the label synonyms and option letters of an
    ImportConfig, so each extractor instance owns its own compiled set.

Key Classes:
    - SectionFields: Raw (un-normalised) values found in a section
    - SectionFieldExtractor: Compiled patterns + extract()

Used By:
    - importer.document.extractor
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from qbank_toolkit.common.rules import DEFAULT_RULES, LABEL_FIELDS, ParsingRules

__all__ = ["SectionFields", "SectionFieldExtractor"]

# Numbering prefix of a question line: "Question 2:", "Q1.", "Q.", "Q What", "3)"
_NUMBERING_PREFIX = (
    r"(?:Question[ \t]*(?:\d+|(?=[.):\-]))"
    r"|Q(?:\d+|(?=[.):\- \t]))"
    r"|\d+(?=[.):\-\s]))"
)


@dataclass(frozen=True)
class SectionFields:
    """
    Raw field values found in one section.

    Strings are trimmed; a field that was not found is an empty string.
    """
    question: str = ""
    options: Tuple[str, ...] = ()
    correct_answer: str = ""
    explanation: str = ""
    points: str = ""
    difficulty: str = ""
    question_type: str = ""
    category: str = ""


def _label_group(labels: Sequence[str]) -> str:
    # Longest first so "Explanation" wins over "Explain"
    ordered = sorted(labels, key=len, reverse=True)
    return "(?:" + "|".join(re.escape(label) for label in ordered) + ")"


def _collapse_lines(text: str) -> str:
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


class SectionFieldExtractor:
    """
    Finds question text, options and labelled fields in a section.

    Labels are matched case-insensitively anywhere in the section and the
    first match wins, so a label word inside the question prose (for
    example "Answer: ..." in the stem) is picked up before the real label
    line further down.

    Args:
        rules: Supplies the label synonyms. Defaults to DEFAULT_RULES.
        option_letters: Letters recognised as option markers, in order.

    Example:
        >>> extractor = SectionFieldExtractor()
        >>> fields = extractor.extract("Q1. Capital of Peru?\\nA) Lima\\nB) Quito\\nAnswer: A")
        >>> fields.question, fields.options, fields.correct_answer
        ('Capital of Peru?', ('Lima', 'Quito'), 'A')
    """

    def __init__(
        self,
        rules: Optional[ParsingRules] = None,
        option_letters: str = "ABCD",
    ) -> None:
        self.rules = rules or DEFAULT_RULES
        self.option_letters = option_letters
        letters = "[" + re.escape(option_letters) + "]"
        # "a)", "B.", "(c)" in either case; a bare "A " only in upper case
        marker = r"(?:\(?(?i:" + letters + r")[.):\-]|(?-i:" + letters + r")[ \t])"

        all_labels = [label for name in LABEL_FIELDS for label in self.rules.labels_for(name)]
        boundary = (
            r"(?=\n[ \t]*" + marker
            + r"|\n[ \t]*\d+[.)]"
            + (r"|\n[ \t]*" + _label_group(all_labels) + r"\b" if all_labels else "")
            + r"|\n[ \t]*\n|\Z)"
        )
        self._question_re = re.compile(
            r"^[ \t]*" + _NUMBERING_PREFIX + r"[ \t]*[.):\-]*[ \t]*(?P<text>.+?)" + boundary,
            re.IGNORECASE | re.MULTILINE | re.DOTALL,
        )
        self._option_re = re.compile(
            r"^[ \t]*" + marker + r"[ \t\-.)]*(?P<text>.+?)[ \t]*$",
            re.MULTILINE,
        )

        self._label_res = {}
        for name in LABEL_FIELDS:
            labels = self.rules.labels_for(name)
            if not labels:
                continue
            group = _label_group(labels)
            if name == "correct_answer":
                pattern = r"\b" + group + r"[ \t:]*\(?(?P<value>" + letters + r")\b"
            elif name == "points":
                pattern = r"\b" + group + r"\b[ \t:]*(?P<value>\d+)"
            elif name == "category":
                pattern = r"\b" + group + r"\b[ \t]*:[ \t]*(?P<value>[^\n]*)"
            else:
                pattern = r"\b" + group + r"\b[ \t:]*(?P<value>[^\n]*)"
            self._label_res[name] = re.compile(pattern, re.IGNORECASE)

    def question_text(self, section: str) -> str:
        """Question stem after the numbering prefix, or "" when no prefix is found."""
        match = self._question_re.search(section)
        if not match:
            return ""
        return _collapse_lines(match.group("text"))

    def options(self, section: str) -> Tuple[str, ...]:
        """Every option-marker line in match order."""
        return tuple(
            match.group("text").strip()
            for match in self._option_re.finditer(section)
            if match.group("text").strip()
        )

    def label(self, section: str, field_name: str) -> str:
        """
        First labelled value for ``field_name`` in the section, or "".

        The answer letter is returned upper-cased ("Answer: b" -> "B").
        """
        pattern = self._label_res.get(field_name)
        if pattern is None:
            return ""
        match = pattern.search(section)
        if not match:
            return ""
        value = match.group("value").strip()
        return value.upper() if field_name == "correct_answer" else value

    def extract(self, section: str) -> SectionFields:
        """Run every field pattern over ``section``."""
        return SectionFields(
            question=self.question_text(section),
            options=self.options(section),
            correct_answer=self.label(section, "correct_answer"),
            explanation=self.label(section, "explanation"),
            points=self.label(section, "points"),
            difficulty=self.label(section, "difficulty"),
            question_type=self.label(section, "type"),
            category=self.label(section, "category"),
        )
