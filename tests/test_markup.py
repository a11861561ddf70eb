"""
Tests for inline markup splitting.
"""

import pytest
from pydantic import ValidationError

from assignment_pdf.markup import parse_line, split_runs
from assignment_pdf.models import StyledRun


class TestSplitRuns:
    def test_bold_between_plain(self):
        runs = split_runs("plain **bold** plain")
        assert runs == [
            StyledRun(text="plain ", bold=False),
            StyledRun(text="bold", bold=True),
            StyledRun(text=" plain", bold=False),
        ]

    def test_leading_bold_label(self):
        runs = split_runs("**Answer:** The result is 42.")
        assert runs == [
            StyledRun(text="Answer:", bold=True),
            StyledRun(text=" The result is 42.", bold=False),
        ]

    def test_unpaired_delimiter_is_plain(self):
        assert split_runs("a **b") == [StyledRun(text="a **b", bold=False)]

    def test_trailing_unpaired_after_pair(self):
        runs = split_runs("x **y** z **w")
        assert runs == [
            StyledRun(text="x ", bold=False),
            StyledRun(text="y", bold=True),
            StyledRun(text=" z **w", bold=False),
        ]

    def test_multiple_pairs_keep_order(self):
        runs = split_runs("**a** and **b**")
        assert [(r.text, r.bold) for r in runs] == [("a", True), (" and ", False), ("b", True)]

    def test_empty_line(self):
        assert split_runs("") == []

    def test_empty_bold_pair_dropped(self):
        assert split_runs("****") == []

    def test_runs_are_immutable(self):
        run = split_runs("text")[0]
        with pytest.raises(ValidationError):
            run.text = "other"


class TestParseLine:
    def test_bullet_marker_stripped(self):
        parsed = parse_line("- first **point**")
        assert parsed.is_bullet
        assert [(r.text, r.bold) for r in parsed.runs] == [("first ", False), ("point", True)]

    def test_dash_without_space_is_text(self):
        parsed = parse_line("-5 degrees")
        assert not parsed.is_bullet
        assert parsed.runs[0].text == "-5 degrees"

    def test_bullet_without_words(self):
        parsed = parse_line("- ")
        assert parsed.is_bullet
        assert parsed.runs == []

    def test_plain_line(self):
        parsed = parse_line("Just text")
        assert not parsed.is_bullet
        assert parsed.runs == [StyledRun(text="Just text")]
