"""
Tests for greedy line wrapping.
"""

import pytest

from assignment_pdf.markup import parse_line
from assignment_pdf.models import StyledRun
from assignment_pdf.wrapper import tokenize, wrap_line

LOREM = (
    "The quick brown fox jumps over the lazy dog while **the bold reviewer** "
    "considers whether the essay answers the question in enough depth to pass "
    "and notes several points about structure, evidence and citations."
)


class TestTokenize:
    def test_words_do_not_cross_runs(self):
        words = tokenize([StyledRun(text="foo"), StyledRun(text="bar", bold=True)])
        assert [(w.text, w.bold, w.spaces) for w in words] == [("foo", False, 0), ("bar", True, 0)]

    def test_run_edge_spaces_become_separators(self):
        words = tokenize([
            StyledRun(text="plain "),
            StyledRun(text="bold", bold=True),
            StyledRun(text=" plain"),
        ])
        assert [(w.text, w.spaces) for w in words] == [("plain", 0), ("bold", 1), ("plain", 1)]

    def test_double_space_kept(self):
        words = tokenize([StyledRun(text="a  b")])
        assert [(w.text, w.spaces) for w in words] == [("a", 0), ("b", 2)]


class TestWrapLine:
    def test_no_line_exceeds_width(self, measure):
        lines = wrap_line(parse_line(LOREM), 150, measure)
        assert len(lines) > 1
        for line in lines:
            if " " in line.text:
                assert measure(line.text) <= 150

    def test_all_words_preserved_in_order(self, measure):
        lines = wrap_line(parse_line("one two three four five six"), 60, measure)
        assert " ".join(line.text for line in lines).split() == ["one", "two", "three", "four", "five", "six"]

    def test_fits_on_one_line(self, measure):
        lines = wrap_line(parse_line("short line"), 500, measure)
        assert len(lines) == 1
        assert lines[0].text == "short line"

    def test_overlong_word_alone(self, measure):
        long_word = "x" * 200
        lines = wrap_line(parse_line(f"a {long_word} b"), 100, measure)
        assert [line.text for line in lines] == ["a", long_word, "b"]
        assert measure(long_word) > 100

    def test_fragment_offsets(self, measure):
        lines = wrap_line(parse_line("**Answer:** The result is 42."), 500, measure)
        assert len(lines) == 1
        fragments = lines[0].fragments
        assert [(f.text, f.bold) for f in fragments] == [("Answer:", True), (" The result is 42.", False)]
        assert fragments[0].x == 0
        assert fragments[1].x == pytest.approx(measure("Answer:"))

    def test_bold_word_starting_new_line(self, measure):
        lines = wrap_line(parse_line("aaaa bbbb **cccc**"), measure("aaaa bbbb") + 1, measure)
        assert len(lines) == 2
        assert lines[1].fragments[0].text == "cccc"
        assert lines[1].fragments[0].bold
        assert lines[1].fragments[0].x == 0

    def test_bullet_continuation(self, measure):
        parsed = parse_line("- item one two three four five six seven eight nine ten")
        lines = wrap_line(parsed, 100, measure, bullet_indent=20)
        assert len(lines) > 1
        assert lines[0].is_bullet_start
        assert all(not line.is_bullet_start for line in lines[1:])
        assert all(line.indent == 20 for line in lines)
        for line in lines:
            if " " in line.text:
                assert measure(line.text) <= 80

    def test_non_bullet_has_no_indent(self, measure):
        lines = wrap_line(parse_line("plain words"), 100, measure, bullet_indent=20)
        assert lines[0].indent == 0
        assert not lines[0].is_bullet_start

    def test_empty_line(self, measure):
        assert wrap_line(parse_line(""), 100, measure) == []

    def test_bullet_without_words(self, measure):
        lines = wrap_line(parse_line("- "), 100, measure, bullet_indent=20)
        assert len(lines) == 1
        assert lines[0].is_bullet_start
        assert lines[0].fragments == []
