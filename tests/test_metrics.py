"""
Tests for font resolution and measurement.
"""

import logging
import os

import pytest
import reportlab

from assignment_pdf.metrics import FontMetrics


class TestResolve:
    @pytest.mark.parametrize("family,expected", [
        ("Times-Roman", "Times-Roman"),
        ("Helvetica", "Helvetica"),
        ("Courier", "Courier"),
        ("Times New Roman", "Times-Roman"),
        ("arial", "Helvetica"),
        ("Calibri", "Helvetica"),
        ("Courier New", "Courier"),
    ])
    def test_known_families(self, metrics, family, expected):
        assert metrics.resolve(family) == expected

    def test_unknown_family_uses_default(self, metrics, caplog):
        with caplog.at_level(logging.WARNING):
            assert metrics.resolve("Wingdings") == "Times-Roman"
        assert "Wingdings" in caplog.text

    def test_missing_family_uses_default(self, metrics):
        assert metrics.resolve(None) == "Times-Roman"


class TestMeasure:
    def test_monotonic(self, measure):
        assert measure("") == 0
        assert measure("abc") <= measure("abcd")
        assert measure("word") < measure("word word")

    def test_scales_with_size(self, metrics):
        assert metrics.measure("text", "Helvetica", 24) == pytest.approx(2 * metrics.measure("text", "Helvetica", 12))

    def test_measurer_matches_measure(self, metrics):
        measure = metrics.measurer("Courier", 10)
        assert measure("monospace") == metrics.measure("monospace", "Courier", 10)

    def test_courier_is_fixed_width(self, metrics):
        assert metrics.measure("iiii", "Courier", 12) == metrics.measure("MMMM", "Courier", 12)


class TestRegisterFontFile:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(Exception):
            FontMetrics({"Helvetica": str(tmp_path / "missing.ttf")})

    def test_same_family_from_different_files(self):
        font_dir = os.path.join(os.path.dirname(reportlab.__file__), "fonts")
        regular = FontMetrics({"Helvetica": os.path.join(font_dir, "Vera.ttf")})
        bold = FontMetrics({"Helvetica": os.path.join(font_dir, "VeraBd.ttf")})

        assert regular.resolve("Helvetica") != bold.resolve("Helvetica")
        assert regular.measure("Wide words", "Helvetica", 12) < bold.measure("Wide words", "Helvetica", 12)
        assert FontMetrics().resolve("Helvetica") == "Helvetica"
