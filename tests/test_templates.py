"""
Tests for the submission templates.
"""

from assignment_pdf.models import AssignmentSubmission
from assignment_pdf.templates import format_date, format_submission_text, render_submission_html


def _submission(**overrides):
    data = dict(
        title="Essay <One>",
        subject="History",
        student_name="Jane Doe",
        student_number="S123",
        school_name="North High",
        due_date="2024-03-05",
        content="**Intro**\n- point",
    )
    data.update(overrides)
    return AssignmentSubmission(**data)


class TestFormatDate:
    def test_iso_date(self):
        assert format_date("2024-03-05") == "March 5, 2024"

    def test_iso_timestamp(self):
        assert format_date("2024-12-25T10:00:00Z") == "December 25, 2024"

    def test_unparseable_passthrough(self):
        assert format_date("next week") == "next week"

    def test_empty(self):
        assert format_date(None) == ""


class TestSubmissionHtml:
    def test_values_escaped(self):
        html = render_submission_html(_submission())
        assert "Essay &lt;One&gt;" in html
        assert "Essay <One>" not in html

    def test_content_normalised_with_breaks(self):
        html = render_submission_html(_submission())
        assert "Intro<br>1. point" in html

    def test_fields_rendered(self):
        html = render_submission_html(_submission())
        assert "North High" in html
        assert "March 5, 2024" in html
        assert "S123" in html

    def test_provider_note(self):
        html = render_submission_html(_submission(provider="openai", generated_date="2024-03-01"))
        assert "Generated using openai on March 1, 2024" in html

    def test_no_provider_note(self):
        html = render_submission_html(_submission())
        assert 'class="ai-info"' not in html


class TestSubmissionText:
    def test_layout(self):
        text = format_submission_text(_submission())
        assert text.startswith("NORTH HIGH\n")
        assert "Title: Essay <One>" in text
        assert "Due Date: March 5, 2024" in text
        assert "Content:\n--------\nIntro\n1. point\n" in text
