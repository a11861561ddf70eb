"""
Non-paginated submission templates.

HTML and plain-text layouts of a submission, used where the printing or
sharing layer does its own pagination.

License: MIT
"""

from datetime import date, datetime
from html import escape
from typing import Optional

from assignment_pdf.models import AssignmentSubmission
from assignment_pdf.normalizer import normalize

HTML_STYLE = """
    @page {
      margin: 20px;
    }
    body {
      font-family: 'Helvetica', sans-serif;
      line-height: 1.6;
      padding: 20px;
    }
    .header {
      text-align: center;
      margin-bottom: 30px;
      border-bottom: 2px solid #333;
      padding-bottom: 20px;
    }
    .school-name {
      font-size: 24px;
      font-weight: bold;
      margin-bottom: 10px;
    }
    .assignment-info, .student-info {
      margin-bottom: 30px;
      border: 1px solid #ddd;
      padding: 15px;
      border-radius: 5px;
    }
    .student-info {
      background-color: #f8f8f8;
    }
    .content {
      margin-top: 20px;
      text-align: justify;
    }
    .ai-info {
      margin-top: 20px;
      font-style: italic;
      color: #666;
      background-color: #f8f8f8;
      padding: 10px;
      border-radius: 5px;
    }
    .footer {
      margin-top: 40px;
      text-align: center;
      font-size: 12px;
      color: #666;
      border-top: 1px solid #ddd;
      padding-top: 20px;
    }
"""


def format_date(value: Optional[str]) -> str:
    """Render an ISO date as 'Month D, YYYY'; anything unparseable is returned unchanged."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def _today() -> str:
    return format_date(date.today().isoformat())


def render_submission_html(submission: AssignmentSubmission) -> str:
    """
    Render a submission as a standalone HTML page.

    Args:
        submission: Submission data; content is normalised before rendering

    Returns:
        HTML document
    """
    content = escape(normalize(submission.content)).replace("\n", "<br>")

    ai_info = ""
    if submission.provider:
        generated = ""
        if submission.generated_date:
            generated = f" on {escape(format_date(submission.generated_date))}"
        ai_info = f'<div class="ai-info">Generated using {escape(submission.provider)}{generated}</div>'

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{escape(submission.title)}</title>
  <style>{HTML_STYLE}</style>
</head>
<body>
  <div class="header">
    <div class="school-name">{escape(submission.school_name)}</div>
    <h2>Assignment Submission</h2>
  </div>

  <div class="assignment-info">
    <h3>{escape(submission.title)}</h3>
    <p><strong>Subject:</strong> {escape(submission.subject)}</p>
    <p><strong>Due Date:</strong> {escape(format_date(submission.due_date))}</p>
  </div>

  <div class="student-info">
    <h3>Student Information</h3>
    <p><strong>Name:</strong> {escape(submission.student_name)}</p>
    <p><strong>Student ID:</strong> {escape(submission.student_number)}</p>
  </div>

  <div class="content">{content}</div>

  {ai_info}

  <div class="footer">Submitted on: {_today()}</div>
</body>
</html>
"""


def format_submission_text(submission: AssignmentSubmission) -> str:
    """Plain-text submission layout for text sharing."""
    return f"""{submission.school_name.upper()}
===========================================

ASSIGNMENT SUBMISSION
-------------------

Title: {submission.title}
Subject: {submission.subject}
Due Date: {format_date(submission.due_date)}

Student Information:
------------------
Name: {submission.student_name}
Student ID: {submission.student_number}

Content:
--------
{normalize(submission.content)}

Submitted on: {_today()}
"""
