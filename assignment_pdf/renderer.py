"""
Assignment PDF composer.

Lays out assignment text as a paginated PDF: an optional header block followed
by the body, line by line, with section markers hidden, blank lines
condensed, bold runs and bullets rendered, and pages broken as the cursor
reaches the bottom margin.

License: MIT
"""

import logging
import re
from typing import List, Optional

from assignment_pdf.errors import PDFExportError
from assignment_pdf.markup import parse_line
from assignment_pdf.metrics import FontMetrics
from assignment_pdf.models import DocumentOptions, HeaderMetadata, ParsedLine, StyledRun
from assignment_pdf.pagination import DrawOp, PageFlow, PageLayout, serialize_pages
from assignment_pdf.styles import SECTION_MARKERS, spacing
from assignment_pdf.wrapper import wrap_line

logger = logging.getLogger(__name__)


def is_marker_line(line: str) -> bool:
    """True for lines that only delimit sections (Title:, Question:, Answer:)."""
    return line.strip().startswith(SECTION_MARKERS)


def build_assignment_body(title: str, question: str, answer: str) -> str:
    """Assemble the Title/Question/Answer body exported for an assignment."""
    return f"Title: {title}\n\nQuestion:\n{question}\n\nAnswer:\n{answer}\n"


def export_filename(title: str) -> str:
    """Suggested download name: the title with whitespace runs replaced by underscores."""
    stem = re.sub(r"\s+", "_", title.strip())
    return f"{stem or 'document'}.pdf"


class AssignmentRenderer:
    """
    Composes one assignment document.

    Each instance owns its page flow; build a new renderer per export.
    """

    def __init__(self, body: str, header: Optional[HeaderMetadata] = None,
                 options: Optional[DocumentOptions] = None,
                 metrics: Optional[FontMetrics] = None):
        """
        Initialize renderer.

        Args:
            body: Assignment text, markdown-flavoured
            header: Student/school details, drawn when options allow
            options: Export settings (defaults: 12pt Times-Roman, 1.5 line height)
            metrics: Font metrics provider; a fresh one is created when omitted
        """
        self.body = body or ""
        self.header = header
        self.options = options or DocumentOptions()
        self.metrics = metrics or FontMetrics()

        self.layout_config = PageLayout.for_page_size(self.options.page_size)
        self.font_name = self.metrics.resolve(self.options.font_family)
        self.measure = self.metrics.measurer(self.options.font_family, self.options.font_size)
        self.flow = PageFlow(
            layout=self.layout_config,
            font_name=self.font_name,
            font_size=self.options.font_size,
            line_advance=self.options.line_advance,
        )
        self._laid_out = False

    def layout(self) -> List[List[DrawOp]]:
        """
        Lay out header and body.

        Returns:
            Draw operations grouped by page
        """
        if not self._laid_out:
            if self.options.include_header and self.header is not None:
                self._render_header()
            self._render_body()
            self._laid_out = True
        return self.flow.pages

    def _render_header(self):
        """Draw each configured header field as faux-bold, wrapped to the content width."""
        for text in self.header.header_lines(self.options.header_fields):
            parsed = ParsedLine(runs=[StyledRun(text=text, bold=True)])
            for physical in wrap_line(parsed, self.layout_config.content_width, self.measure):
                self.flow.place(physical)

    def _render_body(self):
        suppress_blank = False
        previous_blank = False
        blank_advance = self.options.line_advance * spacing.blank_line_ratio

        for raw in self.body.split("\n"):
            line = raw.rstrip("\r")

            if is_marker_line(line):
                suppress_blank = True
                previous_blank = False
                continue

            if not line.strip():
                if not suppress_blank and not previous_blank:
                    self.flow.advance(blank_advance)
                previous_blank = True
                continue

            suppress_blank = False
            previous_blank = False
            self._render_line(line)

    def _render_line(self, line: str):
        parsed = parse_line(line)
        physical_lines = wrap_line(
            parsed,
            self.layout_config.content_width,
            self.measure,
            bullet_indent=spacing.bullet_indent,
        )
        for physical in physical_lines:
            self.flow.place(physical)

    def render(self) -> bytes:
        """
        Render the complete document to PDF.

        Returns:
            PDF bytes
        """
        pages = self.layout()
        pdf_bytes = serialize_pages(
            pages,
            self.layout_config,
            title=self.options.title,
            author=self.options.author,
        )
        logger.info(f"Composed assignment PDF with {len(pages)} page(s), {len(pdf_bytes)} bytes")
        return pdf_bytes


def compose_document(body: str, header: Optional[HeaderMetadata] = None,
                     options: Optional[DocumentOptions] = None,
                     metrics: Optional[FontMetrics] = None) -> bytes:
    """
    Compose an assignment PDF.

    Args:
        body: Assignment text
        header: Optional header metadata
        options: Export settings
        metrics: Optional font metrics provider

    Returns:
        PDF bytes

    Raises:
        PDFExportError: On any failure; no partial document is returned
    """
    try:
        return AssignmentRenderer(body, header, options, metrics).render()
    except Exception as e:
        logger.error(f"PDF export failed: {e}", exc_info=True)
        raise PDFExportError(str(e)) from e
