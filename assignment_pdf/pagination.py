"""
Page flow and PDF serialisation.

Keeps the vertical cursor for one composition, turns physical lines into
absolute draw operations page by page, and writes the finished pages through a
ReportLab canvas.

License: MIT
"""

import io
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from reportlab.pdfgen import canvas

from assignment_pdf.models import PhysicalLine
from assignment_pdf.styles import LIST_MARKERS, page_config, spacing

logger = logging.getLogger(__name__)


@dataclass
class PageLayout:
    """Page geometry in points."""
    width: float
    height: float
    margin_left: float = page_config.margin
    margin_right: float = page_config.margin
    margin_top: float = page_config.margin
    margin_bottom: float = page_config.margin

    @classmethod
    def for_page_size(cls, page_size: str) -> "PageLayout":
        width, height = page_config.size_for(page_size)
        return cls(width=width, height=height)

    @property
    def top(self) -> float:
        """Baseline of the first line on a page."""
        return self.height - self.margin_top

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right


@dataclass
class DrawOp:
    """One drawString call at absolute page coordinates."""
    x: float
    y: float
    text: str
    font_name: str
    font_size: float


@dataclass
class Cursor:
    page: int
    y: float


@dataclass
class PageFlow:
    """
    Places physical lines on pages.

    The cursor y is the baseline of the next line. A new page is started when
    the cursor has dropped below the bottom margin at the time a line is placed,
    so no line is ever drawn below it.
    """
    layout: PageLayout
    font_name: str
    font_size: float
    line_advance: float
    pages: List[List[DrawOp]] = field(default_factory=lambda: [[]])
    cursor: Cursor = None

    def __post_init__(self):
        if self.cursor is None:
            self.cursor = Cursor(page=0, y=self.layout.top)

    def new_page(self):
        self.pages.append([])
        self.cursor = Cursor(page=len(self.pages) - 1, y=self.layout.top)
        logger.debug(f"Started page {self.cursor.page + 1}")

    def advance(self, amount: float):
        """Move the cursor down without drawing."""
        self.cursor.y -= amount

    def _draw(self, x: float, text: str):
        self.pages[self.cursor.page].append(
            DrawOp(x=x, y=self.cursor.y, text=text, font_name=self.font_name, font_size=self.font_size)
        )

    def place(self, line: PhysicalLine):
        """Draw one physical line at the cursor and advance past it."""
        if self.cursor.y < self.layout.margin_bottom:
            self.new_page()

        if line.is_bullet_start:
            self._draw(self.layout.margin_left, LIST_MARKERS["bullet"])

        origin = self.layout.margin_left + line.indent
        for fragment in line.fragments:
            x = origin + fragment.x
            self._draw(x, fragment.text)
            if fragment.bold:
                self._draw(x + spacing.faux_bold_offset, fragment.text)

        self.cursor.y -= self.line_advance


def serialize_pages(pages: List[List[DrawOp]], layout: PageLayout,
                    title: Optional[str] = None, author: Optional[str] = None) -> bytes:
    """
    Write pages of draw operations to PDF bytes.

    Args:
        pages: Draw operations grouped by page
        layout: Page geometry
        title: Optional PDF title metadata
        author: Optional PDF author metadata

    Returns:
        PDF bytes
    """
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(layout.width, layout.height))

    if title:
        c.setTitle(title)
    if author:
        c.setAuthor(author)

    for ops in pages:
        current_font = None
        for op in ops:
            if current_font != (op.font_name, op.font_size):
                c.setFont(op.font_name, op.font_size)
                current_font = (op.font_name, op.font_size)
            c.drawString(op.x, op.y, op.text)
        c.showPage()

    c.save()
    return buffer.getvalue()
