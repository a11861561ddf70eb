"""
Style tokens and layout configuration for assignment PDF export.

This module defines the design tokens used by the export engine: the font
family table, page sizes, margins, spacing and the faux-bold parameters.

License: MIT
"""

from typing import Dict
from dataclasses import dataclass, field


@dataclass
class FontConfig:
    """Font families offered to users, mapped to ReportLab base fonts."""
    default_family: str = "Times-Roman"
    families: Dict[str, str] = field(default_factory=lambda: {
        "Times-Roman": "Times-Roman",
        "Helvetica": "Helvetica",
        "Courier": "Courier",
    })
    # Names used by the mobile export dialog
    aliases: Dict[str, str] = field(default_factory=lambda: {
        "times": "Times-Roman",
        "times-roman": "Times-Roman",
        "times new roman": "Times-Roman",
        "helvetica": "Helvetica",
        "arial": "Helvetica",
        "calibri": "Helvetica",
        "courier": "Courier",
        "courier new": "Courier",
    })


@dataclass
class Spacing:
    """Spacing values in points."""
    bullet_indent: int = 20
    # Second faux-bold pass is drawn this far to the right
    faux_bold_offset: float = 0.5
    # A blank body line advances by this fraction of the line advance
    blank_line_ratio: float = 0.5


@dataclass
class PageConfig:
    """Page size configurations in points (1 pt = 1/72 inch)."""

    # A4: 210 x 297 mm
    a4_width: float = 595.28
    a4_height: float = 841.89

    # LETTER: 8.5 x 11 inches
    letter_width: float = 612.0
    letter_height: float = 792.0

    margin: float = 50.0

    def size_for(self, page_size: str):
        """Return (width, height) for a page size name."""
        if page_size == "LETTER":
            return self.letter_width, self.letter_height
        return self.a4_width, self.a4_height


# Marker lines act as invisible section breaks in the body text
SECTION_MARKERS = ("Title:", "Question:", "Answer:")

LIST_MARKERS = {
    "bullet": "•",
}

HEADER_LABELS: Dict[str, str] = {
    "school_name": "School",
    "full_name": "Name",
    "student_number": "Student Number",
    "program": "Program",
    "class_name": "Class",
    "department": "Department",
    "address": "Address",
}


# Global style instances (singletons)
fonts = FontConfig()
spacing = Spacing()
page_config = PageConfig()
