"""
Font resolution and text measurement.

Maps the user-facing font families onto ReportLab fonts and measures text
runs with ReportLab's font metrics.

License: MIT
"""

import hashlib
import logging
from typing import Callable, Dict, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from assignment_pdf.styles import fonts

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]


class FontMetrics:
    """
    Resolves font families and measures text widths.

    Families resolve to the ReportLab standard fonts unless a TrueType file has
    been registered for them with :meth:`register_font_file`.
    """

    def __init__(self, font_files: Optional[Dict[str, str]] = None):
        self._embedded: Dict[str, str] = {}
        for family, path in (font_files or {}).items():
            self.register_font_file(family, path)

    def register_font_file(self, family: str, path: str) -> str:
        """
        Embed a TrueType font and use it for a family.

        Args:
            family: Family name as supplied in export options
            path: Path to a .ttf file

        Returns:
            The ReportLab font name registered for the family

        Raises:
            Whatever ReportLab raises when the file cannot be loaded
        """
        canonical = self._canonical_family(family) or family
        # ReportLab's registry is process-wide; key the name on the file too
        digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:8]
        font_name = f"{canonical.replace(' ', '')}-Embedded-{digest}"
        pdfmetrics.registerFont(TTFont(font_name, path))
        self._embedded[canonical] = font_name
        logger.info(f"Registered font file {path} for family {canonical}")
        return font_name

    @staticmethod
    def _canonical_family(family: Optional[str]) -> Optional[str]:
        if not family:
            return None
        if family in fonts.families:
            return family
        return fonts.aliases.get(family.strip().lower())

    def resolve(self, family: Optional[str]) -> str:
        """Return the ReportLab font name for a family, falling back to the default."""
        canonical = self._canonical_family(family)
        if canonical is None:
            logger.warning(f"Unknown font family {family!r}, using {fonts.default_family}")
            canonical = fonts.default_family
        if canonical in self._embedded:
            return self._embedded[canonical]
        return fonts.families[canonical]

    def measure(self, text: str, family: Optional[str], font_size: float) -> float:
        """Width of a text run in points."""
        return pdfmetrics.stringWidth(text, self.resolve(family), font_size)

    def measurer(self, family: Optional[str], font_size: float) -> Measure:
        """Return a width function bound to one family and size."""
        font_name = self.resolve(family)

        def measure(text: str) -> float:
            return pdfmetrics.stringWidth(text, font_name, font_size)

        return measure
