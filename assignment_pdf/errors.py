"""
Exceptions raised by the export engine and the generation clients.

License: MIT
"""


class PDFExportError(Exception):
    """A composition failed; no document was produced."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"PDF export failed: {reason}")


class GenerationError(Exception):
    """A text-generation provider could not produce a response."""

    def __init__(self, message: str, provider: str = None):
        self.provider = provider
        super().__init__(message)
