"""
Pydantic models for assignment export.

These models define the inline text structures produced during layout, the
export options and header metadata supplied by callers, and the payloads
accepted by the HTTP service.

License: MIT
"""

from typing import List as ListType, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from assignment_pdf.styles import HEADER_LABELS


class StyledRun(BaseModel):
    """A piece of one logical line that is either bold or plain."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text content")
    bold: bool = Field(default=False, description="Bold formatting")


class ParsedLine(BaseModel):
    """A logical line split into styled runs, with its bullet marker removed."""
    model_config = ConfigDict(frozen=True)

    runs: ListType[StyledRun] = Field(default_factory=list, description="Ordered runs")
    is_bullet: bool = Field(default=False, description="Line started with a '- ' marker")


class LineFragment(BaseModel):
    """A run of same-styled words on one physical line."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text to draw")
    bold: bool = Field(default=False, description="Draw with faux-bold")
    x: float = Field(default=0.0, description="Advance from the line's text origin, in points")


class PhysicalLine(BaseModel):
    """Exactly what fits on one drawn line."""
    model_config = ConfigDict(frozen=True)

    fragments: ListType[LineFragment] = Field(default_factory=list)
    is_bullet_start: bool = Field(default=False, description="Draw the bullet glyph on this line")
    indent: float = Field(default=0.0, description="Text indent from the left margin, in points")

    @property
    def text(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)


HeaderField = Literal[
    "school_name", "full_name", "student_number", "program",
    "class_name", "department", "address",
]


class HeaderMetadata(BaseModel):
    """Student/school details printed above the body."""
    full_name: Optional[str] = Field(default=None, description="Student name")
    student_number: Optional[str] = Field(default=None, description="Student number")
    program: Optional[str] = Field(default=None, description="Study program")
    school_name: Optional[str] = Field(default=None, description="School name")
    class_name: Optional[str] = Field(default=None, description="Class")
    department: Optional[str] = Field(default=None, description="Department")
    address: Optional[str] = Field(default=None, description="School address")

    def header_lines(self, fields: ListType[str]) -> ListType[str]:
        """
        Build the upper-cased header lines for the given fields.

        Absent values render as empty strings.
        """
        lines = []
        for name in fields:
            value = getattr(self, name) or ""
            lines.append(f"{HEADER_LABELS[name]}: {value}".strip().upper())
        return lines


class DocumentOptions(BaseModel):
    """Export settings supplied once per composition."""
    include_header: bool = Field(default=True, description="Render the header block")
    font_size: float = Field(default=12, ge=8, le=24, description="Font size in points")
    font_family: str = Field(default="Times-Roman", description="Times-Roman, Helvetica or Courier")
    line_height: float = Field(default=1.5, ge=1.0, le=3.0, description="Line height multiplier")
    page_size: Literal["A4", "LETTER"] = Field(default="A4", description="Page size")
    header_fields: ListType[HeaderField] = Field(
        default_factory=lambda: ["full_name", "student_number", "program"],
        description="Header fields, in drawing order",
    )
    title: Optional[str] = Field(default=None, description="PDF title metadata")
    author: Optional[str] = Field(default=None, description="PDF author metadata")

    @property
    def line_advance(self) -> float:
        """Fixed vertical advance per physical line."""
        return self.font_size * self.line_height


class ExportRequest(BaseModel):
    """Payload for the export endpoints."""
    title: str = Field(default="", description="Assignment title")
    question: str = Field(default="", description="Assignment question or prompt")
    answer: str = Field(default="", description="Drafted answer")
    content: Optional[str] = Field(default=None, description="Pre-assembled body; overrides title/question/answer")
    header: Optional[HeaderMetadata] = Field(default=None)
    options: DocumentOptions = Field(default_factory=DocumentOptions)


class AssignmentSubmission(BaseModel):
    """Data for the non-paginated submission templates."""
    title: str
    subject: str = ""
    student_name: str = ""
    student_number: str = ""
    school_name: str = ""
    due_date: str = ""
    content: str = ""
    provider: Optional[str] = None
    generated_date: Optional[str] = None


class NormalizeRequest(BaseModel):
    text: str = ""


class GenerateRequest(BaseModel):
    prompt: str = Field(..., description="Prompt sent to the text-generation provider")

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v):
        """Reject prompts that are empty after trimming."""
        if not v.strip():
            raise ValueError("prompt must not be empty")
        return v


class GeneratedResponse(BaseModel):
    provider: str
    prompt: str
    text: str
