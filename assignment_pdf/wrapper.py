"""
Greedy line wrapping of styled runs.

License: MIT
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from assignment_pdf.models import LineFragment, ParsedLine, PhysicalLine, StyledRun


@dataclass(frozen=True)
class Word:
    text: str
    bold: bool
    spaces: int  # spaces separating it from the previous word


def tokenize(runs: List[StyledRun]) -> List[Word]:
    """
    Split runs into words on single spaces.

    A word never spans two runs. Spaces at run edges are carried as the
    separator count of the following word.
    """
    words: List[Word] = []
    pending = 0
    for run in runs:
        for index, part in enumerate(run.text.split(" ")):
            if index > 0:
                pending += 1
            if part:
                words.append(Word(text=part, bold=run.bold, spaces=pending))
                pending = 0
    return words


def _build_line(placed: List[Tuple[str, bool]], measure: Callable[[str], float],
                is_bullet_start: bool, indent: float) -> PhysicalLine:
    fragments: List[LineFragment] = []
    consumed = ""
    pending_text = ""
    pending_bold = None
    pending_x = 0.0

    for piece, bold in placed:
        if pending_bold is None or bold != pending_bold:
            if pending_bold is not None:
                fragments.append(LineFragment(text=pending_text, bold=pending_bold, x=pending_x))
            pending_text, pending_bold, pending_x = "", bold, measure(consumed)
        pending_text += piece
        consumed += piece

    if pending_bold is not None:
        fragments.append(LineFragment(text=pending_text, bold=pending_bold, x=pending_x))

    return PhysicalLine(fragments=fragments, is_bullet_start=is_bullet_start, indent=indent)


def wrap_line(parsed: ParsedLine, max_width: float, measure: Callable[[str], float],
              bullet_indent: float = 0.0) -> List[PhysicalLine]:
    """
    Wrap one logical line into physical lines.

    Args:
        parsed: Output of the inline markup splitter
        max_width: Available width from the left margin, in points
        measure: Width function for the document font and size
        bullet_indent: Indent applied to every line of a bulleted logical line

    Returns:
        Physical lines in drawing order. A word wider than the limit is placed
        alone on its own line.
    """
    indent = bullet_indent if parsed.is_bullet else 0.0
    limit = max_width - indent
    words = tokenize(parsed.runs)

    if not words:
        if parsed.is_bullet:
            return [PhysicalLine(fragments=[], is_bullet_start=True, indent=indent)]
        return []

    groups: List[List[Tuple[str, bool]]] = []
    current: List[Tuple[str, bool]] = []
    current_text = ""

    for word in words:
        if not current:
            current = [(word.text, word.bold)]
            current_text = word.text
            continue

        piece = " " * word.spaces + word.text
        candidate = current_text + piece
        if measure(candidate) <= limit:
            current.append((piece, word.bold))
            current_text = candidate
        else:
            groups.append(current)
            current = [(word.text, word.bold)]
            current_text = word.text

    groups.append(current)

    return [
        _build_line(group, measure, parsed.is_bullet and index == 0, indent)
        for index, group in enumerate(groups)
    ]
