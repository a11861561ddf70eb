"""
Inline markup splitting for one logical line.

Recognises a leading "- " bullet marker and paired ``**`` bold delimiters.
Anything else, including an unpaired ``**``, is plain text.

License: MIT
"""

import re
from typing import List

from assignment_pdf.models import ParsedLine, StyledRun

BULLET_PATTERN = re.compile(r"^-\s+")
BOLD_DELIMITER = "**"


def split_runs(text: str) -> List[StyledRun]:
    """
    Split text into bold and plain runs.

    Args:
        text: One logical line without newlines

    Returns:
        Ordered runs; adjacent plain runs are merged and empty runs dropped
    """
    runs: List[StyledRun] = []

    def append(part: str, bold: bool):
        if not part:
            return
        if runs and not bold and not runs[-1].bold:
            runs[-1] = StyledRun(text=runs[-1].text + part, bold=False)
        else:
            runs.append(StyledRun(text=part, bold=bold))

    position = 0
    while position < len(text):
        start = text.find(BOLD_DELIMITER, position)
        if start == -1:
            break
        end = text.find(BOLD_DELIMITER, start + len(BOLD_DELIMITER))
        if end == -1:
            # Unpaired delimiter: the rest stays plain, delimiter included
            break
        append(text[position:start], False)
        append(text[start + len(BOLD_DELIMITER):end], True)
        position = end + len(BOLD_DELIMITER)

    append(text[position:], False)
    return runs


def parse_line(text: str) -> ParsedLine:
    """Strip a leading bullet marker and split the remainder into runs."""
    match = BULLET_PATTERN.match(text)
    if match:
        return ParsedLine(runs=split_runs(text[match.end():]), is_bullet=True)
    return ParsedLine(runs=split_runs(text), is_bullet=False)
