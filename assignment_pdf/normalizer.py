"""
Plain-text normalisation of generated answers.

Removes markdown emphasis, code and heading markers, turns bullets into
numbered items and tidies whitespace so the text can be shown as-is or placed
in the HTML submission template.

License: MIT
"""

import re

FENCE_LINE = re.compile(r"^[ \t]*```.*$", re.MULTILINE)
BULLET = re.compile(r"^[ \t]*[-*][ \t]+", re.MULTILINE)
HEADING = re.compile(r"^[ \t]*(?:#+[ \t]+)+", re.MULTILINE)
BOLD_STARS = re.compile(r"\*\*([^*\n]+?)\*\*")
BOLD_UNDERSCORES = re.compile(r"__([^_\n]+?)__")
ITALIC_STARS = re.compile(r"\*([^*\n]+?)\*")
ITALIC_UNDERSCORES = re.compile(r"(?<!\w)_([^_\n]+?)_(?!\w)")
INLINE_CODE = re.compile(r"`([^`\n]+)`")
INLINE_SPACE = re.compile(r"[ \t\f\v]+")
BLANK_RUN = re.compile(r"\n{3,}")


def _normalize_pass(text: str) -> str:
    text = FENCE_LINE.sub("", text)
    text = HEADING.sub("", text)
    # Bullets go before italics so "* item" is not read as emphasis
    text = BULLET.sub("1. ", text)
    text = BOLD_STARS.sub(r"\1", text)
    text = BOLD_UNDERSCORES.sub(r"\1", text)
    text = ITALIC_STARS.sub(r"\1", text)
    text = ITALIC_UNDERSCORES.sub(r"\1", text)
    text = INLINE_CODE.sub(r"\1", text)

    lines = [INLINE_SPACE.sub(" ", line).strip() for line in text.split("\n")]
    text = "\n".join(lines).strip("\n")
    return BLANK_RUN.sub("\n\n", text)


def normalize(text: str) -> str:
    """
    Strip markdown markers and tidy whitespace.

    Line boundaries are kept; runs of two or more blank lines become a single
    blank line. normalize(normalize(x)) == normalize(x).
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    # Unwrapping can expose a new marker (e.g. "**-** item"), so repeat until stable
    while True:
        result = _normalize_pass(text)
        if result == text:
            return result
        text = result
