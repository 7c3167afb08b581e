"""Text utilities shared by the element renderers.

Every composite element applies the same handful of line-level operations to
its children's output; they live here so that nesting composes the same way at
every depth.
"""

import re
from collections.abc import Iterable

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

BLANK_LINE_SEPARATOR = "\n\n"
QUOTE_PREFIX = "> "
QUOTE_BLANK = ">"


def split_lines(text: str) -> list[str]:
    """Split text on any line terminator, keeping empty trailing lines."""
    return _LINE_BREAK.split(text)


def is_blank(text: str) -> bool:
    """True for empty or whitespace-only text."""
    return not text.strip()


def trim_blank_lines(text: str) -> str:
    """Remove leading and trailing blank lines.

    Whitespace inside the remaining lines is preserved, including the two
    trailing spaces of a hard line break.
    """
    lines = split_lines(text)
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return "\n".join(lines[start:end])


def collapse_lines(text: str) -> str:
    """Collapse multi-line text into a single line.

    Blank lines are dropped and the remaining lines are trimmed and joined
    with a single space. Used for headings, which cannot span lines.
    """
    return " ".join(line.strip() for line in split_lines(text) if not is_blank(line)).strip()


def join_blocks(blocks: Iterable[str]) -> str:
    """Join rendered sibling blocks with exactly one blank line between them.

    Each block is trimmed of its own leading/trailing blank lines first and
    blank blocks are skipped, so element conventions like a heading's leading
    blank line never double up.
    """
    trimmed = (trim_blank_lines(block) for block in blocks)
    return BLANK_LINE_SEPARATOR.join(block for block in trimmed if block)


def indent_item(content: str, marker: str, indent: str) -> str:
    """Indent list item content and put ``marker`` in front of its first line.

    Non-blank lines are prefixed with ``indent``; blank lines stay empty. The
    first ``len(marker)`` characters of the result are then replaced by the
    marker, so the item text starts right after ``indent`` on every line:

        1.  Line 1
            Line 2
        10.  Line 1
             Line 2
    """
    lines = [indent + line if not is_blank(line) else "" for line in split_lines(content)]
    lines[0] = marker + lines[0][len(marker) :] if lines[0] else marker
    return "\n".join(lines)


def prefix_lines(text: str, prefix: str = QUOTE_PREFIX, blank: str = QUOTE_BLANK) -> str:
    """Prefix every line of ``text``; blank lines become ``blank`` exactly."""
    return "\n".join(blank if is_blank(line) else prefix + line for line in split_lines(text))
