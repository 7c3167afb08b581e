"""Paragraphs of hard-broken lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from markdown_dsl.elements.base import Element, Line
from markdown_dsl.text import split_lines

LINE_BREAK = "  \n"


@dataclass(frozen=True)
class Paragraph(Element):
    """Consecutive lines separated by Markdown hard line breaks.

    Every line of every child is trimmed and blank lines are dropped, so the
    paragraph never contains a blank line. The output always ends with a newline; an
    all-blank paragraph renders as an empty line.

        Paragraph.of(["First line", "Second line"]).render()
        -> "First line  \\nSecond line\\n"
    """

    children: tuple[Element, ...] = ()

    @classmethod
    def of(cls, lines: Iterable[str]) -> Paragraph:
        return cls(tuple(Line(line) for line in lines))

    def render(self) -> str:
        lines = (line.strip() for child in self.children for line in split_lines(child.render()))
        return LINE_BREAK.join(line for line in lines if line) + "\n"
