"""Block quotes."""

from __future__ import annotations

from dataclasses import dataclass

from markdown_dsl.elements.base import Element, Line
from markdown_dsl.text import join_blocks, prefix_lines


@dataclass(frozen=True)
class BlockQuote(Element):
    """Quoted block of arbitrary block content.

    Children are joined like top-level document elements, then every line is
    prefixed with ``"> "``; blank lines become a bare ``">"``. Nested quotes
    compose because prefixing works on the final rendered text:

        > *  First item
        > *  Second item
        >
        > Second sentence
    """

    children: tuple[Element, ...] = ()

    @classmethod
    def of(cls, text: str) -> BlockQuote:
        return cls((Line(text),))

    def render(self) -> str:
        body = join_blocks(child.render() for child in self.children)
        if not body:
            return ""
        return prefix_lines(body)
