"""Element types of the Markdown content tree."""

from markdown_dsl.elements.base import Element, HorizontalRule, Line
from markdown_dsl.elements.headings import (
    Heading,
    HeadingSize,
    UnderlinedHeading,
    UnderlinedHeadingStyle,
)
from markdown_dsl.elements.lists import (
    ListItem,
    MarkdownList,
    OrderedList,
    UnorderedList,
    UnorderedListTag,
)
from markdown_dsl.elements.paragraphs import Paragraph
from markdown_dsl.elements.quotes import BlockQuote

__all__ = [
    "Element",
    "Line",
    "HorizontalRule",
    "Heading",
    "HeadingSize",
    "UnderlinedHeading",
    "UnderlinedHeadingStyle",
    "Paragraph",
    "BlockQuote",
    "ListItem",
    "MarkdownList",
    "OrderedList",
    "UnorderedList",
    "UnorderedListTag",
]
