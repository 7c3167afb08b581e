"""Ordered and unordered lists."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from markdown_dsl.elements.base import Element, Line
from markdown_dsl.exceptions import InvalidArgumentError
from markdown_dsl.text import indent_item, trim_blank_lines

# Spaces between a list marker and the item text.
MARKER_GAP = 2


class UnorderedListTag(Enum):
    """Unordered list marker; the value is the markdown tag.

    Renders as:

        * ASTERISK
        + PLUS
        - HYPHEN
    """

    ASTERISK = "*"
    PLUS = "+"
    HYPHEN = "-"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: UnorderedListTag | str) -> UnorderedListTag:
        """Accept a member, a name ("plus", case-insensitive) or a tag ("+")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value.upper() == member.name or value == member.value:
                    return member
        raise InvalidArgumentError("tag", f"unknown unordered list tag {value!r}")


@dataclass(frozen=True)
class ListItem(Element):
    """Container for the content of a single list item.

    Children are placed one per line. A blank line follows every block-level
    child and precedes every child that carries its own leading blank line
    (headings), while plain lines stay adjacent:

        First item          <- line
        *  First sub item   <- sublist directly below
        *  Second sub item

        Closing paragraph   <- blank line after the sublist
    """

    children: tuple[Element, ...] = ()

    @classmethod
    def of(cls, text: str) -> ListItem:
        return cls((Line(text),))

    @property
    def loose(self) -> bool:
        """True when the item holds block content or spans several lines."""
        return any(child.block for child in self.children) or "\n" in self.render()

    def render(self) -> str:
        parts: list[str] = []
        previous: Element | None = None
        for child in self.children:
            text = trim_blank_lines(child.render())
            if not text:
                continue
            if previous is not None:
                parts.append("\n\n" if previous.block or child.leading_blank else "\n")
            parts.append(text)
            previous = child
        return "".join(parts)


@dataclass(frozen=True)
class MarkdownList(Element):
    """Shared rendering of ordered and unordered lists.

    Each item is indented by its marker width plus ``MARKER_GAP`` so that
    continuation lines line up under the first character of the item text.
    Neighbouring items are separated by a blank line when either of them is
    loose; runs of single-line items stay tight.
    """

    items: tuple[ListItem, ...] = ()

    @abstractmethod
    def marker(self, index: int) -> str:
        """Marker for the item at zero-based ``index``."""
        ...

    def render(self) -> str:
        parts: list[str] = []
        for index, item in enumerate(self.items):
            marker = self.marker(index)
            if index:
                parts.append("\n\n" if item.loose or self.items[index - 1].loose else "\n")
            parts.append(indent_item(item.render(), marker, " " * (len(marker) + MARKER_GAP)))
        return "".join(parts)


@dataclass(frozen=True)
class UnorderedList(MarkdownList):
    """Bulleted list.

        *  Item 1
        *  Item 2
    """

    tag: UnorderedListTag = UnorderedListTag.ASTERISK

    @classmethod
    def of(cls, items: Iterable[str], tag: UnorderedListTag = UnorderedListTag.ASTERISK) -> UnorderedList:
        return cls(tuple(ListItem.of(item) for item in items), tag)

    def marker(self, index: int) -> str:
        return self.tag.tag


@dataclass(frozen=True)
class OrderedList(MarkdownList):
    """Numbered list, counting from 1.

    The indent grows with the number width:

        1.  Item 1
            More about item 1
        ...
        10.  Item 10
             More about item 10
    """

    @classmethod
    def of(cls, items: Iterable[str]) -> OrderedList:
        return cls(tuple(ListItem.of(item) for item in items))

    def marker(self, index: int) -> str:
        return f"{index + 1}."
