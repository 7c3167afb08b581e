"""Base element type and the leaf elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class Element(ABC):
    """A node of the content tree.

    Elements are immutable once built and render only themselves plus their
    children; separating an element from its siblings is the job of the
    container holding it.

    Class flags describe how a container should place the element:

    - ``block``: block-level content. Inside a list item a blank line follows
      it, and a list item holding one is loose.
    - ``leading_blank``: the element's own output starts with a blank line
      (headings, rules), so a blank line also precedes it inside list items.
    """

    block: ClassVar[bool] = True
    leading_blank: ClassVar[bool] = False

    @abstractmethod
    def render(self) -> str:
        """Render this element to Markdown."""
        ...

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Line(Element):
    """Raw text, rendered exactly as given.

    The text may span several lines; containers decide how to sanitise it.
    """

    text: str

    block: ClassVar[bool] = False

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class HorizontalRule(Element):
    """Thematic break, preceded by a blank line."""

    marker: ClassVar[str] = "---"
    leading_blank: ClassVar[bool] = True

    def render(self) -> str:
        return "\n" + self.marker
