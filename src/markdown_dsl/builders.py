"""Builders that accumulate child elements and freeze them into elements.

Each builder owns a growable list of children while it is being configured
and produces one immutable element from ``build()``. What a builder may hold
is expressed by the capability mixins it inherits: a paragraph builder only
has ``line()``, a list builder only has ``item()``, and so on. Anything added
through the generic ``add()`` is checked against the same capability set.

Example:
    builder = UnorderedListBuilder()
    builder.item("First item").item(lambda item: item.paragraph(["Second", "item"]))
    print(builder.build().render())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import ClassVar, Self, TypeVar

from markdown_dsl.config import RenderSettings
from markdown_dsl.elements import (
    BlockQuote,
    Element,
    Heading,
    HeadingSize,
    HorizontalRule,
    Line,
    ListItem,
    OrderedList,
    Paragraph,
    UnderlinedHeading,
    UnderlinedHeadingStyle,
    UnorderedList,
    UnorderedListTag,
)
from markdown_dsl.exceptions import (
    BuilderFinalizedError,
    InvalidArgumentError,
    UnsupportedElementError,
)

B = TypeVar("B", bound="ElementBuilder")

Text = str | Callable[[], str]


def resolve_text(text: Text) -> str:
    """Return ``text`` itself, or the result of calling it."""
    value = text() if callable(text) else text
    if not isinstance(value, str):
        raise InvalidArgumentError("text", f"expected a string, got {type(value).__name__}")
    return value


class ElementBuilder(ABC):
    """Base class for all builders.

    Subclasses declare the element kinds they contribute in ``provides``;
    the accepted set of a concrete builder is the union over its bases.
    """

    provides: ClassVar[tuple[type[Element], ...]] = ()
    accepts: ClassVar[tuple[type[Element], ...]] = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        kinds: list[type[Element]] = []
        for base in reversed(cls.__mro__):
            kinds.extend(base.__dict__.get("provides", ()))
        cls.accepts = tuple(dict.fromkeys(kinds))

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self.settings = settings or RenderSettings()
        self.elements: list[Element] = []
        self._built = False

    @property
    def built(self) -> bool:
        return self._built

    def add(self, element: Element) -> Self:
        """Append an already-built element."""
        name = type(self).__name__
        if self._built:
            raise BuilderFinalizedError(name)
        if not isinstance(element, self.accepts):
            raise UnsupportedElementError(name, type(element).__name__)
        self.elements.append(element)
        return self

    def build(self) -> Element:
        """Freeze the accumulated children into an element. Single use."""
        if self._built:
            raise BuilderFinalizedError(type(self).__name__)
        self._built = True
        return self._finalize(tuple(self.elements))

    @abstractmethod
    def _finalize(self, children: tuple[Element, ...]) -> Element:
        ...

    def _nested(self, builder_class: type[B], configure: Callable[[B], object], *args) -> Element:
        """Run ``configure`` on a fresh child builder sharing these settings."""
        builder = builder_class(*args, settings=self.settings)
        configure(builder)
        return builder.build()


# Capabilities


class TextSpanCapable(ElementBuilder):
    """Parents that can hold raw lines."""

    provides = (Line,)

    def line(self, text: Text) -> Self:
        """Add a line of raw text."""
        return self.add(Line(resolve_text(text)))


class HeadingCapable(ElementBuilder):
    """Parents that can hold ATX and Setext headings."""

    provides = (Heading, UnderlinedHeading)

    def heading(self, text: Text, size: HeadingSize | int | str | None = None) -> Self:
        """Add an ATX heading; ``size`` defaults to the settings' heading size."""
        size = HeadingSize.coerce(size) if size is not None else self.settings.heading_size
        return self.add(Heading(resolve_text(text), size))

    def underlined_heading(
        self,
        text: Text,
        style: UnderlinedHeadingStyle | int | str | None = None,
    ) -> Self:
        """Add a Setext heading; ``style`` defaults to the settings' style."""
        if style is not None:
            style = UnderlinedHeadingStyle.coerce(style)
        else:
            style = self.settings.underlined_heading_style
        return self.add(UnderlinedHeading(resolve_text(text), style))


class HorizontalRuleCapable(ElementBuilder):
    """Parents that can hold horizontal rules."""

    provides = (HorizontalRule,)

    def horizontal_rule(self) -> Self:
        return self.add(HorizontalRule())


class ParagraphCapable(ElementBuilder):
    """Parents that can hold paragraphs."""

    provides = (Paragraph,)

    def paragraph(self, lines: str | Sequence[str] | Callable[[ParagraphBuilder], object]) -> Self:
        """Add a paragraph from a list of lines or a configure callable.

        A single string is treated as a one-line paragraph.
        """
        if callable(lines):
            return self.add(self._nested(ParagraphBuilder, lines))
        if isinstance(lines, str):
            lines = [lines]
        return self.add(Paragraph.of(lines))


class BlockQuoteCapable(ElementBuilder):
    """Parents that can hold block quotes."""

    provides = (BlockQuote,)

    def block_quote(self, content: str | Callable[[BlockQuoteBuilder], object]) -> Self:
        """Add a block quote from raw text or a configure callable."""
        if callable(content):
            return self.add(self._nested(BlockQuoteBuilder, content))
        return self.add(BlockQuote.of(content))


def _list_items(items: Sequence[str]) -> tuple[ListItem, ...]:
    if isinstance(items, str):
        raise InvalidArgumentError("items", "expected a sequence of strings, got a single string")
    return tuple(ListItem.of(item) for item in items)


class ListCapable(ElementBuilder):
    """Parents that can hold ordered and unordered lists."""

    provides = (OrderedList, UnorderedList)

    def ordered_list(self, items: Sequence[str] | Callable[[OrderedListBuilder], object]) -> Self:
        """Add an ordered list from item strings or a configure callable."""
        if callable(items):
            return self.add(self._nested(OrderedListBuilder, items))
        return self.add(OrderedList(_list_items(items)))

    def unordered_list(
        self,
        items: Sequence[str] | Callable[[UnorderedListBuilder], object],
        tag: UnorderedListTag | str | None = None,
    ) -> Self:
        """Add an unordered list; ``tag`` defaults to the settings' list tag."""
        tag = UnorderedListTag.coerce(tag) if tag is not None else self.settings.unordered_list_tag
        if callable(items):
            return self.add(self._nested(UnorderedListBuilder, items, tag))
        return self.add(UnorderedList(_list_items(items), tag))


class ListItemCapable(ElementBuilder):
    """List builders: the only parents of list items."""

    provides = (ListItem,)

    def item(self, content: str | Callable[[ListItemBuilder], object]) -> Self:
        """Add a list item from plain text or a configure callable."""
        if callable(content):
            return self.add(self._nested(ListItemBuilder, content))
        return self.add(ListItem.of(content))


# Concrete builders


class ParagraphBuilder(TextSpanCapable):
    """Builder for ``Paragraph``."""

    def _finalize(self, children: tuple[Element, ...]) -> Paragraph:
        return Paragraph(children)


class BlockQuoteBuilder(
    TextSpanCapable,
    HeadingCapable,
    HorizontalRuleCapable,
    ParagraphCapable,
    BlockQuoteCapable,
    ListCapable,
):
    """Builder for ``BlockQuote``."""

    def _finalize(self, children: tuple[Element, ...]) -> BlockQuote:
        return BlockQuote(children)


class ListItemBuilder(
    TextSpanCapable,
    HeadingCapable,
    ParagraphCapable,
    BlockQuoteCapable,
    ListCapable,
):
    """Builder for ``ListItem``."""

    def _finalize(self, children: tuple[Element, ...]) -> ListItem:
        return ListItem(children)


class OrderedListBuilder(ListItemCapable):
    """Builder for ``OrderedList``."""

    def _finalize(self, children: tuple[Element, ...]) -> OrderedList:
        return OrderedList(children)


class UnorderedListBuilder(ListItemCapable):
    """Builder for ``UnorderedList``."""

    def __init__(
        self,
        tag: UnorderedListTag | str | None = None,
        settings: RenderSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self.tag = UnorderedListTag.coerce(tag) if tag is not None else self.settings.unordered_list_tag

    def _finalize(self, children: tuple[Element, ...]) -> UnorderedList:
        return UnorderedList(children, self.tag)
